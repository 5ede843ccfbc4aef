from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services import container
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import to_response
from services.shared.applications import Success
from services.shared.utils.http_response import (
    api_response,
    bad_request,
    failure_response,
)

logger = Logger()

service = container.create_booking_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler (POST /flights/{flight_id}/bookings)"""
    flight_id = (event.path_parameters or {}).get("flight_id", "")
    logger.info("Received create booking request", extra={"flight_id": flight_id})

    try:
        request = CreateBookingRequest.model_validate_json(event.body or "{}")
    except ValidationError:
        logger.warning("Invalid create booking request body")
        return bad_request("invalid request body")

    result = service.create(
        flight_id=flight_id,
        passenger_name=request.passenger_name,
        passenger_email=request.passenger_email,
    )
    match result:
        case Success(value=booking):
            return api_response(201, to_response(booking))
        case _:
            return failure_response(result)
