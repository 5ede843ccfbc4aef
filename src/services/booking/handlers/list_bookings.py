from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services import container
from services.booking.handlers.response_models import to_list_response
from services.shared.applications import Success
from services.shared.utils.http_response import api_response, failure_response

logger = Logger()

service = container.list_bookings_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler (GET /flights/{flight_id}/bookings)"""
    flight_id = (event.path_parameters or {}).get("flight_id", "")
    logger.info("Listing bookings", extra={"flight_id": flight_id})

    result = service.list(flight_id)
    match result:
        case Success(value=bookings):
            return api_response(200, to_list_response(bookings))
        case _:
            return failure_response(result)
