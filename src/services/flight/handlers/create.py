from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services import container
from services.flight.handlers.request_models import CreateFlightRequest
from services.flight.handlers.response_models import to_response
from services.shared.applications import Success
from services.shared.utils.http_response import (
    api_response,
    bad_request,
    failure_response,
)

logger = Logger()

service = container.create_flight_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """フライト登録 Lambda Handler (POST /flights)"""
    logger.info("Received create flight request")

    try:
        request = CreateFlightRequest.model_validate_json(event.body or "{}")
    except ValidationError:
        logger.warning("Invalid create flight request body")
        return bad_request("invalid request body")

    result = service.create(
        rocket_id=request.rocket_id,
        launch_date=request.launch_date,
        base_price=request.base_price,
        minimum_passengers=request.minimum_passengers,
    )
    match result:
        case Success(value=flight):
            return api_response(201, to_response(flight))
        case _:
            return failure_response(result)
