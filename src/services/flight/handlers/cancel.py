from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services import container
from services.flight.handlers.response_models import to_response
from services.shared.applications import Success
from services.shared.utils.http_response import api_response, failure_response

logger = Logger()

service = container.cancel_flight_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """フライト欠航 Lambda Handler (POST /flights/{flight_id}/cancel)"""
    flight_id = (event.path_parameters or {}).get("flight_id", "")
    logger.info("Received cancel flight request", extra={"flight_id": flight_id})

    result = service.cancel(flight_id)
    match result:
        case Success(value=flight):
            return api_response(200, to_response(flight))
        case _:
            return failure_response(result)
