from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services import container
from services.flight.handlers.response_models import to_list_response
from services.shared.applications import Success
from services.shared.utils.http_response import api_response, failure_response

logger = Logger()

service = container.list_future_flights_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """未来のフライト一覧取得 Lambda Handler (GET /flights?state=...)"""
    state = (event.query_string_parameters or {}).get("state")
    logger.info("Listing future flights", extra={"state": state})

    result = service.list(state)
    match result:
        case Success(value=flights):
            return api_response(200, to_list_response(flights))
        case _:
            return failure_response(result)
