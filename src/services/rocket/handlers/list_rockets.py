from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services import container
from services.rocket.handlers.response_models import to_list_response
from services.shared.applications import Success
from services.shared.utils.http_response import api_response, failure_response

logger = Logger()

service = container.get_rocket_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ロケット一覧取得 Lambda Handler (GET /rockets)"""
    logger.info("Listing all rockets")

    result = service.list()
    match result:
        case Success(value=rockets):
            return api_response(200, to_list_response(rockets))
        case _:
            return failure_response(result)
