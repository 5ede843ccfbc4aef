from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services import container
from services.rocket.handlers.request_models import CreateRocketRequest
from services.rocket.handlers.response_models import to_response
from services.shared.applications import Success
from services.shared.utils.http_response import (
    api_response,
    bad_request,
    failure_response,
)

logger = Logger()

service = container.create_rocket_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ロケット登録 Lambda Handler (POST /rockets)"""
    logger.info("Received create rocket request")

    try:
        request = CreateRocketRequest.model_validate_json(event.body or "{}")
    except ValidationError:
        logger.warning("Invalid create rocket request body")
        return bad_request("invalid request body")

    result = service.create(
        name=request.name,
        capacity=request.capacity,
        speed=request.speed,
        range=request.range,
    )
    match result:
        case Success(value=rocket):
            return api_response(201, to_response(rocket))
        case _:
            return failure_response(result)
