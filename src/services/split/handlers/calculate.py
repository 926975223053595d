from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.split.handlers.dependencies import api_errors, factory, present
from services.split.handlers.request_models import SplitStateRequest

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@api_errors(logger)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """割り勘計算 Lambda Handler"""
    logger.info("Received calculate split request")

    request = SplitStateRequest.model_validate_json(event.decoded_body or "{}")
    split = factory.create(request.to_details())

    logger.info(
        "Calculating split",
        extra={"people": len(split.people), "nights": split.nights()},
    )
    return present(split)
