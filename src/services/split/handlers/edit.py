from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.split.handlers.dependencies import (
    api_errors,
    edit_service,
    factory,
    present,
)
from services.split.handlers.request_models import EditSplitRequest

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@api_errors(logger)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """割り勘編集 Lambda Handler"""
    request = EditSplitRequest.model_validate_json(event.decoded_body or "{}")
    logger.info(
        "Received edit split request", extra={"action": request.operation.action}
    )

    split = factory.create(request.state.to_details())
    edit_service.apply(split, request.operation.to_operation())
    return present(split)
