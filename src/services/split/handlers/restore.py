from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.split.handlers.dependencies import api_errors, present, share_service
from services.split.handlers.request_models import RestoreSplitRequest

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
@api_errors(logger)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """共有リンク復元 Lambda Handler

    不正なトークンはエラーにせず空の状態を返す。
    """
    logger.info("Received restore split request")

    request = RestoreSplitRequest.model_validate_json(event.decoded_body or "{}")
    split = share_service.restore(request.token)
    return present(split)
