import functools
import os
from typing import Callable

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from services.shared.domain import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from services.shared.utils import api_response, error_response
from services.split.applications.calculate_split import CalculateSplitService
from services.split.applications.edit_split import EditSplitService
from services.split.applications.share_split import ShareSplitService
from services.split.applications.summarize_split import SummarizeSplitService
from services.split.domain.entity import BillSplit
from services.split.domain.factory import BillSplitFactory
from services.split.handlers.response_models import to_response
from services.split.infrastructure.fragment_split_state_repository import (
    FragmentSplitStateRepository,
)

CURRENCY_SYMBOL = os.environ.get("CURRENCY_SYMBOL", "$")

factory = BillSplitFactory()
repository = FragmentSplitStateRepository(factory=factory)
calculate_service = CalculateSplitService()
edit_service = EditSplitService()
share_service = ShareSplitService(repository=repository)
summarize_service = SummarizeSplitService(calculator=calculate_service)


def present(split: BillSplit) -> dict:
    """計算結果・サマリー・共有トークンを付けて 200 レスポンスを返す"""
    calculation = calculate_service.calculate(split)
    summary = summarize_service.summarize(
        split, currency_symbol=CURRENCY_SYMBOL, calculation=calculation
    )
    token = share_service.share(split)
    return api_response(200, to_response(split, calculation, summary, token))


def api_errors(logger: Logger) -> Callable:
    """例外を API Gateway のエラーレスポンスに変換するデコレータ"""

    def decorator(handler: Callable) -> Callable:
        @functools.wraps(handler)
        def wrapper(event, context) -> dict:
            try:
                return handler(event, context)
            except ValidationError as e:
                logger.info("Invalid request", extra={"errors": e.error_count()})
                return error_response(
                    400,
                    "Invalid request",
                    errors=e.errors(include_url=False, include_context=False),
                )
            except ResourceNotFoundException as e:
                return error_response(404, str(e))
            except (BusinessRuleViolationException, ValueError) as e:
                return error_response(422, str(e))
            except Exception:
                logger.exception("Unexpected error")
                return error_response(500, "Internal server error")

        return wrapper

    return decorator
