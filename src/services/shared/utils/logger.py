import os

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "split-service"


def get_logger(service_name: str | None = None) -> Logger:
    """サービス名付きの構造化ロガーを返す

    サービス名を省略した場合は POWERTOOLS_SERVICE_NAME を使う。
    """
    name = service_name or os.environ.get(
        "POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME
    )
    return Logger(service=name)
