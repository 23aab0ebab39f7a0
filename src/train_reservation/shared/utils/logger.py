import os
import sys

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "train-reservation"
DEFAULT_LOG_LEVEL = "WARNING"


def get_logger(service_name: str | None = None) -> Logger:
    """構造化ロガーを取得する

    コンソールの出力と混ざらないよう、ログは stderr に出す。
    """
    return Logger(
        service=service_name
        or os.getenv("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME),
        level=os.getenv("POWERTOOLS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        stream=sys.stderr,
    )
