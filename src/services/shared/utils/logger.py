import os

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "astro-bookings"


def get_logger(service_name: str | None = None) -> Logger:
    """構造化ロガーを取得する

    サービス名は引数 > 環境変数 POWERTOOLS_SERVICE_NAME > 既定値 の順で決定する。
    """
    return Logger(
        service=service_name
        or os.getenv("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME)
    )
