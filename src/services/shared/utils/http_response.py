import json

from services.shared.applications import (
    Conflict,
    Failure,
    NotFound,
    UnexpectedFailure,
    ValidationFailed,
)


def api_response(status_code: int, body: dict | list) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def failure_response(failure: Failure) -> dict:
    """失敗結果を HTTP ステータスコード付きのレスポンスに変換する"""
    match failure:
        case ValidationFailed(error=error):
            return api_response(400, {"error": error})
        case NotFound(error=error):
            return api_response(404, {"error": error})
        case Conflict(error=error):
            return api_response(409, {"error": error})
        case UnexpectedFailure(error=error):
            return api_response(500, {"error": error})
    raise TypeError(f"Unsupported result: {failure!r}")


def bad_request(message: str) -> dict:
    """リクエスト形式の不正（JSON・スキーマ）を 400 で返す"""
    return api_response(400, {"error": message})
