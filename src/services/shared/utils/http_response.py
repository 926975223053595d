import json

_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": dict(_HEADERS),
        "body": json.dumps(body, default=str, ensure_ascii=False),
    }


def error_response(status_code: int, message: str, **details: object) -> dict:
    """エラーレスポンスを生成する"""
    body: dict = {"status": "error", "message": message}
    if details:
        body["details"] = details
    return api_response(status_code, body)
