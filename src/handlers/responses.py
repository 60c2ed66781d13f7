"""Shared request parsing and response shaping for API Gateway proxy handlers."""

import json
import logging
from typing import Any

from cart_core.config import get_config
from cart_core.errors import CartServiceError, ErrorCode

CART_TOKEN_HEADER = "x-cart-token"

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.INVALID_PARAM: 400,
    ErrorCode.CART_NOT_FOUND: 404,
}


def configure_logging() -> None:
    logging.getLogger().setLevel(get_config().log_level)


def cart_request_params(event: dict[str, Any]) -> tuple[str | None, str | None]:
    """Return (cart_id, cart_token) from the path, headers or query string."""
    path_params = event.get("pathParameters") or {}
    query_params = event.get("queryStringParameters") or {}
    headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}

    cart_id = path_params.get("cartId") or query_params.get("cartId")
    cart_token = headers.get(CART_TOKEN_HEADER) or query_params.get("cartToken")
    return cart_id, cart_token


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(error: CartServiceError) -> dict[str, Any]:
    """Client-facing error — carries the code and user message, never the internal message."""
    status_code = _STATUS_BY_CODE.get(error.code, 500)
    return json_response(status_code, {"code": error.code.value, "user_message": error.user_message})
