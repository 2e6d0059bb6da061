"""API Gateway proxy plumbing shared by the HTTP handlers.

Handlers stay thin: parse the event with the helpers here, call a service,
and return ``json_response``. ``api_handler`` turns any ``BackpackError`` into
the JSON error body and anything else into a logged 500.
"""

import base64
import binascii
import json
import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

from core.errors import AuthenticationError, BackpackError, ErrorCode, UpstreamError, ValidationError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
}

Handler = Callable[[dict[str, Any], Any], dict[str, Any]]


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json", **CORS_HEADERS},
        "body": json.dumps(body, default=str),
    }


def error_response(error: BackpackError) -> dict[str, Any]:
    body: dict[str, Any] = {"msg": error.user_message, "code": error.code.value}
    if isinstance(error, ValidationError):
        body["errors"] = [{"msg": message} for message in error.errors]
    if isinstance(error, UpstreamError) and error.details is not None:
        body["details"] = error.details
    return json_response(error.status_code, body)


def parse_json_body(event: dict[str, Any]) -> Any:
    """Decoded JSON body; an empty body is an empty object."""
    raw = event.get("body")
    if not raw:
        return {}
    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw).decode("utf-8")
        return json.loads(raw)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValidationError("Request body is not valid JSON", code=ErrorCode.INVALID_REQUEST) from e


def query_params(event: dict[str, Any]) -> dict[str, str]:
    return dict(event.get("queryStringParameters") or {})


def path_param(event: dict[str, Any], name: str) -> str | None:
    return (event.get("pathParameters") or {}).get(name)


def current_user_id(event: dict[str, Any]) -> str:
    """User id placed in the request context by the Lambda authorizer."""
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    user_id = authorizer.get("userId")
    if not user_id:
        raise AuthenticationError("No authenticated user in request context")
    return str(user_id)


def api_handler(func: Handler) -> Handler:
    @wraps(func)
    def wrapper(event: dict[str, Any], context: Any) -> dict[str, Any]:
        try:
            return func(event, context)
        except BackpackError as e:
            log = logger.error if e.status_code >= 500 else logger.info
            log("%s %s failed: %s (%s)", event.get("httpMethod"), event.get("path"), e.message, e.code.value)
            return error_response(e)
        except Exception:
            logger.exception("Unhandled error in %s", func.__module__)
            return error_response(BackpackError("Unhandled error"))

    return wrapper
