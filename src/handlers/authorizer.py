"""REST API Lambda authorizer that validates the Bearer JWT on protected routes."""

import logging
from typing import Any

from core.auth import get_auth_provider
from core.errors import AuthenticationError

logger = logging.getLogger(__name__)


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    try:
        token = _bearer_token(event)
        auth_user = get_auth_provider().verify_token(token)
        return _allow_policy(event["methodArn"], auth_user.user_id)
    except (KeyError, AuthenticationError) as e:
        logger.info("Denying request: %s", e)
        return _deny_policy(event["methodArn"])


def _bearer_token(event: dict[str, Any]) -> str:
    headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}
    scheme, _, token = (headers.get("authorization") or "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("No token, authorization denied")
    return token.strip()


def _allow_policy(method_arn: str, user_id: str) -> dict[str, Any]:
    return {
        "principalId": user_id,
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [{"Action": "execute-api:Invoke", "Effect": "Allow", "Resource": method_arn}],
        },
        "context": {"userId": user_id},
    }


def _deny_policy(method_arn: str) -> dict[str, Any]:
    return {
        "principalId": "unauthorized",
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [{"Action": "execute-api:Invoke", "Effect": "Deny", "Resource": method_arn}],
        },
    }
