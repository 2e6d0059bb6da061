"""POST /api/auth/register."""

from typing import Any

from core.auth import get_auth_provider
from core.clients import get_dynamo_client
from core.config import get_config
from core.models import RegisterRequest, parse_model
from core.responses import api_handler, json_response, parse_json_body
from core.services.users import register_user


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    request = parse_model(RegisterRequest, parse_json_body(event))
    config = get_config()

    user = register_user(request, get_dynamo_client(), config.users_table)
    token = get_auth_provider().issue_token(user.user_id)

    return json_response(201, {"token": token})
