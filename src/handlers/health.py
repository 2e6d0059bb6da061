"""GET / liveness probe."""

from typing import Any

from core.responses import json_response


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    return json_response(200, {"msg": "Budget Backpack API is running"})
