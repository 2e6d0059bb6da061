"""Saved items on a trip: POST /api/trips/{tripId}/{kind}, DELETE .../{kind}/{itemId}."""

from typing import Any

from core.clients import get_dynamo_client
from core.config import get_config
from core.errors import ErrorCode, ValidationError
from core.responses import api_handler, current_user_id, json_response, parse_json_body, path_param
from core.services.trips import add_saved_item, remove_saved_item


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    user_id = current_user_id(event)
    trip_id = path_param(event, "tripId") or ""
    kind = path_param(event, "kind") or ""
    method = (event.get("httpMethod") or "").upper()

    dynamo_client = get_dynamo_client()
    table = get_config().trips_table

    if method == "POST":
        trip = add_saved_item(trip_id, user_id, kind, parse_json_body(event), dynamo_client, table)
        return json_response(200, trip.to_json_dict())
    if method == "DELETE":
        item_id = path_param(event, "itemId")
        if not item_id:
            raise ValidationError("Saved item id is required", code=ErrorCode.INVALID_REQUEST)
        trip = remove_saved_item(trip_id, user_id, kind, item_id, dynamo_client, table)
        return json_response(200, trip.to_json_dict())

    raise ValidationError(f"Unsupported method {method}", code=ErrorCode.INVALID_REQUEST)
