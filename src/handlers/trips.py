"""Trip CRUD routes: /api/trips and /api/trips/{tripId}."""

from typing import Any

from core.clients import get_dynamo_client
from core.config import get_config
from core.errors import ErrorCode, ValidationError
from core.models import TripCreate, TripUpdate, parse_model
from core.responses import api_handler, current_user_id, json_response, parse_json_body, path_param
from core.services import trips


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    user_id = current_user_id(event)
    trip_id = path_param(event, "tripId")
    method = (event.get("httpMethod") or "").upper()

    dynamo_client = get_dynamo_client()
    table = get_config().trips_table

    if trip_id is None:
        if method == "POST":
            data = parse_model(TripCreate, parse_json_body(event))
            trip = trips.create_trip(user_id, data, dynamo_client, table)
            return json_response(201, trip.to_json_dict())
        if method == "GET":
            found = trips.list_trips(user_id, dynamo_client, table)
            return json_response(200, [trip.to_json_dict() for trip in found])
    else:
        if method == "GET":
            trip = trips.get_trip(trip_id, user_id, dynamo_client, table)
            return json_response(200, trip.to_json_dict())
        if method == "PUT":
            changes = parse_model(TripUpdate, parse_json_body(event))
            trip = trips.update_trip(trip_id, user_id, changes, dynamo_client, table)
            return json_response(200, trip.to_json_dict())
        if method == "DELETE":
            trips.delete_trip(trip_id, user_id, dynamo_client, table)
            return json_response(200, {"msg": "Trip removed"})

    raise ValidationError(f"Unsupported method {method}", code=ErrorCode.INVALID_REQUEST)
