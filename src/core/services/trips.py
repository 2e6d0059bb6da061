"""Trip CRUD and saved-item management against the Trips table.

Every operation on a single trip checks ownership: an unknown id is
TRIP_NOT_FOUND, a trip owned by someone else is NOT_AUTHORIZED.
"""

import logging
from typing import Any
from uuid import UUID

from botocore.exceptions import ClientError

from core.errors import AuthorizationError, ErrorCode, NotFoundError, ValidationError
from core.models.base import parse_model
from core.models.trip import SAVED_ITEM_KINDS, Trip, TripCreate, TripUpdate
from core.services.storage import from_item, is_conditional_failure, storage_errors, to_item

logger = logging.getLogger(__name__)

USER_TRIPS_INDEX = "userId-createdAt-index"


def _check_trip_id(trip_id: str) -> str:
    try:
        UUID(str(trip_id))
    except ValueError as e:
        raise ValidationError("Invalid trip ID format", code=ErrorCode.INVALID_ID) from e
    return str(trip_id)


def _put_trip(trip: Trip, dynamo_client: Any, trips_table: str, *, must_exist: bool) -> None:
    condition = "attribute_exists(tripId)" if must_exist else "attribute_not_exists(tripId)"
    with storage_errors("put_item"):
        try:
            dynamo_client.put_item(TableName=trips_table, Item=to_item(trip), ConditionExpression=condition)
        except ClientError as e:
            if must_exist and is_conditional_failure(e):
                raise NotFoundError("Trip not found") from e
            raise


def create_trip(user_id: str, data: TripCreate, dynamo_client: Any, trips_table: str) -> Trip:
    trip = Trip(user_id=user_id, **data.model_dump())
    _put_trip(trip, dynamo_client, trips_table, must_exist=False)
    logger.info("Created trip %s for user %s", trip.trip_id, user_id)
    return trip


def list_trips(user_id: str, dynamo_client: Any, trips_table: str) -> list[Trip]:
    """All trips of ``user_id``, newest first."""
    trips: list[Trip] = []
    last_key = None

    while True:
        query_kwargs: dict[str, Any] = {
            "TableName": trips_table,
            "IndexName": USER_TRIPS_INDEX,
            "KeyConditionExpression": "userId = :user_id",
            "ExpressionAttributeValues": {":user_id": {"S": user_id}},
            "ScanIndexForward": False,
        }
        if last_key:
            query_kwargs["ExclusiveStartKey"] = last_key

        with storage_errors("query"):
            response = dynamo_client.query(**query_kwargs)

        trips.extend(Trip.model_validate(from_item(item)) for item in response.get("Items", []))

        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            break

    return trips


def get_trip(trip_id: str, user_id: str, dynamo_client: Any, trips_table: str) -> Trip:
    trip_id = _check_trip_id(trip_id)
    with storage_errors("get_item"):
        response = dynamo_client.get_item(TableName=trips_table, Key={"tripId": {"S": trip_id}})

    item = response.get("Item")
    if not item:
        raise NotFoundError("Trip not found")
    trip = Trip.model_validate(from_item(item))
    if trip.user_id != user_id:
        logger.warning("User %s denied access to trip %s", user_id, trip_id)
        raise AuthorizationError(f"User {user_id} does not own trip {trip_id}")
    return trip


def update_trip(trip_id: str, user_id: str, changes: TripUpdate, dynamo_client: Any, trips_table: str) -> Trip:
    """Apply only the fields present in ``changes`` and re-validate the result."""
    trip = get_trip(trip_id, user_id, dynamo_client, trips_table)
    updated = parse_model(Trip, {**trip.model_dump(), **changes.model_dump(exclude_unset=True)})
    _put_trip(updated, dynamo_client, trips_table, must_exist=True)
    logger.info("Updated trip %s", trip_id)
    return updated


def delete_trip(trip_id: str, user_id: str, dynamo_client: Any, trips_table: str) -> None:
    trip = get_trip(trip_id, user_id, dynamo_client, trips_table)
    with storage_errors("delete_item"):
        dynamo_client.delete_item(TableName=trips_table, Key={"tripId": {"S": trip.trip_id}})
    logger.info("Deleted trip %s", trip.trip_id)


def _saved_item_kind(kind: str) -> tuple[str, type, str]:
    try:
        return SAVED_ITEM_KINDS[kind]
    except KeyError as e:
        allowed = ", ".join(sorted(SAVED_ITEM_KINDS))
        raise ValidationError(f"Unknown saved item type '{kind}'. Use one of: {allowed}.") from e


def add_saved_item(
    trip_id: str,
    user_id: str,
    kind: str,
    data: Any,
    dynamo_client: Any,
    trips_table: str,
) -> Trip:
    """Save a flight, accommodation or activity on a trip.

    An item with the same provider id replaces the earlier copy.
    """
    attribute, model, id_field = _saved_item_kind(kind)
    item = parse_model(model, data)
    trip = get_trip(trip_id, user_id, dynamo_client, trips_table)

    item_id = getattr(item, id_field)
    items = [existing for existing in getattr(trip, attribute) if getattr(existing, id_field) != item_id]
    items.append(item)
    updated = trip.model_copy(update={attribute: items})

    _put_trip(updated, dynamo_client, trips_table, must_exist=True)
    logger.info("Saved %s item %s on trip %s", kind, item_id, trip.trip_id)
    return updated


def remove_saved_item(
    trip_id: str,
    user_id: str,
    kind: str,
    item_id: str,
    dynamo_client: Any,
    trips_table: str,
) -> Trip:
    attribute, _, id_field = _saved_item_kind(kind)
    trip = get_trip(trip_id, user_id, dynamo_client, trips_table)

    current = getattr(trip, attribute)
    remaining = [existing for existing in current if getattr(existing, id_field) != item_id]
    if len(remaining) == len(current):
        raise NotFoundError("Saved item not found", code=ErrorCode.ITEM_NOT_FOUND)

    updated = trip.model_copy(update={attribute: remaining})
    _put_trip(updated, dynamo_client, trips_table, must_exist=True)
    logger.info("Removed %s item %s from trip %s", kind, item_id, trip.trip_id)
    return updated
