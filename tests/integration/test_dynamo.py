"""Integration tests for the Users and Trips services against DynamoDB Local."""

from datetime import date

import pytest

from core.errors import AuthorizationError, ConflictError, NotFoundError
from core.models import LoginRequest, RegisterRequest, TripCreate, TripUpdate
from core.services.trips import (
    add_saved_item,
    create_trip,
    delete_trip,
    get_trip,
    list_trips,
    remove_saved_item,
    update_trip,
)
from core.services.users import authenticate_user, find_user_by_username, register_user


def _trip(name="Lisbon Spring"):
    return TripCreate(
        trip_name=name,
        destination_city="Lisbon",
        destination_country="Portugal",
        start_date=date(2026, 4, 1),
        end_date=date(2026, 4, 8),
    )


@pytest.mark.integration
def test_register_and_login(dynamodb_client, users_table):
    request = RegisterRequest(username="alice", email="Alice@Example.com", password="secret1")
    user = register_user(request, dynamodb_client, users_table)

    assert user.email == "alice@example.com"

    found = authenticate_user(
        LoginRequest(email="alice@example.com", password="secret1"), dynamodb_client, users_table
    )
    assert found.user_id == user.user_id


@pytest.mark.integration
def test_register_duplicate_email_rejected(dynamodb_client, users_table):
    register_user(RegisterRequest(username="bob", email="bob@example.com", password="secret1"), dynamodb_client, users_table)

    with pytest.raises(ConflictError):
        register_user(
            RegisterRequest(username="bobby", email="bob@example.com", password="secret1"),
            dynamodb_client,
            users_table,
        )


@pytest.mark.integration
def test_find_user_by_username_uses_index(dynamodb_client, users_table):
    register_user(RegisterRequest(username="carol", email="carol@example.com", password="secret1"), dynamodb_client, users_table)

    user = find_user_by_username("carol", dynamodb_client, users_table)

    assert user is not None
    assert user.email == "carol@example.com"


@pytest.mark.integration
def test_trip_lifecycle(dynamodb_client, trips_table):
    trip = create_trip("user-1", _trip(), dynamodb_client, trips_table)

    fetched = get_trip(trip.trip_id, "user-1", dynamodb_client, trips_table)
    assert fetched.trip_name == "Lisbon Spring"
    assert fetched.start_date == date(2026, 4, 1)

    updated = update_trip(trip.trip_id, "user-1", TripUpdate(notes="Pack light"), dynamodb_client, trips_table)
    assert updated.notes == "Pack light"
    assert updated.trip_name == "Lisbon Spring"

    with_flight = add_saved_item(
        trip.trip_id,
        "user-1",
        "flights",
        {"flightApiId": "kiwi-1", "origin": "JFK", "destination": "LIS", "price": 412.5},
        dynamodb_client,
        trips_table,
    )
    assert with_flight.saved_flights[0].price == 412.5

    without = remove_saved_item(trip.trip_id, "user-1", "flights", "kiwi-1", dynamodb_client, trips_table)
    assert without.saved_flights == []

    delete_trip(trip.trip_id, "user-1", dynamodb_client, trips_table)
    with pytest.raises(NotFoundError):
        get_trip(trip.trip_id, "user-1", dynamodb_client, trips_table)


@pytest.mark.integration
def test_list_trips_only_returns_callers_trips(dynamodb_client, trips_table):
    create_trip("user-a", _trip("First"), dynamodb_client, trips_table)
    create_trip("user-a", _trip("Second"), dynamodb_client, trips_table)
    create_trip("user-b", _trip("Other"), dynamodb_client, trips_table)

    trips = list_trips("user-a", dynamodb_client, trips_table)

    assert [t.trip_name for t in trips] == ["Second", "First"]


@pytest.mark.integration
def test_get_trip_of_other_user_is_forbidden(dynamodb_client, trips_table):
    trip = create_trip("owner", _trip(), dynamodb_client, trips_table)

    with pytest.raises(AuthorizationError):
        get_trip(trip.trip_id, "intruder", dynamodb_client, trips_table)
