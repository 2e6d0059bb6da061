"""Unit tests for the Kiwi flight normalizer."""

from datetime import date

import pytest

from core.models import FlightSearchCriteria
from core.normalize import normalize_itinerary, transform_flight_response


def _segment(src_city, src_code, dst_city, dst_code, depart, arrive, duration=None, carrier=("Delta", "DL"), number="DL100"):
    segment = {
        "source": {
            "station": {"name": f"{src_city} Intl", "code": src_code, "city": {"name": src_city}},
            "localTime": depart,
            "utcTime": f"{depart}Z",
        },
        "destination": {
            "station": {"name": f"{dst_city} Intl", "code": dst_code, "city": {"name": dst_city}},
            "localTime": arrive,
            "utcTime": f"{arrive}Z",
        },
        "carrier": {"name": carrier[0], "code": carrier[1]},
        "code": number,
    }
    if duration is not None:
        segment["duration"] = duration
    return {"sectorSegments": [{"segment": segment}]}


def _one_way_itinerary(**overrides):
    itinerary = {
        "id": "itin-1",
        "price": {"amount": "199.99"},
        "sector": _segment("New York", "JFK", "Los Angeles", "LAX", "2026-05-01T08:00:00", "2026-05-01T11:15:00", 22500),
        "bookingOptions": {"edges": [{"node": {"bookingUrl": "/booking/abc", "price": {"amount": "189.00"}}}]},
    }
    itinerary.update(overrides)
    return itinerary


@pytest.fixture
def round_trip_criteria():
    return FlightSearchCriteria(
        origin="JFK", destination="LAX", departure_date=date(2026, 5, 1), return_date=date(2026, 5, 8)
    )


def test_one_way_itinerary_fields():
    flight = normalize_itinerary(_one_way_itinerary(), round_trip=False, fallback_id="x")

    assert flight.id == "itin-1"
    assert flight.departure_city == "New York"
    assert flight.departure_airport_code == "JFK"
    assert flight.arrival_city == "Los Angeles"
    assert flight.duration_in_seconds == 22500
    assert flight.duration_formatted == "6h 15m"
    assert flight.airline_name == "Delta"
    assert flight.flight_number == "DL100"
    assert flight.is_round_trip is False
    assert flight.return_info is None
    assert flight.actual_departure_date == "5/1/2026"


def test_booking_option_price_preferred_over_itinerary_price():
    flight = normalize_itinerary(_one_way_itinerary(), round_trip=False, fallback_id="x")
    assert flight.price == 189.0


def test_itinerary_price_used_without_booking_option():
    flight = normalize_itinerary(_one_way_itinerary(bookingOptions={}), round_trip=False, fallback_id="x")
    assert flight.price == 199.99
    assert flight.booking_link is None


def test_relative_booking_link_qualified():
    flight = normalize_itinerary(_one_way_itinerary(), round_trip=False, fallback_id="x")
    assert flight.booking_link == "https://www.kiwi.com/booking/abc"


def test_currency_resolution_order():
    itinerary = _one_way_itinerary(price={"amount": 10, "currency": "GBP"})

    assert normalize_itinerary(itinerary, round_trip=False, fallback_id="x").currency == "GBP"
    assert (
        normalize_itinerary(itinerary, round_trip=False, fallback_id="x", response={"currency": "EUR"}).currency
        == "EUR"
    )
    assert (
        normalize_itinerary(
            itinerary, round_trip=False, fallback_id="x", response={"metadata": {"currency": "CAD"}}
        ).currency
        == "CAD"
    )


def test_legacy_id_then_fallback_id():
    assert normalize_itinerary(_one_way_itinerary(id=None, legacyId="legacy-9"), round_trip=False, fallback_id="x").id == "legacy-9"
    assert normalize_itinerary(_one_way_itinerary(id=None), round_trip=False, fallback_id="oneway_x_0").id == "oneway_x_0"


def test_itinerary_missing_every_optional_field_gets_sentinels():
    flight = normalize_itinerary({}, round_trip=False, fallback_id="synth")
    body = flight.to_json_dict()

    assert body["id"] == "synth"
    assert body["price"] is None
    assert body["currency"] == "USD"
    assert body["departureCity"] == "Unknown City"
    assert body["departureAirport"] == "Unknown Airport"
    assert body["departureAirportCode"] == "N/A"
    assert body["departureTimeUTC"] == "N/A"
    assert body["arrivalTimeLocal"] == "N/A"
    assert body["durationInSeconds"] is None
    assert body["durationFormatted"] == "Duration not available"
    assert body["airlineName"] == "Unknown Airline"
    assert body["bookingLink"] is None
    assert body["provider"] == "Kiwi.com"
    assert body["actualDepartureDate"] == "Date not available"


def test_round_trip_missing_inbound_duration(round_trip_criteria):
    payload = {
        "itineraries": [
            {
                "id": "rt-1",
                "outbound": {
                    "sector": _segment(
                        "New York", "JFK", "Los Angeles", "LAX", "2026-05-01T08:00:00", "2026-05-01T11:15:00", 22500
                    )
                },
                "inbound": {
                    "sector": _segment(
                        "Los Angeles", "LAX", "New York", "JFK", "2026-05-08T13:00:00", "2026-05-08T21:30:00",
                        carrier=("United", "UA"), number="UA200",
                    )
                },
            }
        ]
    }

    flights = transform_flight_response(payload, round_trip_criteria)

    assert len(flights) == 1
    body = flights[0].to_json_dict()
    assert body["isRoundTrip"] is True
    assert body["price"] is None
    assert body["returnInfo"]["departureCity"] == "Los Angeles"
    assert body["returnInfo"]["arrivalCity"] == "New York"
    assert body["returnInfo"]["departureTimeLocal"] == "2026-05-08T13:00:00"
    assert body["returnInfo"]["airlineName"] == "United"
    assert body["returnInfo"]["departureDate"] == "5/8/2026"
    assert body["totalTripDuration"] == "Duration not available"
    assert body["originalDepartureDate"] == "2026-05-01"
    assert body["originalReturnDate"] == "2026-05-08"
    assert body["actualReturnDate"] == "5/8/2026"


def test_round_trip_total_duration_sums_both_legs():
    itinerary = {
        "id": "rt-2",
        "outbound": {"sector": _segment("A", "AAA", "B", "BBB", "2026-05-01T08:00:00", "2026-05-01T09:00:00", 3600)},
        "inbound": {"sector": _segment("B", "BBB", "A", "AAA", "2026-05-08T08:00:00", "2026-05-08T09:30:00", 5400)},
    }

    flight = normalize_itinerary(itinerary, round_trip=True, fallback_id="x")

    assert flight.total_trip_duration == "2h 30m"


def test_one_way_has_no_total_trip_duration():
    assert normalize_itinerary(_one_way_itinerary(), round_trip=False, fallback_id="x").total_trip_duration is None


def test_malformed_items_dropped_and_order_preserved():
    payload = {
        "itineraries": [
            _one_way_itinerary(id="first"),
            "garbage",
            None,
            _one_way_itinerary(id="second"),
            42,
        ]
    }

    flights = transform_flight_response(payload, round_trip=False)

    assert [f.id for f in flights] == ["first", "second"]


def test_synthesized_ids_are_unique_within_a_response():
    payload = {"itineraries": [{}, {}, {}]}

    ids = [f.id for f in transform_flight_response(payload, round_trip=False)]

    assert len(set(ids)) == 3
    assert all(i.startswith("oneway_") for i in ids)


def test_currency_falls_back_to_criteria(round_trip_criteria):
    criteria = round_trip_criteria.model_copy(update={"currency": "JPY"})
    flights = transform_flight_response({"itineraries": [{}]}, criteria)
    assert flights[0].currency == "JPY"


@pytest.mark.parametrize("payload", [None, {}, {"itineraries": "nope"}, [], "text"])
def test_unexpected_shape_yields_empty_list(payload):
    assert transform_flight_response(payload, round_trip=False) == []
