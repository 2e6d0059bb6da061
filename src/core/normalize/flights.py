"""Normalize Kiwi itinerary payloads into NormalizedFlight records.

One-way responses nest the outbound leg under ``itinerary.sector``; round-trip
responses use ``itinerary.outbound.sector`` plus ``itinerary.inbound.sector``.
"""

import logging
from typing import Any
from uuid import uuid4

from core.models.normalized import (
    DURATION_UNAVAILABLE,
    NOT_AVAILABLE,
    UNKNOWN_AIRLINE,
    UNKNOWN_AIRPORT,
    UNKNOWN_CITY,
    NormalizedFlight,
    ReturnInfo,
)
from core.models.search import FlightSearchCriteria

from .extractors import (
    dig,
    extract_booking_link,
    first_text,
    format_date_for_display,
    format_duration,
    parse_price,
    to_int,
)

logger = logging.getLogger(__name__)

KIWI_ORIGIN = "https://www.kiwi.com"
DEFAULT_PROVIDER = "Kiwi.com"


def _first_segment(sector: Any) -> dict[str, Any] | None:
    segment = dig(sector, "sectorSegments", 0, "segment")
    return segment if isinstance(segment, dict) else None


def _leg_fields(segment: dict[str, Any] | None) -> dict[str, Any]:
    source = dig(segment, "source", default={})
    destination = dig(segment, "destination", default={})
    carrier = dig(segment, "carrier", default={})
    duration = dig(segment, "duration")
    return {
        "departure_city": first_text(dig(source, "station", "city", "name"), default=UNKNOWN_CITY),
        "departure_airport": first_text(dig(source, "station", "name"), default=UNKNOWN_AIRPORT),
        "departure_airport_code": first_text(dig(source, "station", "code"), default=NOT_AVAILABLE),
        "departure_time_local": first_text(dig(source, "localTime"), default=NOT_AVAILABLE),
        "departure_time_utc": first_text(dig(source, "utcTime"), default=NOT_AVAILABLE),
        "arrival_city": first_text(dig(destination, "station", "city", "name"), default=UNKNOWN_CITY),
        "arrival_airport": first_text(dig(destination, "station", "name"), default=UNKNOWN_AIRPORT),
        "arrival_airport_code": first_text(dig(destination, "station", "code"), default=NOT_AVAILABLE),
        "arrival_time_local": first_text(dig(destination, "localTime"), default=NOT_AVAILABLE),
        "arrival_time_utc": first_text(dig(destination, "utcTime"), default=NOT_AVAILABLE),
        "duration_in_seconds": to_int(duration),
        "duration_formatted": format_duration(duration),
        "airline_name": first_text(dig(carrier, "name"), default=UNKNOWN_AIRLINE),
        "airline_code": first_text(dig(carrier, "code"), default=NOT_AVAILABLE),
        "flight_number": first_text(dig(segment, "code"), default=NOT_AVAILABLE),
    }


def _resolve_price(itinerary: dict[str, Any]) -> float | None:
    # The primary booking option carries the bookable fare.
    booking_price = parse_price(dig(itinerary, "bookingOptions", "edges", 0, "node", "price", "amount"))
    if booking_price is not None:
        return booking_price
    return parse_price(dig(itinerary, "price", "amount"))


def _resolve_currency(response: Any, itinerary: dict[str, Any], request_currency: str | None) -> str:
    return first_text(
        dig(response, "currency"),
        dig(response, "metadata", "currency"),
        dig(itinerary, "price", "currency"),
        request_currency,
        default="USD",
    )


def _total_duration(outbound: dict[str, Any] | None, inbound: dict[str, Any] | None) -> str:
    outbound_seconds = to_int(dig(outbound, "duration"))
    inbound_seconds = to_int(dig(inbound, "duration"))
    if outbound_seconds is None or inbound_seconds is None:
        return DURATION_UNAVAILABLE
    return format_duration(outbound_seconds + inbound_seconds)


def _build_flight(
    itinerary: dict[str, Any],
    *,
    round_trip: bool,
    response: Any,
    criteria: FlightSearchCriteria | None,
    fallback_id: str,
) -> NormalizedFlight:
    if round_trip:
        outbound_sector = dig(itinerary, "outbound", "sector") or dig(itinerary, "sector")
    else:
        outbound_sector = dig(itinerary, "sector")
    outbound = _first_segment(outbound_sector)
    leg = _leg_fields(outbound)

    return_info = None
    total_trip_duration = None
    actual_return_date = None
    if round_trip:
        inbound = _first_segment(dig(itinerary, "inbound", "sector"))
        if inbound is not None:
            return_info = ReturnInfo(
                **_leg_fields(inbound),
                departure_date=format_date_for_display(dig(inbound, "source", "localTime")),
                arrival_date=format_date_for_display(dig(inbound, "destination", "localTime")),
            )
            actual_return_date = return_info.departure_date
        total_trip_duration = _total_duration(outbound, inbound)

    return NormalizedFlight(
        **leg,
        id=first_text(itinerary.get("id"), itinerary.get("legacyId"), default=fallback_id),
        price=_resolve_price(itinerary),
        currency=_resolve_currency(response, itinerary, criteria.currency if criteria else None),
        booking_link=extract_booking_link(itinerary, KIWI_ORIGIN),
        provider=first_text(dig(itinerary, "provider", "name"), default=DEFAULT_PROVIDER),
        is_round_trip=round_trip,
        return_info=return_info,
        total_trip_duration=total_trip_duration,
        original_departure_date=criteria.departure_date.isoformat() if criteria else None,
        original_return_date=(
            criteria.return_date.isoformat() if criteria and criteria.return_date else None
        ),
        actual_departure_date=format_date_for_display(dig(outbound, "source", "localTime")),
        actual_return_date=actual_return_date,
    )


def normalize_itinerary(
    itinerary: Any,
    *,
    round_trip: bool,
    fallback_id: str,
    response: Any = None,
    criteria: FlightSearchCriteria | None = None,
) -> NormalizedFlight | None:
    """Map one raw itinerary to a record, or None when it cannot be used."""
    if not isinstance(itinerary, dict):
        logger.warning("Skipping flight itinerary of type %s", type(itinerary).__name__)
        return None
    try:
        return _build_flight(
            itinerary,
            round_trip=round_trip,
            response=response,
            criteria=criteria,
            fallback_id=fallback_id,
        )
    except Exception:
        logger.exception("Dropping malformed %s itinerary", "round-trip" if round_trip else "one-way")
        return None


def transform_flight_response(
    payload: Any,
    criteria: FlightSearchCriteria | None = None,
    *,
    round_trip: bool | None = None,
) -> list[NormalizedFlight]:
    if round_trip is None:
        round_trip = bool(criteria and criteria.is_round_trip)

    itineraries = dig(payload, "itineraries")
    if not isinstance(itineraries, list):
        logger.warning(
            "Flight response has no itineraries list; keys=%s",
            sorted(payload) if isinstance(payload, dict) else type(payload).__name__,
        )
        return []

    # Synthesized ids share a per-response token and differ by position.
    batch = uuid4().hex[:12]
    prefix = "roundtrip" if round_trip else "oneway"
    flights: list[NormalizedFlight] = []
    for index, itinerary in enumerate(itineraries):
        record = normalize_itinerary(
            itinerary,
            round_trip=round_trip,
            fallback_id=f"{prefix}_{batch}_{index}",
            response=payload,
            criteria=criteria,
        )
        if record is not None:
            flights.append(record)

    logger.info("Normalized %d of %d %s itineraries", len(flights), len(itineraries), prefix)
    return flights
