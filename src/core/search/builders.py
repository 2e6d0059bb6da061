"""Request builders: validated search criteria to provider query shapes."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any

from core.models.search import AccommodationSearchCriteria, FlightSearchCriteria, PlaceSearchCriteria

ALLOWED_STOPOVERS = frozenset({"0", "1", "2"})
SORT_OPTIONS = frozenset({"PRICE", "DURATION", "QUALITY"})

ROUND_TRIP_FLEX_DAYS = 3
ONE_WAY_FLEX_DAYS = 2
ROUND_TRIP_LIMIT = 20
ONE_WAY_LIMIT = 15
PLACES_RESULT_LIMIT = 15


@dataclass(frozen=True)
class ProviderRequest:
    """One outbound call to a RapidAPI-hosted provider."""

    provider: str
    method: str
    host: str
    path: str
    params: dict[str, Any] = field(default_factory=dict)
    json: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        return f"https://{self.host}{self.path}"


def _kiwi_datetime(day: date) -> str:
    return f"{day.isoformat()}T00:00:00"


def _date_window(day: date, flex_days: int) -> tuple[str, str]:
    return _kiwi_datetime(day - timedelta(days=flex_days)), _kiwi_datetime(day + timedelta(days=flex_days))


def _max_stops(value: Any) -> int | None:
    """Only 0, 1 or 2 are forwarded; anything else is ignored."""
    if value is None or isinstance(value, bool):
        return None
    raw = str(value).strip()
    return int(raw) if raw in ALLOWED_STOPOVERS else None


def _sort_by(value: str) -> str:
    sort_by = (value or "").strip().upper()
    return sort_by if sort_by in SORT_OPTIONS else "PRICE"


def build_flight_request(criteria: FlightSearchCriteria, host: str) -> ProviderRequest:
    """Round trip and one-way use different endpoints and parameter sets."""
    sort_by = _sort_by(criteria.sort_by)
    params: dict[str, Any] = {
        "source": criteria.origin,
        "destination": criteria.destination,
        "currency": criteria.currency,
        "locale": "en",
        "adults": criteria.adults,
        "children": criteria.children,
        "infants": criteria.infants,
        "sortBy": sort_by,
    }

    if criteria.return_date is not None:
        outbound_start, outbound_end = _date_window(criteria.departure_date, ROUND_TRIP_FLEX_DAYS)
        inbound_start, inbound_end = _date_window(criteria.return_date, ROUND_TRIP_FLEX_DAYS)
        params.update(
            {
                "handbags": 1,
                "holdbags": 0,
                "cabinClass": "ECONOMY",
                "sortOrder": "ASCENDING",
                "transportTypes": "FLIGHT",
                "limit": ROUND_TRIP_LIMIT,
                "outboundDepartmentDateStart": outbound_start,
                "outboundDepartmentDateEnd": outbound_end,
                "inboundDepartureDateStart": inbound_start,
                "inboundDepartureDateEnd": inbound_end,
                "allowReturnFromDifferentCity": "false",
                "allowChangeInboundDestination": "false",
                "allowChangeInboundSource": "false",
                "allowDifferentStationConnection": "true",
                "enableSelfTransfer": "false",
                "allowOvernightStopover": "true",
            }
        )
        path = "/round-trip"
    else:
        outbound_start, outbound_end = _date_window(criteria.departure_date, ONE_WAY_FLEX_DAYS)
        params.update(
            {
                "limit": ONE_WAY_LIMIT,
                "outboundDepartmentDateStart": outbound_start,
                "outboundDepartmentDateEnd": outbound_end,
            }
        )
        if sort_by in ("PRICE", "DURATION"):
            params["sortOrder"] = "ASCENDING"
        path = "/one-way"

    max_stops = _max_stops(criteria.max_stopovers)
    if max_stops is not None:
        params["maxStopsCount"] = max_stops

    return ProviderRequest(provider="flight", method="GET", host=host, path=path, params=params)


def build_accommodation_request(criteria: AccommodationSearchCriteria, host: str) -> ProviderRequest:
    # check-in < check-out is enforced by AccommodationSearchCriteria.
    return ProviderRequest(
        provider="accommodation",
        method="GET",
        host=host,
        path="/api/v2/searchPropertyByLocation",
        params={
            "query": criteria.destination_city,
            "checkin": criteria.check_in_date.isoformat(),
            "checkout": criteria.check_out_date.isoformat(),
            "adults": criteria.adults,
            "currency": criteria.currency,
        },
    )


def build_place_request(criteria: PlaceSearchCriteria, host: str) -> ProviderRequest:
    if criteria.search_term:
        text_query = f"{criteria.search_term} in {criteria.destination_city}"
    else:
        text_query = f"things to do in {criteria.destination_city}"
    return ProviderRequest(
        provider="event/place",
        method="POST",
        host=host,
        path="/v1/places:searchText",
        json={"textQuery": text_query, "languageCode": "en", "maxResultCount": PLACES_RESULT_LIMIT},
        headers={"Content-Type": "application/json", "X-Goog-FieldMask": "*"},
    )
