"""Search orchestration: one provider call, then normalization.

Each function returns the JSON-ready list the route sends back; it is always
a list, possibly empty.
"""

import logging
from typing import Any

from core.config import Config
from core.models.search import AccommodationSearchCriteria, FlightSearchCriteria, PlaceSearchCriteria
from core.normalize import transform_accommodation_response, transform_flight_response, transform_place_response
from core.search import ProviderClient, build_accommodation_request, build_flight_request, build_place_request

logger = logging.getLogger(__name__)


def search_flights(criteria: FlightSearchCriteria, client: ProviderClient, config: Config) -> list[dict[str, Any]]:
    logger.info(
        "Flight search %s -> %s on %s (%s)",
        criteria.origin,
        criteria.destination,
        criteria.departure_date,
        "round trip" if criteria.is_round_trip else "one way",
    )
    payload = client.send(build_flight_request(criteria, config.flight_api_host))
    flights = transform_flight_response(payload, criteria)
    if criteria.is_round_trip and not flights:
        logger.info("Round-trip search returned no flights; dates or destination may be too narrow")
    return [flight.to_json_dict() for flight in flights]


def search_accommodations(
    criteria: AccommodationSearchCriteria, client: ProviderClient, config: Config
) -> list[dict[str, Any]]:
    logger.info(
        "Accommodation search in %s, %s to %s, %d adults",
        criteria.destination_city,
        criteria.check_in_date,
        criteria.check_out_date,
        criteria.adults,
    )
    payload = client.send(build_accommodation_request(criteria, config.accommodation_api_host))
    return [listing.to_json_dict() for listing in transform_accommodation_response(payload, criteria)]


def search_places(criteria: PlaceSearchCriteria, client: ProviderClient, config: Config) -> list[dict[str, Any]]:
    logger.info("Place search in %s (term=%r)", criteria.destination_city, criteria.search_term)
    payload = client.send(build_place_request(criteria, config.events_api_host))
    return [place.to_json_dict() for place in transform_place_response(payload)]
