"""Response normalization: provider JSON in, uniform records out."""

from core.normalize.accommodations import normalize_listing, transform_accommodation_response
from core.normalize.extractors import (
    Rating,
    dig,
    extract_booking_link,
    format_date_for_display,
    format_duration,
    parse_display_price,
    parse_price,
    parse_rating_text,
)
from core.normalize.flights import normalize_itinerary, transform_flight_response
from core.normalize.places import normalize_place, transform_place_response

__all__ = [
    "Rating",
    "dig",
    "extract_booking_link",
    "format_date_for_display",
    "format_duration",
    "normalize_itinerary",
    "normalize_listing",
    "normalize_place",
    "parse_display_price",
    "parse_price",
    "parse_rating_text",
    "transform_accommodation_response",
    "transform_flight_response",
    "transform_place_response",
]
