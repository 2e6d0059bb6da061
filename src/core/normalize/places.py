"""Normalize Places text-search payloads into NormalizedPlace records."""

import logging
from typing import Any

from core.models.normalized import NOT_AVAILABLE, NormalizedPlace

from .extractors import dig, first_text, parse_price, text, to_int

logger = logging.getLogger(__name__)


def _build_place(place: dict[str, Any], place_id: str) -> NormalizedPlace:
    raw_types = place.get("types")
    types = [t for t in raw_types if isinstance(t, str)] if isinstance(raw_types, list) else []

    icon_url = None
    if text(place.get("iconMaskBaseUri")) and text(place.get("iconBackgroundColor")):
        icon_url = place["iconMaskBaseUri"]

    return NormalizedPlace(
        id=place_id,
        title=first_text(dig(place, "displayName", "text"), default=NOT_AVAILABLE),
        address=first_text(place.get("formattedAddress"), default=NOT_AVAILABLE),
        rating=parse_price(place.get("rating")),
        user_rating_count=to_int(place.get("userRatingCount")) or 0,
        types=types,
        primary_type=first_text(dig(place, "primaryTypeDisplayName", "text"), types[0] if types else None),
        icon_background_color=text(place.get("iconBackgroundColor")),
        icon_url=icon_url,
        google_maps_uri=text(place.get("googleMapsUri")),
        website_uri=text(place.get("websiteUri")),
        first_photo_reference=text(dig(place, "photos", 0, "name")),
    )


def normalize_place(place: Any) -> NormalizedPlace | None:
    place_id = text(dig(place, "id"))
    if place_id is None:
        logger.warning("Skipping place without id")
        return None
    try:
        return _build_place(place, place_id)
    except Exception:
        logger.exception("Dropping malformed place %s", place_id)
        return None


def transform_place_response(payload: Any) -> list[NormalizedPlace]:
    raw_places = dig(payload, "places")
    if not isinstance(raw_places, list):
        # The provider returns {} for a query with no matches.
        logger.warning(
            "No places list in response; provider error=%s",
            dig(payload, "error") or dig(payload, "message"),
        )
        return []

    places: list[NormalizedPlace] = []
    for raw in raw_places:
        record = normalize_place(raw)
        if record is not None:
            places.append(record)

    logger.info("Normalized %d of %d places", len(places), len(raw_places))
    return places
