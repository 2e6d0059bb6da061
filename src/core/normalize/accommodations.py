"""Normalize Airbnb search payloads into NormalizedAccommodation records."""

import logging
from typing import Any

from core.models.normalized import NO_DESCRIPTION, NOT_AVAILABLE, NormalizedAccommodation
from core.models.search import AccommodationSearchCriteria

from .extractors import dig, first_text, parse_display_price, parse_price, parse_rating_text, text, to_int

logger = logging.getLogger(__name__)

ROOM_URL_TEMPLATE = "https://www.airbnb.com/rooms/{listing_id}"
PROVIDER = "Airbnb"
_DISCOUNTED_LINE = "DiscountedDisplayPriceLine"


def _nightly_price(listing: dict[str, Any]) -> float | None:
    primary = dig(listing, "structuredDisplayPrice", "primaryLine")
    if not isinstance(primary, dict):
        return None
    price = primary.get("price")
    if primary.get("__typename") == _DISCOUNTED_LINE and primary.get("discountedPrice"):
        price = primary["discountedPrice"]
    return parse_display_price(price)


def _rating(listing: dict[str, Any]) -> tuple[float | None, int | None]:
    rating, review_count = parse_rating_text(listing.get("avgRatingLocalized"))
    if rating is None:
        rating = parse_price(listing.get("ratingAverage"))
    if review_count is None:
        review_count = to_int(listing.get("ratingCount"))
    return rating, review_count


def _images(listing: dict[str, Any]) -> tuple[str | None, list[str]]:
    pictures = listing.get("contextualPictures")
    if not isinstance(pictures, list):
        return None, []
    gallery = [p.get("picture") for p in pictures if isinstance(p, dict) and isinstance(p.get("picture"), str)]
    hero = dig(pictures, 0, "picture")
    return (hero if isinstance(hero, str) else None), gallery


def _build_accommodation(listing: dict[str, Any], listing_id: str, criteria: AccommodationSearchCriteria) -> NormalizedAccommodation:
    location = dig(listing, "demandStayListing", "location", default={})
    hero, gallery = _images(listing)
    rating, review_count = _rating(listing)
    return NormalizedAccommodation(
        id=listing_id,
        name=first_text(listing.get("title"), listing.get("legacyName"), default=NOT_AVAILABLE),
        location=first_text(
            dig(location, "localizedCityName"),
            dig(location, "city"),
            listing.get("legacyCity"),
            criteria.destination_city,
            default=NOT_AVAILABLE,
        ),
        destination_city=first_text(
            dig(location, "city"), listing.get("legacyCity"), criteria.destination_city, default=NOT_AVAILABLE
        ),
        price_per_night=_nightly_price(listing),
        total_price=parse_display_price(dig(listing, "structuredDisplayPrice", "secondaryLine", "price")),
        currency=criteria.currency,
        rating=rating,
        review_count=review_count,
        image_url=hero,
        images=gallery,
        booking_link=ROOM_URL_TEMPLATE.format(listing_id=listing_id),
        provider=PROVIDER,
        description=first_text(listing.get("legacyName"), listing.get("title"), default=NO_DESCRIPTION),
        check_in_date=criteria.check_in_date.isoformat(),
        check_out_date=criteria.check_out_date.isoformat(),
        number_of_guests=criteria.adults,
    )


def normalize_listing(item: Any, criteria: AccommodationSearchCriteria) -> NormalizedAccommodation | None:
    """Map one ``{"listing": {...}}`` wrapper to a record; None when it has no listing id."""
    listing = dig(item, "listing")
    listing_id = text(dig(listing, "id"))
    if not isinstance(listing, dict) or listing_id is None:
        logger.warning("Skipping accommodation item without listing or listing.id")
        return None
    try:
        return _build_accommodation(listing, listing_id, criteria)
    except Exception:
        logger.exception("Dropping malformed accommodation listing %s", listing_id)
        return None


def transform_accommodation_response(payload: Any, criteria: AccommodationSearchCriteria) -> list[NormalizedAccommodation]:
    status = dig(payload, "status")
    if status is False:
        logger.warning("Accommodation provider reported failure: %s", dig(payload, "message"))
        return []

    listings = dig(payload, "data", "list")
    if status is not True or not isinstance(listings, list):
        logger.warning(
            "Unexpected accommodation response shape; keys=%s",
            sorted(payload) if isinstance(payload, dict) else type(payload).__name__,
        )
        return []

    accommodations: list[NormalizedAccommodation] = []
    for item in listings:
        record = normalize_listing(item, criteria)
        if record is not None:
            accommodations.append(record)

    logger.info("Normalized %d of %d accommodation listings", len(accommodations), len(listings))
    return accommodations
