"""Output records of the response-normalization layer.

Every field carries a default so a record is always complete; unknown values
become ``None``, a sentinel string, or an empty list.
"""

from pydantic import Field

from core.models.base import CamelModel

NOT_AVAILABLE = "N/A"
UNKNOWN_CITY = "Unknown City"
UNKNOWN_AIRPORT = "Unknown Airport"
UNKNOWN_AIRLINE = "Unknown Airline"
DURATION_UNAVAILABLE = "Duration not available"
DATE_UNAVAILABLE = "Date not available"
NO_DESCRIPTION = "No description available."


class FlightLeg(CamelModel):
    """Directional fields of one flown segment."""

    departure_city: str = UNKNOWN_CITY
    departure_airport: str = UNKNOWN_AIRPORT
    departure_airport_code: str = NOT_AVAILABLE
    departure_time_local: str = NOT_AVAILABLE
    departure_time_utc: str = Field(default=NOT_AVAILABLE, alias="departureTimeUTC")
    arrival_city: str = UNKNOWN_CITY
    arrival_airport: str = UNKNOWN_AIRPORT
    arrival_airport_code: str = NOT_AVAILABLE
    arrival_time_local: str = NOT_AVAILABLE
    arrival_time_utc: str = Field(default=NOT_AVAILABLE, alias="arrivalTimeUTC")
    duration_in_seconds: int | None = None
    duration_formatted: str = DURATION_UNAVAILABLE
    airline_name: str = UNKNOWN_AIRLINE
    airline_code: str = NOT_AVAILABLE
    flight_number: str = NOT_AVAILABLE


class ReturnInfo(FlightLeg):
    departure_date: str = DATE_UNAVAILABLE
    arrival_date: str = DATE_UNAVAILABLE


class NormalizedFlight(FlightLeg):
    id: str
    price: float | None = None
    currency: str = "USD"
    booking_link: str | None = None
    provider: str = "Kiwi.com"
    is_round_trip: bool = False
    return_info: ReturnInfo | None = None
    total_trip_duration: str | None = None
    original_departure_date: str | None = None
    original_return_date: str | None = None
    actual_departure_date: str = DATE_UNAVAILABLE
    actual_return_date: str | None = None


class NormalizedAccommodation(CamelModel):
    id: str
    name: str = NOT_AVAILABLE
    location: str = NOT_AVAILABLE
    destination_city: str = NOT_AVAILABLE
    price_per_night: float | None = None
    total_price: float | None = None
    currency: str = "USD"
    rating: float | None = None
    review_count: int | None = None
    image_url: str | None = None
    images: list[str] = Field(default_factory=list)
    booking_link: str | None = None
    provider: str = "Airbnb"
    description: str = NO_DESCRIPTION
    check_in_date: str = NOT_AVAILABLE
    check_out_date: str = NOT_AVAILABLE
    number_of_guests: int = 1


class NormalizedPlace(CamelModel):
    id: str
    title: str = NOT_AVAILABLE
    address: str = NOT_AVAILABLE
    # None means "not rated", distinct from a rating of zero.
    rating: float | None = None
    user_rating_count: int = 0
    types: list[str] = Field(default_factory=list)
    primary_type: str | None = None
    icon_background_color: str | None = None
    icon_url: str | None = None
    google_maps_uri: str | None = None
    website_uri: str | None = None
    first_photo_reference: str | None = None
    # Resolving a photo needs a separately authenticated call.
    image_url: None = None
