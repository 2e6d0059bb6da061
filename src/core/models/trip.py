from datetime import date, datetime, timezone
from typing import Any
from uuid import uuid4

from pydantic import Field

from core.models.base import CamelModel


class SavedFlight(CamelModel):
    flight_api_id: str = Field(..., min_length=1)
    origin: str | None = None
    destination: str | None = None
    departure_date: date | None = None
    price: float | None = None
    details: dict[str, Any] | None = None


class SavedAccommodation(CamelModel):
    accommodation_api_id: str = Field(..., min_length=1)
    name: str | None = None
    location: str | None = None
    check_in_date: date | None = None
    price: float | None = None
    details: dict[str, Any] | None = None


class SavedActivity(CamelModel):
    activity_api_id: str = Field(..., min_length=1)
    name: str | None = None
    location: str | None = None
    activity_date: date | None = Field(default=None, alias="date")
    details: dict[str, Any] | None = None


class TripCreate(CamelModel):
    trip_name: str = Field(..., min_length=1)
    destination_city: str = Field(..., min_length=1)
    destination_country: str = Field(..., min_length=1)
    start_date: date
    end_date: date
    notes: str | None = None


class TripUpdate(CamelModel):
    """Partial update; only fields present in the request are applied."""

    trip_name: str | None = Field(default=None, min_length=1)
    destination_city: str | None = Field(default=None, min_length=1)
    destination_country: str | None = Field(default=None, min_length=1)
    start_date: date | None = None
    end_date: date | None = None
    notes: str | None = None


class Trip(TripCreate):
    trip_id: str = Field(default_factory=lambda: str(uuid4()))
    user_id: str
    saved_flights: list[SavedFlight] = Field(default_factory=list)
    saved_accommodations: list[SavedAccommodation] = Field(default_factory=list)
    saved_activities: list[SavedActivity] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# URL segment -> (Trip attribute, item model, item id attribute)
SAVED_ITEM_KINDS: dict[str, tuple[str, type[CamelModel], str]] = {
    "flights": ("saved_flights", SavedFlight, "flight_api_id"),
    "accommodations": ("saved_accommodations", SavedAccommodation, "accommodation_api_id"),
    "activities": ("saved_activities", SavedActivity, "activity_api_id"),
}
