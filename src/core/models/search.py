"""Validated caller input for the three search routes."""

from datetime import date
from typing import Any

from pydantic import Field, model_validator
from pydantic.alias_generators import to_snake

from core.models.base import CamelModel


def _drop_blank(data: Any) -> Any:
    # Query strings carry "" for cleared form fields.
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if v is not None and v != ""}
    return data


def _require(data: Any, fields: tuple[str, ...], message: str) -> None:
    if not isinstance(data, dict) or any(not (data.get(f) or data.get(to_snake(f))) for f in fields):
        raise ValueError(message)


class FlightSearchCriteria(CamelModel):
    origin: str
    destination: str
    departure_date: date
    return_date: date | None = None
    adults: int = Field(default=1, ge=1, le=9)
    children: int = Field(default=0, ge=0, le=9)
    infants: int = Field(default=0, ge=0, le=9)
    max_stopovers: str | int | None = None
    sort_by: str = "PRICE"
    currency: str = "USD"

    @model_validator(mode="before")
    @classmethod
    def required_fields(cls, data: Any) -> Any:
        data = _drop_blank(data)
        _require(data, ("origin", "destination", "departureDate"), "Please provide origin, destination, and departure date.")
        return data

    @model_validator(mode="after")
    def return_not_before_departure(self) -> "FlightSearchCriteria":
        if self.return_date and self.return_date < self.departure_date:
            raise ValueError("Return date must be on or after the departure date.")
        return self

    @property
    def is_round_trip(self) -> bool:
        return self.return_date is not None


class AccommodationSearchCriteria(CamelModel):
    destination_city: str
    check_in_date: date
    check_out_date: date
    adults: int = Field(default=1, ge=1, le=16)
    currency: str = "USD"

    @model_validator(mode="before")
    @classmethod
    def required_fields(cls, data: Any) -> Any:
        data = _drop_blank(data)
        _require(
            data,
            ("destinationCity", "checkInDate", "checkOutDate"),
            "Please provide destination, check-in date, and check-out date.",
        )
        return data

    @model_validator(mode="after")
    def check_in_before_check_out(self) -> "AccommodationSearchCriteria":
        if self.check_in_date >= self.check_out_date:
            raise ValueError("Check-out date must be after check-in date.")
        return self


class PlaceSearchCriteria(CamelModel):
    destination_city: str
    search_term: str = ""

    @model_validator(mode="before")
    @classmethod
    def required_fields(cls, data: Any) -> Any:
        data = _drop_blank(data)
        _require(data, ("destinationCity",), "Please provide destination city for event/place search.")
        return data
