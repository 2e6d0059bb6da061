"""
Pydantic models for Budget Backpack.
"""

from core.models.base import CamelModel, parse_model
from core.models.normalized import (
    FlightLeg,
    NormalizedAccommodation,
    NormalizedFlight,
    NormalizedPlace,
    ReturnInfo,
)
from core.models.search import AccommodationSearchCriteria, FlightSearchCriteria, PlaceSearchCriteria
from core.models.trip import (
    SAVED_ITEM_KINDS,
    SavedAccommodation,
    SavedActivity,
    SavedFlight,
    Trip,
    TripCreate,
    TripUpdate,
)
from core.models.user import LoginRequest, RegisterRequest, User

__all__ = [
    "AccommodationSearchCriteria",
    "CamelModel",
    "FlightLeg",
    "FlightSearchCriteria",
    "LoginRequest",
    "NormalizedAccommodation",
    "NormalizedFlight",
    "NormalizedPlace",
    "PlaceSearchCriteria",
    "RegisterRequest",
    "ReturnInfo",
    "SAVED_ITEM_KINDS",
    "SavedAccommodation",
    "SavedActivity",
    "SavedFlight",
    "Trip",
    "TripCreate",
    "TripUpdate",
    "User",
    "parse_model",
]
