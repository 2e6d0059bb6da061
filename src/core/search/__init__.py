"""Outbound provider requests: builders and the HTTP client."""

from core.search.builders import (
    ProviderRequest,
    build_accommodation_request,
    build_flight_request,
    build_place_request,
)
from core.search.client import ProviderClient

__all__ = [
    "ProviderClient",
    "ProviderRequest",
    "build_accommodation_request",
    "build_flight_request",
    "build_place_request",
]
