"""GET /api/search/flights: Kiwi.com search, normalized."""

from typing import Any

from core.clients import get_http_client
from core.config import get_config
from core.models import FlightSearchCriteria, parse_model
from core.responses import api_handler, current_user_id, json_response, query_params
from core.search import ProviderClient
from core.services.search import search_flights


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    current_user_id(event)
    criteria = parse_model(FlightSearchCriteria, query_params(event))

    config = get_config()
    client = ProviderClient(config.rapidapi_key, get_http_client())

    return json_response(200, search_flights(criteria, client, config))
