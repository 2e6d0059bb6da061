"""GET /api/search/events: Google Places text search, normalized."""

from typing import Any

from core.clients import get_http_client
from core.config import get_config
from core.models import PlaceSearchCriteria, parse_model
from core.responses import api_handler, current_user_id, json_response, query_params
from core.search import ProviderClient
from core.services.search import search_places


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    current_user_id(event)
    criteria = parse_model(PlaceSearchCriteria, query_params(event))

    config = get_config()
    client = ProviderClient(config.rapidapi_key, get_http_client())

    return json_response(200, search_places(criteria, client, config))
