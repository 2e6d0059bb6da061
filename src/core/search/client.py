"""HTTP client for RapidAPI-hosted travel data providers."""

import logging
from typing import Any

import httpx

from core.errors import GatewayError, UpstreamError
from core.normalize.extractors import dig, first_text

from .builders import ProviderRequest

logger = logging.getLogger(__name__)


def _error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


class ProviderClient:
    """Sends one ProviderRequest and returns the decoded JSON body.

    Non-2xx answers raise UpstreamError; no answer at all raises GatewayError.
    """

    def __init__(self, api_key: str, http_client: httpx.Client | None = None) -> None:
        self._api_key = api_key
        self._client = http_client or httpx.Client()

    def send(self, request: ProviderRequest) -> Any:
        headers = {"X-RapidAPI-Key": self._api_key, "X-RapidAPI-Host": request.host, **request.headers}
        logger.info("Calling %s API: %s %s params=%s", request.provider, request.method, request.url, request.params)

        try:
            response = self._client.request(
                request.method,
                request.url,
                params=request.params or None,
                json=request.json,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = _error_body(e.response)
            message = first_text(
                dig(body, "message"),
                dig(body, "error", "message"),
                dig(body, "title"),
                default=f"Failed to fetch {request.provider} data",
            )
            logger.error(
                "%s API returned %s for %s params=%s body=%s",
                request.provider,
                e.response.status_code,
                request.url,
                request.params,
                body,
            )
            raise UpstreamError(
                f"Error from {request.provider} API: {message}",
                upstream_status=e.response.status_code,
                details=body,
            ) from e
        except httpx.RequestError as e:
            logger.error("No response from %s API at %s: %s", request.provider, request.url, e)
            raise GatewayError(f"No response received from {request.provider} API") from e

        logger.info("%s API responded %s", request.provider, response.status_code)
        try:
            return response.json()
        except ValueError:
            logger.warning("%s API returned a non-JSON body", request.provider)
            return None
