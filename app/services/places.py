# app/services/places.py
"""Passthrough calls to the Google Static Maps and Places Autocomplete APIs.

API keys are added server-side and never logged or returned.
"""

from typing import Any, Optional, Tuple

import httpx

from app.core.config import settings
from app.core.exceptions import ExternalServiceError
from app.core.logging import get_logger

logger = get_logger(__name__)


class PlacesClient:
    """Wraps one shared httpx.AsyncClient (injectable for tests)."""

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None):
        self.http_client = http_client or httpx.AsyncClient()

    async def close(self):
        await self.http_client.aclose()

    async def static_map(self, address: Any) -> Tuple[bytes, str]:
        """Return (image bytes, content type) for a map centred on the address."""
        params = {
            "center": address or "",
            "zoom": settings.MAP_ZOOM,
            "size": settings.MAP_SIZE,
            "key": settings.GOOGLE_KEY,
        }
        logger.info("Fetching static map", center=params["center"])
        response = await self._get("static_maps", settings.STATIC_MAPS_URL, params)
        return response.content, response.headers.get("content-type", "image/png")

    async def autocomplete(self, text: str) -> Any:
        """Return the autocomplete API's JSON unchanged."""
        params = {"input": text, "key": settings.PLACES_KEY}
        logger.info("Fetching address suggestions", input=text)
        response = await self._get("places_autocomplete", settings.PLACE_AUTOCOMPLETE_URL, params)
        try:
            return response.json()
        except ValueError as e:
            raise ExternalServiceError("places_autocomplete", "invalid JSON") from e

    async def _get(self, service: str, url: str, params: dict) -> httpx.Response:
        try:
            response = await self.http_client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"{service} returned {e.response.status_code}")
            raise ExternalServiceError(service, f"status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"{service} unreachable: {type(e).__name__}")
            raise ExternalServiceError(service, type(e).__name__) from e
        return response
