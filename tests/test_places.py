"""Tests for the map image and address autocomplete passthroughs."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.dependencies import get_places_client
from app.main import app
from app.services.places import PlacesClient

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


@pytest.fixture
def upstream(client: TestClient) -> Iterator[Callable[[Callable[[httpx.Request], httpx.Response]], list]]:
    """Install a mock transport; returns the list of captured requests."""
    installed: list[PlacesClient] = []

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> list[httpx.Request]:
        seen: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        places = PlacesClient(httpx.AsyncClient(transport=httpx.MockTransport(record)))
        installed.append(places)
        app.dependency_overrides[get_places_client] = lambda: places
        return seen

    yield install

    for places in installed:
        asyncio.run(places.close())


class TestMapImage:
    def test_forwards_address_and_relays_bytes(
        self, client: TestClient, upstream: Any, claim_form: dict[str, Any]
    ) -> None:
        seen = upstream(
            lambda request: httpx.Response(
                200, content=PNG_BYTES, headers={"content-type": "image/png"}
            )
        )
        claim_id = client.post("/claims", json=claim_form).json()["id"]

        response = client.get(f"/claims/map/{claim_id}")

        assert response.status_code == 200
        assert response.content == PNG_BYTES
        assert response.headers["content-type"] == "image/png"
        [request] = seen
        assert request.url.path == "/maps/api/staticmap"
        assert request.url.params["center"] == "1 Main St"
        assert request.url.params["zoom"] == "15"
        assert request.url.params["size"] == "400x250"
        assert request.url.params["key"] == "test-google-key"

    def test_unknown_claim_is_404_without_upstream_call(
        self, client: TestClient, upstream: Any
    ) -> None:
        seen = upstream(lambda request: httpx.Response(200, content=PNG_BYTES))

        response = client.get("/claims/map/does-not-exist")

        assert response.status_code == 404
        assert seen == []

    def test_upstream_error_is_502(
        self, client: TestClient, upstream: Any, claim_form: dict[str, Any]
    ) -> None:
        upstream(lambda request: httpx.Response(500))
        claim_id = client.post("/claims", json=claim_form).json()["id"]

        response = client.get(f"/claims/map/{claim_id}")

        assert response.status_code == 502
        assert "test-google-key" not in response.text


class TestAddressSuggestions:
    def test_relays_json_verbatim(self, client: TestClient, upstream: Any) -> None:
        payload = {
            "predictions": [{"description": "1 Main St, Springfield", "place_id": "abc"}],
            "status": "OK",
        }
        seen = upstream(lambda request: httpx.Response(200, json=payload))

        response = client.get("/address/1 Main")

        assert response.status_code == 200
        assert response.json() == payload
        [request] = seen
        assert request.url.params["input"] == "1 Main"
        assert request.url.params["key"] == "test-places-key"

    def test_transport_failure_is_502(self, client: TestClient, upstream: Any) -> None:
        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        upstream(fail)

        response = client.get("/address/anything")

        assert response.status_code == 502
