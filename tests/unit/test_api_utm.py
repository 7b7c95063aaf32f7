from __future__ import annotations

import httpx
import pytest

from src.adapters.api.dependencies import get_utm_service
from src.app.services.utm_service import UtmService
from src.main import app


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_utm_returns_reference() -> None:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/utm", params={"lat": 51.178861, "lon": -1.826412})

    assert resp.status_code == 200
    payload = resp.json()
    assert payload["zone_number"] == 30
    assert payload["zone_letter"] == "U"
    assert payload["text"] == "30U 582032 5670370"


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_utm_maps_projection_error_to_422() -> None:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/utm", params={"lat": 90.0, "lon": 0.0})

    assert resp.status_code == 422
    assert resp.json()["error"] == "InvalidZoneLetterIndex"


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_utm_validates_query_range() -> None:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/utm", params={"lat": 12.0, "lon": 200.0})

    assert resp.status_code == 422


@pytest.mark.unit
@pytest.mark.anyio
async def test_get_utm_text_uses_placeholder() -> None:
    def _override():
        return UtmService(placeholder="-")

    app.dependency_overrides[get_utm_service] = _override

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        bad = await client.get("/utm/text", params={"lat": -90.0, "lon": 0.0})
        good = await client.get("/utm/text", params={"lat": 60.0, "lon": 5.0})

    app.dependency_overrides.clear()

    assert bad.status_code == 200
    assert bad.json() == {"text": "-", "ok": False}
    assert good.json()["ok"] is True
    assert good.json()["text"].startswith("32V ")


def test_dependency_reads_placeholder_from_env(monkeypatch) -> None:
    monkeypatch.setenv("UTM_PLACEHOLDER", "(unknown)")
    assert get_utm_service().placeholder == "(unknown)"


@pytest.mark.unit
@pytest.mark.anyio
async def test_health() -> None:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/health")

    assert resp.json() == {"status": "ok"}
