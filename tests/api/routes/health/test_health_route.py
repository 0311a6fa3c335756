"""Testes dos endpoints de raiz, health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from api.routes.health import router as health_router


@pytest.mark.asyncio
async def test_root_returns_plain_text() -> None:
    response = await health_router.root()

    assert response.status_code == 200
    assert response.body == b"Shopee Notification Service Running"
    assert response.media_type == "text/plain"


@pytest.mark.asyncio
async def test_health_reports_service_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        health_router,
        "get_base_settings",
        lambda: SimpleNamespace(service_name="shopee-notify-relay"),
    )

    response = await health_router.health_check()

    assert response.status == "healthy"
    assert response.service == "shopee-notify-relay"


@pytest.mark.asyncio
async def test_readiness_not_ready_when_store_unreachable(monkeypatch: pytest.MonkeyPatch) -> None:
    store = MagicMock()
    store.ping = AsyncMock(return_value=False)
    monkeypatch.setattr(health_router, "get_notification_store", lambda: store)
    monkeypatch.setattr(health_router, "get_slack_settings", lambda: SimpleNamespace(is_configured=False))

    response = await health_router.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["notification_store"]["status"] == "failed"
    assert payload["checks"]["slack"]["status"] == "degraded"


@pytest.mark.asyncio
async def test_readiness_not_ready_when_store_creation_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom() -> None:
        raise RuntimeError("no credentials")

    monkeypatch.setattr(health_router, "get_notification_store", _boom)
    monkeypatch.setattr(health_router, "get_slack_settings", lambda: SimpleNamespace(is_configured=True))

    response = await health_router.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["notification_store"]["error"] == "RuntimeError"


@pytest.mark.asyncio
async def test_readiness_ready_when_store_ok(monkeypatch: pytest.MonkeyPatch) -> None:
    store = MagicMock()
    store.ping = AsyncMock(return_value=True)
    monkeypatch.setattr(health_router, "get_notification_store", lambda: store)
    monkeypatch.setattr(health_router, "get_slack_settings", lambda: SimpleNamespace(is_configured=True))

    response = await health_router.readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["notification_store"]["status"] == "ok"
    assert payload["checks"]["slack"]["status"] == "ok"
