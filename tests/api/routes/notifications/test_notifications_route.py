"""Testes da rota de listagem de notificações."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from api.routes.notifications import router as notifications_router
from app.infra.stores.memory_stores import MemoryNotificationStore
from utils.errors import FirestoreUnavailableError


@pytest.mark.asyncio
async def test_list_notifications_newest_first(monkeypatch: pytest.MonkeyPatch) -> None:
    store = MemoryNotificationStore()
    await store.insert("Shopee", "first", '{"a": 1}')
    await store.insert("Shopee", "second", '{"b": 2}')
    monkeypatch.setattr(notifications_router, "_get_notification_store", lambda: store)

    response = await notifications_router.list_notifications()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert [item["content"] for item in payload] == ["second", "first"]
    assert set(payload[0]) == {"id", "project", "content", "raw_payload", "is_read", "created_at"}
    assert payload[0]["id"] == 2
    assert payload[0]["is_read"] is False
    assert payload[0]["raw_payload"] == '{"b": 2}'
    assert isinstance(payload[0]["created_at"], str)


@pytest.mark.asyncio
async def test_list_notifications_caps_at_fifty(monkeypatch: pytest.MonkeyPatch) -> None:
    store = MemoryNotificationStore()
    for index in range(60):
        await store.insert("Shopee", f"n{index}", "{}")
    monkeypatch.setattr(notifications_router, "_get_notification_store", lambda: store)

    response = await notifications_router.list_notifications()
    payload = json.loads(response.body.decode("utf-8"))

    assert len(payload) == notifications_router.NOTIFICATIONS_LIMIT == 50
    assert payload[0]["content"] == "n59"


@pytest.mark.asyncio
async def test_list_notifications_empty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(notifications_router, "_get_notification_store", MemoryNotificationStore)

    response = await notifications_router.list_notifications()

    assert response.status_code == 200
    assert json.loads(response.body) == []


@pytest.mark.asyncio
async def test_list_notifications_store_error_returns_500(monkeypatch: pytest.MonkeyPatch) -> None:
    store = MagicMock()
    store.list_recent = AsyncMock(side_effect=FirestoreUnavailableError("down"))
    monkeypatch.setattr(notifications_router, "_get_notification_store", lambda: store)

    response = await notifications_router.list_notifications()

    assert response.status_code == 500
    assert json.loads(response.body) == {"error": "Database Error"}
