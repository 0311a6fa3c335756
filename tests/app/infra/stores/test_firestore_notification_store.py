"""Testes do FirestoreNotificationStore com cliente mockado."""

from __future__ import annotations

from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

import pytest
from google.cloud import firestore

from app.infra.stores.firestore_notification_store import FirestoreNotificationStore, _to_record
from utils.errors import FirestoreUnavailableError, NotificationStoreError


def _doc(doc_id: str, data: dict[str, Any]) -> SimpleNamespace:
    return SimpleNamespace(id=doc_id, to_dict=lambda: data)


@pytest.mark.asyncio
async def test_insert_returns_record_with_allocated_id(monkeypatch: pytest.MonkeyPatch) -> None:
    store = FirestoreNotificationStore(MagicMock())
    captured: dict[str, Any] = {}

    def _fake_allocate(doc_data: dict[str, Any]) -> int:
        captured.update(doc_data)
        return 7

    monkeypatch.setattr(store, "_allocate_and_write", _fake_allocate)

    record = await store.insert("Shopee", "New Message: hi\nFrom: u1", '{"data": {}}')

    assert record.id == 7
    assert record.project == "Shopee"
    assert record.raw_payload == '{"data": {}}'
    assert record.is_read is False
    assert captured["is_read"] is False
    assert captured["raw_payload"] == '{"data": {}}'
    assert isinstance(captured["created_at"], datetime)


@pytest.mark.asyncio
async def test_insert_wraps_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    store = FirestoreNotificationStore(MagicMock())

    def _boom(doc_data: dict[str, Any]) -> int:
        raise ConnectionError("unavailable")

    monkeypatch.setattr(store, "_allocate_and_write", _boom)

    with pytest.raises(FirestoreUnavailableError) as exc_info:
        await store.insert("Shopee", "x", "{}")

    assert isinstance(exc_info.value, NotificationStoreError)


@pytest.mark.asyncio
async def test_list_recent_queries_by_created_at_desc() -> None:
    client = MagicMock()
    query = client.collection.return_value.order_by.return_value.limit.return_value
    created = datetime(2026, 5, 1, 12, 0, tzinfo=UTC)
    query.stream.return_value = [
        _doc("2", {"id": 2, "project": "Shopee", "content": "b", "raw_payload": "{}", "is_read": False, "created_at": created}),
        _doc("1", {"id": 1, "project": "Shopee", "content": "a", "raw_payload": "{}", "is_read": True, "created_at": created}),
    ]
    store = FirestoreNotificationStore(client, collection_name="notifications")

    records = await store.list_recent(50)

    client.collection.assert_called_with("notifications")
    client.collection.return_value.order_by.assert_called_once_with("created_at", direction=firestore.Query.DESCENDING)
    client.collection.return_value.order_by.return_value.limit.assert_called_once_with(50)
    assert [record.id for record in records] == [2, 1]
    assert records[1].is_read is True


@pytest.mark.asyncio
async def test_list_recent_wraps_errors() -> None:
    client = MagicMock()
    client.collection.side_effect = RuntimeError("permission denied")
    store = FirestoreNotificationStore(client)

    with pytest.raises(FirestoreUnavailableError):
        await store.list_recent(50)


@pytest.mark.asyncio
async def test_ping_reports_failure_without_raising() -> None:
    client = MagicMock()
    client.collection.return_value.limit.return_value.stream.side_effect = RuntimeError("down")
    store = FirestoreNotificationStore(client)

    assert await store.ping() is False


@pytest.mark.asyncio
async def test_ping_ok() -> None:
    client = MagicMock()
    client.collection.return_value.limit.return_value.stream.return_value = []

    assert await FirestoreNotificationStore(client).ping() is True


def test_to_record_uses_doc_id_and_parses_iso_dates() -> None:
    record = _to_record(
        "15",
        {"project": "Shopee", "content": "c", "raw_payload": "{}", "created_at": "2026-05-01T12:00:00+00:00"},
    )

    assert record.id == 15
    assert record.is_read is False
    assert record.created_at == datetime(2026, 5, 1, 12, 0, tzinfo=UTC)
