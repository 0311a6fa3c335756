"""Firestore Notification Store — persistência das notificações recebidas.

Estrutura no Firestore:
    notifications/{id}        documento da notificação
    counters/notifications    último id atribuído ({"value": int})

Características:
    - Append-only (o relay nunca atualiza nem remove)
    - Ids inteiros sequenciais alocados em transação
    - Listagem por created_at desc com limite
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.protocols.models import NotificationRecord
from app.protocols.notification_store import NotificationStoreProtocol
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

NOTIFICATIONS_COLLECTION = "notifications"
COUNTERS_COLLECTION = "counters"


class FirestoreNotificationStore(NotificationStoreProtocol):
    """Store de notificações usando Firestore.

    Usa asyncio.to_thread pois o SDK Python do Firestore é síncrono.

    Args:
        firestore_client: Cliente Firestore
        collection_name: Collection das notificações
        counters_collection: Collection do contador de ids
    """

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection_name: str = NOTIFICATIONS_COLLECTION,
        counters_collection: str = COUNTERS_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection_name
        self._counters = counters_collection

    async def insert(
        self,
        project: str,
        content: str,
        raw_payload: str,
    ) -> NotificationRecord:
        return await asyncio.to_thread(self._insert_sync, project, content, raw_payload)

    async def list_recent(self, limit: int) -> list[NotificationRecord]:
        return await asyncio.to_thread(self._list_recent_sync, limit)

    async def ping(self) -> bool:
        try:
            await asyncio.to_thread(self._ping_sync)
        except Exception as exc:
            logger.warning("notification_store_ping_failed", extra={"error_type": type(exc).__name__})
            return False
        return True

    def _insert_sync(self, project: str, content: str, raw_payload: str) -> NotificationRecord:
        now = datetime.now(UTC)
        doc_data: dict[str, Any] = {
            "project": project,
            "content": content,
            "raw_payload": raw_payload,
            "is_read": False,
            "created_at": now,
        }

        try:
            record_id = self._allocate_and_write(doc_data)
        except Exception as e:
            logger.error(
                "notification_insert_error",
                extra={"error": str(e), "collection": self._collection},
            )
            raise FirestoreUnavailableError(f"Erro ao gravar notificação: {e}") from e

        logger.debug(
            "notification_inserted",
            extra={"collection": self._collection, "record_id": record_id},
        )
        return NotificationRecord(
            id=record_id,
            project=project,
            content=content,
            raw_payload=raw_payload,
            created_at=now,
        )

    def _allocate_and_write(self, doc_data: dict[str, Any]) -> int:
        """Incrementa o contador e grava o documento na mesma transação."""
        from google.cloud import firestore

        counter_ref = self._db.collection(self._counters).document(self._collection)
        notifications = self._db.collection(self._collection)

        @firestore.transactional
        def _write(transaction: firestore.Transaction) -> int:
            snapshot = counter_ref.get(transaction=transaction)
            current = (snapshot.to_dict() or {}).get("value", 0) if snapshot.exists else 0
            next_id = int(current) + 1
            transaction.set(counter_ref, {"value": next_id})
            transaction.set(notifications.document(str(next_id)), {**doc_data, "id": next_id})
            return next_id

        return _write(self._db.transaction())

    def _list_recent_sync(self, limit: int) -> list[NotificationRecord]:
        from google.cloud import firestore

        try:
            docs = (
                self._db.collection(self._collection)
                .order_by("created_at", direction=firestore.Query.DESCENDING)
                .limit(limit)
                .stream()
            )
            records = [_to_record(doc.id, doc.to_dict() or {}) for doc in docs]
        except Exception as e:
            logger.error(
                "notification_list_error",
                extra={"error": str(e), "collection": self._collection},
            )
            raise FirestoreUnavailableError(f"Erro ao listar notificações: {e}") from e

        logger.debug(
            "notifications_retrieved",
            extra={"collection": self._collection, "count": len(records)},
        )
        return records

    def _ping_sync(self) -> None:
        list(self._db.collection(self._collection).limit(1).stream())


def _to_record(doc_id: str, data: dict[str, Any]) -> NotificationRecord:
    created_at = data.get("created_at")
    if isinstance(created_at, str):
        created_at = datetime.fromisoformat(created_at)
    if not isinstance(created_at, datetime):
        created_at = datetime.fromtimestamp(0, UTC)
    return NotificationRecord(
        id=int(data.get("id", doc_id)),
        project=data.get("project", ""),
        content=data.get("content", ""),
        raw_payload=data.get("raw_payload", ""),
        is_read=bool(data.get("is_read", False)),
        created_at=created_at,
    )
