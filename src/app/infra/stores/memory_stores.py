"""Store de notificações em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import itertools
from datetime import UTC, datetime

from app.protocols.models import NotificationRecord
from app.protocols.notification_store import NotificationStoreProtocol


class MemoryNotificationStore(NotificationStoreProtocol):
    """Store append-only em memória com ids sequenciais."""

    def __init__(self, max_records: int = 10000) -> None:
        self._records: list[NotificationRecord] = []
        self._ids = itertools.count(1)
        self._max_records = max_records

    async def insert(
        self,
        project: str,
        content: str,
        raw_payload: str,
    ) -> NotificationRecord:
        record = NotificationRecord(
            id=next(self._ids),
            project=project,
            content=content,
            raw_payload=raw_payload,
            created_at=datetime.now(UTC),
        )
        self._records.append(record)
        # Limita memória descartando os mais antigos
        if len(self._records) > self._max_records:
            self._records = self._records[-self._max_records :]
        return record

    async def list_recent(self, limit: int) -> list[NotificationRecord]:
        ordered = sorted(
            self._records,
            key=lambda record: (record.created_at, record.id),
            reverse=True,
        )
        return ordered[: max(limit, 0)]

    async def ping(self) -> bool:
        return True

    @property
    def records(self) -> list[NotificationRecord]:
        """Cópia dos registros em ordem de inserção (para testes)."""
        return list(self._records)
