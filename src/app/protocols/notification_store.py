"""Protocolo do store de notificações.

Contrato consumido pelo use case de relay e pela rota de listagem.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import NotificationRecord


class NotificationStoreProtocol(ABC):
    """Contrato para persistência append-only de notificações.

    Invariantes:
        - `id` e `created_at` atribuídos pelo store
        - `raw_payload` gravado sem alteração
        - Falhas levantam NotificationStoreError
    """

    @abstractmethod
    async def insert(
        self,
        project: str,
        content: str,
        raw_payload: str,
    ) -> NotificationRecord:
        """Grava uma nova notificação.

        Raises:
            NotificationStoreError: Se a gravação falhar.
        """

    @abstractmethod
    async def list_recent(self, limit: int) -> list[NotificationRecord]:
        """Retorna as notificações mais recentes (created_at desc).

        Raises:
            NotificationStoreError: Se a consulta falhar.
        """

    @abstractmethod
    async def ping(self) -> bool:
        """Verifica se o backend está acessível (readiness)."""
