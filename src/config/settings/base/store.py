"""Settings do store de notificações."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

NotificationStoreBackend = Literal["memory", "firestore"]


@dataclass(frozen=True)
class NotificationStoreSettings:
    """Configurações do store de notificações.

    Attributes:
        backend: Backend de persistência (memory|firestore)
    """

    backend: NotificationStoreBackend = "memory"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações do store.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "firestore"):
            errors.append(f"NOTIFICATION_STORE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append(
                "NOTIFICATION_STORE_BACKEND=memory proibido em staging/production. "
                "Use Firestore."
            )

        if self.backend == "firestore" and not base.gcp_project:
            errors.append("NOTIFICATION_STORE_BACKEND=firestore requer GCP_PROJECT configurado")

        return errors


def _load_store_from_env() -> NotificationStoreSettings:
    """Carrega NotificationStoreSettings de variáveis de ambiente."""
    backend_str = os.getenv("NOTIFICATION_STORE_BACKEND", "memory").lower()
    backend: NotificationStoreBackend = (
        backend_str if backend_str in ("memory", "firestore") else "memory"
    )
    return NotificationStoreSettings(backend=backend)


@lru_cache(maxsize=1)
def get_notification_store_settings() -> NotificationStoreSettings:
    """Retorna instância cacheada de NotificationStoreSettings."""
    return _load_store_from_env()
