"""Stores — implementações concretas de persistência.

Módulos disponíveis:
    - firestore_notification_store: Store de notificações usando Firestore
    - memory_stores: Store em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.firestore_notification_store import FirestoreNotificationStore
from app.infra.stores.memory_stores import MemoryNotificationStore

__all__ = [
    "FirestoreNotificationStore",
    "MemoryNotificationStore",
]
