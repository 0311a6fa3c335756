"""Agregador de settings do relay de notificações.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    NotificationStoreBackend,
    NotificationStoreSettings,
    get_base_settings,
    get_notification_store_settings,
)

# Infrastructure settings
from config.settings.infra import (
    FirestoreSettings,
    get_firestore_settings,
)

# Integration settings
from config.settings.shopee import (
    DEFAULT_PROJECT_TAG,
    ShopeeSettings,
    get_shopee_settings,
)
from config.settings.slack import (
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    # Constants
    "DEFAULT_PROJECT_TAG",
    # Base
    "BaseSettings",
    "Environment",
    # Infrastructure
    "FirestoreSettings",
    "NotificationStoreBackend",
    "NotificationStoreSettings",
    # Integrations
    "ShopeeSettings",
    "SlackSettings",
    "get_base_settings",
    "get_firestore_settings",
    "get_notification_store_settings",
    "get_shopee_settings",
    "get_slack_settings",
]
