"""Factories — criação das implementações concretas a partir das settings.

Único ponto onde app/ conecta implementações de api/ (assinatura,
normalizer, Slack) aos protocolos consumidos pelo use case.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.shopee import verify_push_signature
from api.connectors.slack import SlackWebhookForwarder
from api.normalizers.shopee import normalize_payload
from app.bootstrap.clients import create_firestore_client
from app.infra.stores import FirestoreNotificationStore, MemoryNotificationStore
from app.use_cases.shopee import RelayConfig, RelayNotificationUseCase
from config.settings import (
    get_base_settings,
    get_firestore_settings,
    get_notification_store_settings,
    get_shopee_settings,
    get_slack_settings,
)

if TYPE_CHECKING:
    from app.protocols.chat_forwarder import ChatForwarderProtocol
    from app.protocols.notification_store import NotificationStoreProtocol

logger = logging.getLogger(__name__)


def create_notification_store() -> NotificationStoreProtocol:
    """Cria store de notificações baseado na configuração.

    Lê NOTIFICATION_STORE_BACKEND:
    - "memory": MemoryNotificationStore (dev only)
    - "firestore": FirestoreNotificationStore (staging/production)

    Returns:
        Implementação de NotificationStoreProtocol
    """
    settings = get_notification_store_settings()

    if settings.backend == "firestore":
        firestore_settings = get_firestore_settings()
        store = FirestoreNotificationStore(
            create_firestore_client(),
            collection_name=firestore_settings.collection_notifications,
            counters_collection=firestore_settings.collection_counters,
        )
        logger.info("notification_store_created", extra={"backend": "firestore"})
        return store

    base = get_base_settings()
    if not base.is_development:
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": "memory", "environment": base.environment},
        )
    logger.info("notification_store_created", extra={"backend": "memory"})
    return MemoryNotificationStore()


def create_chat_forwarder() -> ChatForwarderProtocol:
    """Cria forwarder do Slack com o timeout configurado."""
    settings = get_slack_settings()
    return SlackWebhookForwarder(timeout_seconds=settings.request_timeout_seconds)


def create_relay_config() -> RelayConfig:
    """Monta RelayConfig a partir das settings de ambiente."""
    shopee = get_shopee_settings()
    return RelayConfig(
        partner_key=shopee.partner_key,
        slack_webhook_url=get_slack_settings().webhook_url,
        project_tag=shopee.project_tag,
    )


def create_relay_use_case(
    store: NotificationStoreProtocol,
    forwarder: ChatForwarderProtocol | None = None,
) -> RelayNotificationUseCase:
    """Cria o use case de relay com as implementações padrão.

    Args:
        store: Store compartilhado com a rota de listagem
        forwarder: Forwarder (default: Slack)

    Returns:
        RelayNotificationUseCase pronto para uso
    """
    return RelayNotificationUseCase(
        config=create_relay_config(),
        verifier=verify_push_signature,
        normalizer=normalize_payload,
        store=store,
        forwarder=forwarder or create_chat_forwarder(),
    )
