"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e expõe
singletons de store e use case.

Uso:
    from app.bootstrap import initialize_app, get_relay_use_case

    initialize_app()
    use_case = get_relay_use_case()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_firestore_settings,
    get_notification_store_settings,
    get_shopee_settings,
    get_slack_settings,
)

if TYPE_CHECKING:
    from app.protocols.notification_store import NotificationStoreProtocol
    from app.use_cases.shopee import RelayNotificationUseCase

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    store_settings = get_notification_store_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"shopee: {error}" for error in get_shopee_settings().validate())
    errors.extend(f"slack: {error}" for error in get_slack_settings().validate())
    errors.extend(f"store: {error}" for error in store_settings.validate(base))

    if store_settings.backend == "firestore":
        firestore_errors = get_firestore_settings().validate(base.gcp_project)
        errors.extend(f"firestore: {error}" for error in firestore_errors)

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_notification_store() -> NotificationStoreProtocol:
    """Obtém store de notificações (singleton)."""
    from app.bootstrap.dependencies import create_notification_store

    return create_notification_store()


@lru_cache(maxsize=1)
def get_relay_use_case() -> RelayNotificationUseCase:
    """Obtém use case de relay (singleton, mesmo store da listagem)."""
    from app.bootstrap.dependencies import create_relay_use_case

    return create_relay_use_case(store=get_notification_store())
