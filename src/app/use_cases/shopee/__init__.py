"""Use cases do relay de pushes da Shopee."""

from .relay_notification import (
    INVALID_SIGNATURE_WARNING,
    RelayConfig,
    RelayNotificationUseCase,
    build_slack_message,
    parse_json_body,
)

__all__ = [
    "INVALID_SIGNATURE_WARNING",
    "RelayConfig",
    "RelayNotificationUseCase",
    "build_slack_message",
    "parse_json_body",
]
