"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FirestoreUnavailableError,
    InfrastructureError,
    InvalidJsonError,
    MissingSignatureError,
    NotificationStoreError,
    WebhookRequestError,
)

__all__ = [
    "FirestoreUnavailableError",
    "InfrastructureError",
    "InvalidJsonError",
    "MissingSignatureError",
    "NotificationStoreError",
    "WebhookRequestError",
]
