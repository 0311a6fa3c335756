"""Exceções compartilhadas entre camadas (webhook e infraestrutura)."""

from __future__ import annotations


class WebhookRequestError(ValueError):
    """Erro base para requests de webhook rejeitados."""


class MissingSignatureError(WebhookRequestError):
    """Header Authorization ausente ou vazio."""


class InvalidJsonError(WebhookRequestError):
    """Corpo do webhook não é JSON válido."""


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class NotificationStoreError(InfrastructureError):
    """Falha ao gravar ou consultar notificações."""


class FirestoreUnavailableError(NotificationStoreError):
    """Falha de indisponibilidade ao acessar Firestore."""
