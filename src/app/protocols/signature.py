"""Protocolo de verificação de assinatura de webhook."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import InboundWebhook, VerificationResult


class SignatureVerifierProtocol(Protocol):
    """Contrato para validar a assinatura de um push recebido."""

    def __call__(self, webhook: InboundWebhook, partner_key: str) -> VerificationResult: ...
