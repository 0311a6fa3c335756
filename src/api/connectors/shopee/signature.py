"""Validação de assinatura HMAC-SHA256 dos pushes da Shopee.

A Shopee assina `"{url}|{body}"`: a URL exata do callback, um `|` literal
e o corpo bruto. Qualquer normalização (barra final, query string,
JSON re-serializado) quebra a verificação.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import TYPE_CHECKING

from app.protocols.models import VerificationResult

if TYPE_CHECKING:
    from app.protocols.models import InboundWebhook

CANONICAL_SEPARATOR = b"|"


def build_canonical_input(request_url: str, raw_body: bytes) -> bytes:
    """Monta o canonical string byte a byte.

    Args:
        request_url: URL completa do request, sem normalização
        raw_body: Corpo bruto, sem parse

    Returns:
        Bytes `url | body` sobre os quais a assinatura é calculada.
    """
    return request_url.encode("utf-8") + CANONICAL_SEPARATOR + raw_body


def compute_push_signature(canonical_input: bytes, partner_key: bytes) -> str:
    """Calcula HMAC-SHA256 em hex minúsculo (2 dígitos por byte)."""
    return hmac.new(partner_key, canonical_input, hashlib.sha256).hexdigest()


def verify(canonical_input: bytes, provided_signature: str, shared_key: bytes) -> bool:
    """Compara a assinatura recebida com a calculada em tempo constante.

    Nunca levanta exceção: valores malformados retornam False.

    Args:
        canonical_input: Canonical string (ver build_canonical_input)
        provided_signature: Valor do header Authorization
        shared_key: Partner key em bytes

    Returns:
        True se assinatura válida
    """
    expected = compute_push_signature(canonical_input, shared_key)
    try:
        provided = provided_signature.encode("utf-8")
    except (AttributeError, UnicodeEncodeError):
        return False
    return hmac.compare_digest(expected.encode("ascii"), provided)


def verify_push_signature(webhook: InboundWebhook, partner_key: str) -> VerificationResult:
    """Valida a assinatura de um push recebido.

    Ausência de assinatura é tratada antes, pelo use case de relay.

    Args:
        webhook: Push recebido
        partner_key: Partner key configurada (texto)

    Returns:
        VerificationResult (sem material secreto)
    """
    canonical_input = build_canonical_input(webhook.request_url, webhook.raw_body)
    valid = verify(
        canonical_input,
        webhook.signature_header or "",
        partner_key.encode("utf-8"),
    )
    return VerificationResult(valid=valid, reason=None if valid else "signature_mismatch")
