"""Leitura inicial do webhook Shopee (sem PII)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.models import InboundWebhook

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "authorization"


def build_inbound_webhook(
    raw_body: bytes,
    request_url: str,
    headers: Mapping[str, str],
) -> InboundWebhook:
    """Empacota o request bruto para verificação e auditoria.

    Args:
        raw_body: Corpo bruto do request
        request_url: URL completa do request
        headers: Headers recebidos (chaves em minúsculas, como no ASGI)

    Returns:
        InboundWebhook imutável
    """
    return InboundWebhook(
        raw_body=raw_body,
        request_url=request_url,
        signature_header=headers.get(SIGNATURE_HEADER),
    )
