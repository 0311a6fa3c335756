"""Webhook Shopee: leitura do request e assinatura."""

from ..signature import verify_push_signature
from .receive import SIGNATURE_HEADER, build_inbound_webhook

__all__ = [
    "SIGNATURE_HEADER",
    "build_inbound_webhook",
    "verify_push_signature",
]
