"""Protocolos e contratos do core da aplicação."""

from .chat_forwarder import ChatForwarderProtocol
from .models import (
    ForwardResult,
    InboundWebhook,
    NotificationRecord,
    PersistOutcome,
    RelayResult,
    SlackMessage,
    VerificationResult,
)
from .normalizer import PayloadNormalizerProtocol
from .notification_store import NotificationStoreProtocol
from .signature import SignatureVerifierProtocol

__all__ = [
    "ChatForwarderProtocol",
    "ForwardResult",
    "InboundWebhook",
    "NotificationRecord",
    "NotificationStoreProtocol",
    "PayloadNormalizerProtocol",
    "PersistOutcome",
    "RelayResult",
    "SignatureVerifierProtocol",
    "SlackMessage",
    "VerificationResult",
]
