"""Use case de relay: verifica, normaliza, grava e encaminha um push Shopee.

Sequência por request (sem retries, sem estado entre requests):

1. Sem assinatura -> MissingSignatureError (401), sem efeitos colaterais
2. Verifica HMAC sobre os bytes brutos; resultado só anota o fluxo
3. Parse JSON -> InvalidJsonError (400), sem efeitos colaterais
4. Normaliza o payload para texto
5. Grava no store (best-effort: falha é logada e engolida)
6. Encaminha ao Slack, com aviso se a assinatura for inválida
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.observability import record_latency, record_relay_outcome
from app.protocols.models import (
    ForwardResult,
    PersistOutcome,
    RelayResult,
    SlackMessage,
)
from utils.errors import InvalidJsonError, MissingSignatureError

if TYPE_CHECKING:
    from app.protocols.chat_forwarder import ChatForwarderProtocol
    from app.protocols.models import InboundWebhook, VerificationResult
    from app.protocols.normalizer import PayloadNormalizerProtocol
    from app.protocols.notification_store import NotificationStoreProtocol
    from app.protocols.signature import SignatureVerifierProtocol

logger = logging.getLogger(__name__)

INVALID_SIGNATURE_WARNING = "⚠️ *WARNING: Invalid Signature* (Check Shopee URL settings)\n"


@dataclass(frozen=True)
class RelayConfig:
    """Configuração explícita do relay (vinda do ambiente no startup).

    Attributes:
        partner_key: Chave compartilhada para HMAC
        slack_webhook_url: Incoming webhook de destino
        project_tag: Tag gravada em cada notificação
    """

    partner_key: str
    slack_webhook_url: str
    project_tag: str = "Shopee"


def _reject_constant(value: str) -> Any:
    raise ValueError(f"invalid JSON constant: {value}")


def parse_json_body(raw_body: bytes) -> Any:
    """Parse estrito do corpo (sem NaN/Infinity).

    Raises:
        InvalidJsonError: Se o corpo não for JSON válido.
    """
    try:
        return json.loads(raw_body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise InvalidJsonError("invalid_json") from exc


def build_slack_message(content: str, signature_valid: bool) -> SlackMessage:
    """Monta a mensagem do Slack, com aviso apenas se a assinatura falhou."""
    warning = "" if signature_valid else INVALID_SIGNATURE_WARNING
    return SlackMessage(text=f"{warning}{content}")


class RelayNotificationUseCase:
    """Orquestra verificação, normalização, gravação e envio ao chat."""

    def __init__(
        self,
        config: RelayConfig,
        verifier: SignatureVerifierProtocol,
        normalizer: PayloadNormalizerProtocol,
        store: NotificationStoreProtocol,
        forwarder: ChatForwarderProtocol,
    ) -> None:
        self._config = config
        self._verifier = verifier
        self._normalizer = normalizer
        self._store = store
        self._forwarder = forwarder

    async def execute(self, webhook: InboundWebhook) -> RelayResult:
        """Processa um push recebido.

        Raises:
            MissingSignatureError: Header Authorization ausente/vazio.
            InvalidJsonError: Corpo não é JSON válido.

        Returns:
            RelayResult para logs; a resposta HTTP é sempre 200.
        """
        started_at = time.perf_counter()

        if not webhook.has_signature:
            raise MissingSignatureError("missing_signature")

        verification = self._verifier(webhook, self._config.partner_key)
        self._log_verification(verification, payload_size=len(webhook.raw_body))

        payload = parse_json_body(webhook.raw_body)
        content = self._normalizer(payload)

        persisted = await self._persist(content, webhook.raw_payload_text())
        message = build_slack_message(content, verification.valid)
        forwarded = await self._forward(message)

        record_relay_outcome(
            signature_valid=verification.valid,
            persisted=persisted.success,
            forwarded=forwarded.delivered,
        )
        record_latency("relay", "execute", (time.perf_counter() - started_at) * 1000)

        return RelayResult(
            signature_valid=verification.valid,
            persisted=persisted.success,
            forwarded=forwarded.delivered,
            content=content,
        )

    async def _persist(self, content: str, raw_payload: str) -> PersistOutcome:
        try:
            record = await self._store.insert(
                project=self._config.project_tag,
                content=content,
                raw_payload=raw_payload,
            )
        except Exception as exc:
            # Gravação é best-effort: o envio ao chat segue
            logger.error(
                "notification_persist_failed",
                extra={"error_type": type(exc).__name__, "error": str(exc)},
            )
            return PersistOutcome(success=False, error=type(exc).__name__)

        logger.info("notification_persisted", extra={"record_id": record.id})
        return PersistOutcome(success=True, record_id=record.id)

    async def _forward(self, message: SlackMessage) -> ForwardResult:
        try:
            result = await self._forwarder.post(self._config.slack_webhook_url, message)
        except Exception as exc:
            logger.exception("chat_forward_crashed", extra={"error_type": type(exc).__name__})
            return ForwardResult(delivered=False, error=type(exc).__name__)

        if not result.delivered:
            logger.warning(
                "chat_forward_failed",
                extra={"status_code": result.status_code, "error": result.error},
            )
        return result

    @staticmethod
    def _log_verification(verification: VerificationResult, payload_size: int) -> None:
        if verification.valid:
            logger.info(
                "webhook_signature_valid",
                extra={"payload_size": payload_size},
            )
            return
        logger.warning(
            "webhook_signature_invalid",
            extra={"payload_size": payload_size, "reason": verification.reason},
        )
