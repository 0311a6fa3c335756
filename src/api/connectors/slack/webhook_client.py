"""Cliente do incoming webhook do Slack.

Fire-and-forget do ponto de vista do relay: falhas viram ForwardResult,
nunca exceção. Sem retries; o timeout limita quanto um Slack lento
segura o request.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from app.protocols.models import ForwardResult

if TYPE_CHECKING:
    from app.protocols.models import SlackMessage

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


class SlackWebhookForwarder:
    """Envia SlackMessage como JSON para um incoming webhook.

    Args:
        timeout_seconds: Timeout total da chamada HTTP
        transport: Transport httpx opcional (testes)
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def post(self, webhook_url: str, message: SlackMessage) -> ForwardResult:
        if not webhook_url:
            logger.warning("slack_forward_skipped", extra={"reason": "not_configured"})
            return ForwardResult(delivered=False, error="not_configured")

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    webhook_url,
                    json=message.as_payload(),
                    timeout=self._timeout_seconds,
                )
        except httpx.TimeoutException:
            logger.warning("slack_forward_timeout", extra={"timeout_seconds": self._timeout_seconds})
            return ForwardResult(delivered=False, error="timeout")
        except httpx.HTTPError as exc:
            logger.warning("slack_forward_error", extra={"error_type": type(exc).__name__})
            return ForwardResult(delivered=False, error=type(exc).__name__)

        if response.is_success:
            logger.debug("slack_forward_sent", extra={"status_code": response.status_code})
            return ForwardResult(delivered=True, status_code=response.status_code)

        logger.warning("slack_forward_rejected", extra={"status_code": response.status_code})
        return ForwardResult(
            delivered=False,
            status_code=response.status_code,
            error="http_status",
        )
