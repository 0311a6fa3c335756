"""Protocolo de envio de mensagens ao chat."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import ForwardResult, SlackMessage


class ChatForwarderProtocol(Protocol):
    """Contrato mínimo do forwarder (fire-and-forget para o use case).

    Implementações nunca levantam exceção: falhas viram ForwardResult.
    """

    async def post(self, webhook_url: str, message: SlackMessage) -> ForwardResult: ...
