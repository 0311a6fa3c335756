"""Modelos de domínio do relay de notificações.

Value objects imutáveis trocados entre rota, use case e adapters.
Nenhum deles carrega segredo ou estado entre requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime  # noqa: TC003 - usado em runtime nos dataclasses


@dataclass(frozen=True, slots=True)
class InboundWebhook:
    """Push recebido da Shopee, exatamente como chegou.

    Attributes:
        raw_body: Corpo bruto (bytes, sem parse)
        request_url: URL completa do request (base do canonical string)
        signature_header: Valor do header Authorization, se presente
    """

    raw_body: bytes
    request_url: str
    signature_header: str | None = None

    @property
    def has_signature(self) -> bool:
        return bool(self.signature_header)

    def raw_payload_text(self) -> str:
        """Corpo como texto para auditoria (bytes inválidos substituídos)."""
        return self.raw_body.decode("utf-8", errors="replace")


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """Julgamento da assinatura; não carrega material secreto."""

    valid: bool
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class NotificationRecord:
    """Notificação persistida pelo store.

    `id` e `created_at` são atribuídos pelo store.
    """

    id: int
    project: str
    content: str
    raw_payload: str
    created_at: datetime
    is_read: bool = False


@dataclass(frozen=True, slots=True)
class SlackMessage:
    """Mensagem efêmera enviada ao incoming webhook do Slack."""

    text: str

    def as_payload(self) -> dict[str, str]:
        return {"text": self.text}


@dataclass(frozen=True, slots=True)
class PersistOutcome:
    """Resultado da gravação best-effort (apenas para logs)."""

    success: bool
    record_id: int | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class ForwardResult:
    """Resultado do envio ao chat (apenas para logs)."""

    delivered: bool
    status_code: int | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class RelayResult:
    """Resumo do processamento de um webhook aceito."""

    signature_valid: bool
    persisted: bool
    forwarded: bool
    content: str
