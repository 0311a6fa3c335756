"""Endpoint de webhook da Shopee.

Endpoints:
- POST / (ou qualquer caminho): recebimento de pushes

Fluxo:
1. Lê body bruto (bytes) e header Authorization
2. Delega para RelayNotificationUseCase
3. Mapeia erros terminais para 401/400; demais casos respondem 200

Segurança:
- Assinatura inválida NÃO bloqueia: a mensagem no Slack recebe aviso
- Falhas de gravação/envio nunca mudam o status da resposta
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status

from api.connectors.shopee.webhook import build_inbound_webhook
from app.bootstrap import get_relay_use_case
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from utils.errors import InvalidJsonError, MissingSignatureError

if TYPE_CHECKING:
    from app.use_cases.shopee import RelayNotificationUseCase

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_relay_use_case() -> RelayNotificationUseCase:
    """Obtém o use case de relay (lazy-loading via bootstrap)."""
    return get_relay_use_case()


@router.post("/", response_model=None)
@router.post("/{path:path}", response_model=None)
async def receive_webhook(request: Request) -> Response:
    """Recebimento de pushes da Shopee.

    Returns:
        401 "Missing Signature", 400 "Invalid JSON" ou 200 "OK".
    """
    correlation_id = request.headers.get("x-correlation-id")
    token = set_correlation_id(correlation_id)

    try:
        raw_body = await request.body()
        inbound = build_inbound_webhook(
            raw_body=raw_body,
            request_url=str(request.url),
            headers=request.headers,
        )

        try:
            result = await _get_relay_use_case().execute(inbound)

        except MissingSignatureError:
            logger.warning(
                "webhook_signature_missing",
                extra={"channel": "shopee", "correlation_id": get_correlation_id()},
            )
            return Response(
                content="Missing Signature",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )

        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={
                    "channel": "shopee",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            return Response(
                content="Invalid JSON",
                media_type="text/plain",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(
            "webhook_relayed",
            extra={
                "channel": "shopee",
                "correlation_id": get_correlation_id(),
                "signature_valid": result.signature_valid,
                "persisted": result.persisted,
                "forwarded": result.forwarded,
                "payload_size": len(raw_body),
            },
        )
        return Response(content="OK", media_type="text/plain", status_code=status.HTTP_200_OK)

    finally:
        reset_correlation_id(token)
