"""Normalizer Shopee — converte o payload do push em texto legível.

Dois formatos:
- Mensagem de chat (`data.content` presente): resumo curto com remetente
- Qualquer outro evento: JSON indentado dentro de code fence do Slack

Nunca falha para um valor JSON bem formado; JSON inválido é rejeitado
antes, no use case. O texto devolvido é sempre UTF-8 válido: surrogates
soltos (`"\\ud83d"` é JSON válido) viram U+FFFD.

`from_id` ausente vira `undefined`; `null` explícito vira `null`.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from config.logging import log_fallback

logger = logging.getLogger(__name__)

# Sentinela para campos ausentes
MISSING_VALUE = "undefined"

CODE_FENCE = "```"


def normalize_payload(payload: Any) -> str:
    """Normaliza payload JSON (já parseado) para exibição.

    Args:
        payload: Valor JSON arbitrário (dict, list, str, número, bool, None)

    Returns:
        Texto determinístico para o mesmo payload.
    """
    message = _extract_chat_message(payload)
    if message is not None:
        content, from_id = message
        return _well_formed(f"New Message: {content}\nFrom: {from_id}")

    log_fallback(logger, "shopee_normalizer", reason=f"shape_{type(payload).__name__}")
    return _well_formed(f"Received Event: {CODE_FENCE}{_pretty_json(payload)}{CODE_FENCE}")


def _extract_chat_message(payload: Any) -> tuple[str, str] | None:
    """Retorna (content, from_id) já renderizados se for mensagem de chat."""
    if not isinstance(payload, dict):
        return None
    data = payload.get("data")
    if not isinstance(data, dict):
        return None
    content = data.get("content")
    if not content:
        return None
    from_id = _render_value(data["from_id"]) if "from_id" in data else MISSING_VALUE
    return _render_value(content), from_id


def _render_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _pretty_json(payload: Any) -> str:
    # Ordem das chaves preservada como recebida
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _well_formed(text: str) -> str:
    # Surrogate solto não codifica em UTF-8 (Slack, Firestore, resposta JSON)
    return text.encode("utf-8", "surrogatepass").decode("utf-8", "replace")
