"""Formatter JSON dos logs do relay.

Todo log sai como uma linha JSON com os campos de REQUIRED_LOG_FIELDS,
renomeados conforme FIELD_RENAME_MAP (levelname -> level, name -> logger).
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "2026-10-18 10:30:00,123", "level": "INFO",
         "logger": "app.use_cases.shopee.relay_notification",
         "message": "webhook_relayed", "correlation_id": "abc-123",
         "service": "shopee-notify-relay", "signature_valid": true}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
