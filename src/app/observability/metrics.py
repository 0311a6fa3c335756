"""Registro de métricas via structured logging.

As métricas são logs estruturados (`metric_type` no extra) agregados
depois no backend de logs (Cloud Logging, BigQuery).

Métricas:
- Latência: tempo de execução por componente/operação
- Relay: resultado de cada webhook aceito (assinatura, gravação, envio)

Uso:
    start = time.perf_counter()
    ...
    record_latency("relay", "execute", (time.perf_counter() - start) * 1000)
    record_relay_outcome(signature_valid=True, persisted=True, forwarded=False)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "relay", "notification_store")
        operation: Nome da operação (ex: "execute", "list_recent")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (default: o do contexto)
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_relay_outcome(
    signature_valid: bool,
    persisted: bool,
    forwarded: bool,
) -> None:
    """Registra o resultado de um webhook aceito (counter por combinação)."""
    logger.info(
        "metric_relay_outcome",
        extra={
            "metric_type": "relay_outcome",
            "component": "relay",
            "signature_valid": signature_valid,
            "persisted": persisted,
            "forwarded": forwarded,
        },
    )
