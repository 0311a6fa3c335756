"""Endpoints de health check (raiz, liveness e readiness)."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap import get_notification_store
from config.settings import get_base_settings, get_slack_settings

logger = logging.getLogger(__name__)

router = APIRouter()

ROOT_MESSAGE = "Shopee Notification Service Running"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/")
async def root() -> Response:
    """Health check simples esperado pelo painel e pela Shopee."""
    return Response(
        content=ROOT_MESSAGE,
        media_type="text/plain",
        status_code=status.HTTP_200_OK,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: store acessível; Slack configurado é desejável."""
    store_check = await _check_store()
    slack_check = _check_slack()
    ready = store_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "notification_store": store_check.as_dict(),
            "slack": slack_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_store() -> DependencyCheck:
    started_at = time.perf_counter()
    try:
        store = get_notification_store()
        reachable = await asyncio.wait_for(store.ping(), timeout=3.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_store_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    if not reachable:
        return DependencyCheck(status="failed", error="unreachable")
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))


def _check_slack() -> DependencyCheck:
    if not get_slack_settings().is_configured:
        return DependencyCheck(status="degraded", error="not_configured")
    return DependencyCheck(status="ok")
