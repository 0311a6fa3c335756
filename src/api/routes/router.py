"""Agregador de rotas — registra todos os routers do serviço.

Ordem importa: rotas específicas primeiro, fallback por último.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.fallback.router import router as fallback_router
from api.routes.health.router import router as health_router
from api.routes.notifications.router import router as notifications_router
from api.routes.shopee.router import router as shopee_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (GET /, /health, /ready)
    api_router.include_router(health_router, tags=["health"])

    # Painel
    api_router.include_router(notifications_router, tags=["notifications"])

    # Webhook Shopee (POST em qualquer caminho)
    api_router.include_router(shopee_router, tags=["shopee"])

    # OPTIONS genérico e 405
    api_router.include_router(fallback_router, tags=["fallback"])

    return api_router
