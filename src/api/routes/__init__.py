"""Rotas HTTP da API — adapters de entrada.

Estrutura:
- routes/health/: raiz, liveness e readiness
- routes/notifications/: listagem para o painel
- routes/shopee/: webhook de pushes da Shopee
- routes/fallback/: OPTIONS genérico e 405

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
