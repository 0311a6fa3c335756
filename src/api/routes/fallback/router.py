"""Rotas de fallback: OPTIONS genérico e 405 para o resto.

Registrado por último; só recebe o que nenhuma outra rota atendeu.
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from api.routes.cors import CORS_HEADERS

router = APIRouter()


@router.options("/{path:path}")
async def options_any() -> Response:
    """Responde OPTIONS fora de preflight com a política CORS."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)


@router.api_route("/{path:path}", methods=["GET", "PUT", "PATCH", "DELETE"])
async def method_not_allowed() -> Response:
    return Response(
        content="Method Not Allowed",
        media_type="text/plain",
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        headers=CORS_HEADERS,
    )
