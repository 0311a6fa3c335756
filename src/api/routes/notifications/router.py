"""Listagem das notificações recebidas (consumida pelo painel web)."""

from __future__ import annotations

import logging
from datetime import datetime  # noqa: TC003 - usado em runtime pelo pydantic
from typing import TYPE_CHECKING

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap import get_notification_store

if TYPE_CHECKING:
    from app.protocols.models import NotificationRecord
    from app.protocols.notification_store import NotificationStoreProtocol

logger = logging.getLogger(__name__)

router = APIRouter()

NOTIFICATIONS_LIMIT = 50


class NotificationResponse(BaseModel):
    """Notificação serializada para o painel."""

    id: int
    project: str
    content: str
    raw_payload: str
    is_read: bool
    created_at: datetime

    @classmethod
    def from_record(cls, record: NotificationRecord) -> NotificationResponse:
        return cls(
            id=record.id,
            project=record.project,
            content=record.content,
            raw_payload=record.raw_payload,
            is_read=record.is_read,
            created_at=record.created_at,
        )


def _get_notification_store() -> NotificationStoreProtocol:
    return get_notification_store()


@router.get("/api/notifications", response_model=None)
async def list_notifications() -> JSONResponse:
    """Retorna até 50 notificações, mais recentes primeiro.

    Returns:
        200 com lista JSON, ou 500 {"error": "Database Error"}.
    """
    try:
        records = await _get_notification_store().list_recent(NOTIFICATIONS_LIMIT)
    except Exception as exc:
        logger.error(
            "notifications_list_failed",
            extra={"error_type": type(exc).__name__},
        )
        return JSONResponse(
            content={"error": "Database Error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    items = [
        NotificationResponse.from_record(record).model_dump(mode="json")
        for record in records[:NOTIFICATIONS_LIMIT]
    ]
    return JSONResponse(content=items, status_code=status.HTTP_200_OK)
