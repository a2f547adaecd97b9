"""Endpoints receiving database change events and listing notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from dogsitter.application.use_cases.notifications import EventRouter
from dogsitter.config import Settings, get_settings
from dogsitter.domain.entities import Notification
from dogsitter.domain.errors import MalformedEventError
from dogsitter.infrastructure.database import SessionFactory, run_in_session
from dogsitter.infrastructure.repositories import NotificationRepository
from dogsitter.interfaces.api.dependencies import get_event_router, get_session_factory
from dogsitter.interfaces.api.routes_helpers import (
    error_response,
    json_response,
    preflight_response,
    read_json_body,
)
from dogsitter.interfaces.api.schemas import (
    ChangeEventRequest,
    NotificationInbox,
    NotificationRead,
)

router = APIRouter(tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or "",
        recipient_id=notification.recipient_id,
        type=notification.type.value,
        title=notification.title,
        body=notification.body,
        data=notification.data or {},
        is_read=notification.is_read,
        created_at=notification.created_at,
    )


@router.options("/send-notification", include_in_schema=False)
def send_notification_preflight() -> Response:
    return preflight_response()


@router.post("/send-notification")
async def send_notification(
    request: Request,
    event_router: EventRouter = Depends(get_event_router),
) -> JSONResponse:
    """Turn one database change event into at most one notification."""

    try:
        payload = await read_json_body(request)
    except ValueError:
        return error_response("Request body must be valid JSON", status.HTTP_400_BAD_REQUEST)

    try:
        event = ChangeEventRequest.model_validate(payload).to_event()
    except (ValidationError, MalformedEventError) as exc:
        logger.warning("Rejected malformed change event: %s", exc)
        return error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    result = await event_router.dispatch(event)
    if not result.succeeded:
        return error_response(result.error or "Unknown error", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return json_response({"success": True})


@router.get("/notifications/{recipient_id}")
async def list_notifications(
    recipient_id: str,
    limit: int = Query(50, ge=1, le=200),
    session_factory: SessionFactory = Depends(get_session_factory),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Return the most recent notifications for ``recipient_id``."""

    def _load(session) -> tuple[list[Notification], int]:
        repository = NotificationRepository(session)
        return (
            list(repository.list_for_recipient(recipient_id, limit=limit)),
            repository.count_unread(recipient_id),
        )

    try:
        notifications, unread = await run_in_session(
            session_factory, _load, timeout=settings.remote_call_timeout_seconds
        )
    except (SQLAlchemyError, TimeoutError) as exc:
        logger.error("Error fetching notifications for %s: %s", recipient_id, exc)
        return error_response("Failed to fetch notifications", status.HTTP_500_INTERNAL_SERVER_ERROR)

    inbox = NotificationInbox(
        notifications=[_notification_to_schema(item) for item in notifications],
        unread_count=unread,
    )
    return json_response(inbox.model_dump(mode="json", by_alias=True))
