# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Notification endpoints."""

from fastapi import APIRouter, Depends, status

from admin_console.api.deps import get_notification_center
from admin_console.notifications.center import NotificationCenter
from admin_console.schemas.common import MessageResponse
from admin_console.schemas.notification import NotificationCreate, NotificationResponse

router = APIRouter()


@router.get(
    "",
    response_model=list[NotificationResponse],
    summary="List visible notifications",
)
async def list_notifications(
    center: NotificationCenter = Depends(get_notification_center),
) -> list[NotificationResponse]:
    return [
        NotificationResponse.model_validate(notification)
        for notification in center.visible_notifications
    ]


@router.post(
    "",
    response_model=NotificationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Queue a notification",
)
async def create_notification(
    data: NotificationCreate,
    center: NotificationCenter = Depends(get_notification_center),
) -> NotificationResponse:
    """Queue a notification. It expires on its own after the display duration."""
    notification_id = center.enqueue(data.message, data.kind)
    notification = next(n for n in center.notifications if n.id == notification_id)
    return NotificationResponse.model_validate(notification)


@router.delete(
    "/{notification_id}",
    response_model=MessageResponse,
    summary="Dismiss a notification",
)
async def dismiss_notification(
    notification_id: int,
    center: NotificationCenter = Depends(get_notification_center),
) -> MessageResponse:
    """Dismiss a notification. Dismissing twice is not an error."""
    if center.dismiss(notification_id):
        return MessageResponse(message="Notification dismissed")
    return MessageResponse(message="Notification already gone")
