# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Notification schemas."""
import datetime

from pydantic import BaseModel, Field

from admin_console.models.enums import NotificationKind


class NotificationCreate(BaseModel):
    """Schema for queueing a notification."""

    message: str = Field(..., min_length=1, max_length=500)
    kind: NotificationKind = NotificationKind.INFO


class NotificationResponse(BaseModel):
    """Schema for notification response."""

    id: int
    message: str
    kind: NotificationKind
    created_at: datetime.datetime

    model_config = {"from_attributes": True}
