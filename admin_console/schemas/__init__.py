# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas."""
from admin_console.schemas.common import ConsoleModel, Entity, MessageResponse
from admin_console.schemas.company import Company, CompanyCreate, CompanyUpdate
from admin_console.schemas.group import Group, GroupCreate, GroupUpdate
from admin_console.schemas.notification import NotificationCreate, NotificationResponse
from admin_console.schemas.user import User, UserCreate, UserSummary, UserUpdate

__all__ = [
    "Company",
    "CompanyCreate",
    "CompanyUpdate",
    "ConsoleModel",
    "Entity",
    "Group",
    "GroupCreate",
    "GroupUpdate",
    "MessageResponse",
    "NotificationCreate",
    "NotificationResponse",
    "User",
    "UserCreate",
    "UserSummary",
    "UserUpdate",
]
