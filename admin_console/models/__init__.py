# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain enumerations."""
from admin_console.models.enums import (
    Action,
    EntityKind,
    ModalKind,
    NotificationKind,
    Profile,
)

__all__ = [
    "Action",
    "EntityKind",
    "ModalKind",
    "NotificationKind",
    "Profile",
]
