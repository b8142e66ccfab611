# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types shared across the console."""

from enum import Enum, IntEnum


class Profile(IntEnum):
    """Profile rank. Lower value means higher privilege."""

    ADMINISTRATOR = 1
    MANAGER = 2
    EMPLOYEE = 3


class EntityKind(str, Enum):
    """Kinds of entities managed by a console screen."""

    COMPANY = "company"
    GROUP = "group"
    USER = "user"


class Action(str, Enum):
    """Actions a screen may expose for an entity kind."""

    VIEW = "view"
    ADD = "add"
    EDIT = "edit"
    TOGGLE = "toggle"


class NotificationKind(str, Enum):
    """Notification kind enumeration."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ModalKind(str, Enum):
    """Modal states of a management screen.

    Exactly one is active at a time; NONE means no overlay is open.
    """

    NONE = "none"
    ADD = "add"
    EDIT = "edit"
    TOGGLE = "toggle"
    VIEW_DETAIL = "view_detail"
