# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Process-wide queue of ephemeral user-facing notifications."""

import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import partial
from typing import ClassVar

from admin_console.models.enums import NotificationKind
from admin_console.notifications.scheduling import (
    AsyncioScheduler,
    Scheduler,
    TimerHandle,
)

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_DURATION_MS = 5000
DEFAULT_MAX_VISIBLE = 5


@dataclass(frozen=True)
class Notification:
    """A single notification. Never mutated after creation."""

    id: int
    message: str
    kind: NotificationKind
    created_at: datetime


class NotificationCenter:
    """Ordered queue of notifications that expire on their own.

    Every entry gets its own timer; an entry disappears when its timer fires
    or when it is dismissed, whichever comes first. Identifiers are never
    reused during the lifetime of the process, so a late timer can never
    remove a newer entry.

    The center is confined to the thread running its scheduler (the event
    loop thread in production).
    """

    _instance: ClassVar["NotificationCenter | None"] = None

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        display_duration_ms: int = DEFAULT_DISPLAY_DURATION_MS,
        max_visible: int = DEFAULT_MAX_VISIBLE,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the notification center.

        Args:
            scheduler: Timer scheduler (defaults to the running asyncio loop)
            display_duration_ms: Time before an entry expires
            max_visible: Number of most recent entries exposed for display
            clock: Source of creation timestamps
        """
        self._scheduler = scheduler or AsyncioScheduler()
        self._display_duration = display_duration_ms / 1000
        self._max_visible = max_visible
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._ids = itertools.count()
        self._queue: list[Notification] = []
        self._timers: dict[int, TimerHandle] = {}

    @classmethod
    def get_instance(cls) -> "NotificationCenter":
        """Get the process-wide notification center."""
        if cls._instance is None:
            from admin_console.config import get_settings

            settings = get_settings()
            cls._instance = cls(
                display_duration_ms=settings.notification_duration_ms,
                max_visible=settings.max_visible_notifications,
            )
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide instance (for testing)."""
        if cls._instance is not None:
            cls._instance.cancel_timers()
        cls._instance = None

    @property
    def notifications(self) -> tuple[Notification, ...]:
        """All queued notifications in insertion order."""
        return tuple(self._queue)

    @property
    def visible_notifications(self) -> tuple[Notification, ...]:
        """The most recent entries, oldest first."""
        if self._max_visible <= 0:
            return tuple(self._queue)
        return tuple(self._queue[-self._max_visible :])

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    def enqueue(
        self, message: str, kind: NotificationKind = NotificationKind.INFO
    ) -> int:
        """Append a notification and schedule its expiry.

        Returns:
            Identifier of the new notification
        """
        kind = NotificationKind(kind)
        notification_id = next(self._ids)
        handle = self._scheduler.call_later(
            self._display_duration, partial(self._expire, notification_id)
        )
        self._timers[notification_id] = handle
        self._queue.append(
            Notification(
                id=notification_id,
                message=message,
                kind=kind,
                created_at=self._clock(),
            )
        )
        logger.debug(f"Notification {notification_id} ({kind.value}) queued: {message}")
        return notification_id

    def enqueue_error(self, message: str) -> int:
        """Append an error notification."""
        return self.enqueue(message, NotificationKind.ERROR)

    def dismiss(self, notification_id: int) -> bool:
        """Remove a notification and cancel its timer.

        Dismissing an entry that is already gone is a no-op.

        Returns:
            True if an entry was removed
        """
        handle = self._timers.pop(notification_id, None)
        if handle is not None:
            handle.cancel()
        return self._remove(notification_id)

    def cancel_timers(self) -> None:
        """Cancel all pending expiry timers, leaving the queue as is."""
        for handle in self._timers.values():
            handle.cancel()
        self._timers.clear()

    def _expire(self, notification_id: int) -> None:
        self._timers.pop(notification_id, None)
        if self._remove(notification_id):
            logger.debug(f"Notification {notification_id} expired")

    def _remove(self, notification_id: int) -> bool:
        for index, notification in enumerate(self._queue):
            if notification.id == notification_id:
                del self._queue[index]
                return True
        return False
