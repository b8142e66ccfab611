# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Console sessions and the screens mounted in them."""

import logging
import uuid
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from admin_console.datasources.base import EntityDataSource
from admin_console.models.enums import EntityKind
from admin_console.notifications.center import NotificationCenter
from admin_console.viewmodels import VIEW_MODELS, EntityManagementViewModel

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = timedelta(hours=8)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ConsoleSession:
    """One browser session of the console.

    actor_profile is refreshed from the identity provider on every
    request; the screens read it lazily on each permission check.
    """

    session_id: str
    actor_profile: object = None
    screens: dict[EntityKind, EntityManagementViewModel] = field(default_factory=dict)
    created_at: datetime = field(default_factory=_utcnow)
    last_seen_at: datetime = field(default_factory=_utcnow)


class SessionStore:
    """In-process registry of console sessions.

    Sessions idle for longer than ttl are closed the next time the store is
    used, which disposes their screens.
    """

    def __init__(
        self,
        data_sources: Mapping[EntityKind, EntityDataSource],
        notifications: NotificationCenter,
        ttl: timedelta = DEFAULT_SESSION_TTL,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._data_sources = data_sources
        self._notifications = notifications
        self._ttl = ttl
        self._clock = clock
        self._sessions: dict[str, ConsoleSession] = {}

    @property
    def session_count(self) -> int:
        return len(self._sessions)

    def create(self) -> ConsoleSession:
        """Open a new session."""
        self.close_expired()
        now = self._clock()
        session = ConsoleSession(
            session_id=str(uuid.uuid4()), created_at=now, last_seen_at=now
        )
        self._sessions[session.session_id] = session
        logger.info("Console session opened")
        return session

    def get(self, session_id: str) -> ConsoleSession | None:
        """Get a live session and mark it as used."""
        self.close_expired()
        session = self._sessions.get(session_id)
        if session is not None:
            session.last_seen_at = self._clock()
        return session

    def close(self, session_id: str) -> bool:
        """Close a session and unmount its screens. Returns False if unknown."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        for view_model in session.screens.values():
            view_model.dispose()
        session.screens.clear()
        logger.info("Console session closed")
        return True

    def close_expired(self) -> int:
        """Close every session idle for longer than the ttl.

        Returns:
            Number of sessions closed
        """
        cutoff = self._clock() - self._ttl
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if session.last_seen_at < cutoff
        ]
        for session_id in expired:
            self.close(session_id)
        if expired:
            logger.info(f"Closed {len(expired)} idle console session(s)")
        return len(expired)

    def close_all(self) -> None:
        for session_id in list(self._sessions):
            self.close(session_id)

    def mount(
        self, session: ConsoleSession, kind: EntityKind
    ) -> tuple[EntityManagementViewModel, bool]:
        """Get the screen for kind, creating it if needed.

        Returns:
            Tuple of (view-model, whether it was just created)
        """
        view_model = session.screens.get(kind)
        if view_model is not None:
            return view_model, False
        view_model = VIEW_MODELS[kind](
            self._data_sources[kind],
            lambda: session.actor_profile,
            self._notifications,
        )
        session.screens[kind] = view_model
        return view_model, True

    def unmount(self, session: ConsoleSession, kind: EntityKind) -> bool:
        """Dispose the screen for kind. Returns False if it was not mounted."""
        view_model = session.screens.pop(kind, None)
        if view_model is None:
            return False
        view_model.dispose()
        return True
