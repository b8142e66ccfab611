# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from fastapi import Cookie, Depends, HTTPException, Request, status

from admin_console.config import Settings, get_settings
from admin_console.models.enums import EntityKind
from admin_console.notifications.center import NotificationCenter
from admin_console.rbac import policy
from admin_console.services.session_service import ConsoleSession, SessionStore
from admin_console.viewmodels import EntityManagementViewModel

SESSION_COOKIE = "session"


def get_notification_center() -> NotificationCenter:
    """Get the process-wide notification center."""
    return NotificationCenter.get_instance()


def get_session_store(request: Request) -> SessionStore:
    """Get the session store created at application start."""
    return request.app.state.sessions


def get_actor_profile(
    request: Request, settings: Settings = Depends(get_settings)
) -> int | None:
    """Read the actor's profile rank set by the identity provider.

    Missing or malformed values yield None, which the policy treats as no
    privilege.
    """
    raw = request.headers.get(settings.actor_profile_header)
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def get_console_session(
    store: SessionStore = Depends(get_session_store),
    actor_profile: int | None = Depends(get_actor_profile),
    session: str | None = Cookie(default=None),
) -> ConsoleSession:
    """Get the caller's console session and refresh the actor profile."""
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    console_session = store.get(session)
    if console_session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )

    console_session.actor_profile = actor_profile
    return console_session


def ensure_accessible(
    console_session: ConsoleSession, kind: EntityKind, settings: Settings
) -> None:
    """Redirect to the fallback route when the actor may not see the screen."""
    if not policy.can_view_entities_of_kind(console_session.actor_profile, kind):
        raise HTTPException(
            status_code=status.HTTP_303_SEE_OTHER,
            detail="Screen not available",
            headers={"Location": settings.fallback_route},
        )


def get_screen(
    kind: EntityKind,
    console_session: ConsoleSession = Depends(get_console_session),
    settings: Settings = Depends(get_settings),
) -> EntityManagementViewModel:
    """Get the mounted screen for the requested kind.

    Actors that may not see the screen are redirected to the fallback route.
    """
    ensure_accessible(console_session, kind, settings)
    view_model = console_session.screens.get(kind)
    if view_model is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Screen is not mounted",
        )
    return view_model
