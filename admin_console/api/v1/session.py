# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Console session endpoints."""

from fastapi import APIRouter, Cookie, Depends, Response, status

from admin_console.api.deps import SESSION_COOKIE, get_session_store
from admin_console.schemas.common import MessageResponse
from admin_console.schemas.screen import SessionResponse
from admin_console.services.session_service import SessionStore

router = APIRouter()


@router.post(
    "",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Open a console session",
)
async def open_session(
    response: Response,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    console_session = store.create()
    response.set_cookie(
        key=SESSION_COOKIE,
        value=console_session.session_id,
        httponly=True,
        samesite="lax",
    )
    return SessionResponse(session_id=console_session.session_id)


@router.delete("", response_model=MessageResponse, summary="Close the console session")
async def close_session(
    response: Response,
    store: SessionStore = Depends(get_session_store),
    session: str | None = Cookie(default=None),
) -> MessageResponse:
    """Close the session and unmount its screens."""
    if session:
        store.close(session)
    response.delete_cookie(SESSION_COOKIE)
    return MessageResponse(message="Session closed")
