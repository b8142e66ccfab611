# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Management screen endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from admin_console.api.deps import (
    ensure_accessible,
    get_console_session,
    get_screen,
    get_session_store,
)
from admin_console.config import Settings, get_settings
from admin_console.models.enums import EntityKind
from admin_console.schemas.common import MessageResponse
from admin_console.schemas.screen import ScreenResponse
from admin_console.services.session_service import ConsoleSession, SessionStore
from admin_console.viewmodels import EntityManagementViewModel

router = APIRouter()


def _target(view_model: EntityManagementViewModel, entity_id: str):
    entity = view_model.find(entity_id)
    if entity is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{view_model.kind.value.capitalize()} not found",
        )
    return entity


def _respond(view_model: EntityManagementViewModel) -> ScreenResponse:
    return ScreenResponse.from_snapshot(view_model.snapshot())


@router.get("/{kind}", response_model=ScreenResponse, summary="Show a screen")
async def show_screen(
    kind: EntityKind,
    search: str | None = None,
    console_session: ConsoleSession = Depends(get_console_session),
    store: SessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> ScreenResponse:
    """Mount the screen if needed and return its state.

    The collection is loaded when the screen is mounted.
    """
    ensure_accessible(console_session, kind, settings)
    view_model, mounted = store.mount(console_session, kind)
    if search is not None:
        view_model.set_search_term(search)
    if mounted:
        await view_model.load()
    return _respond(view_model)


@router.delete("/{kind}", response_model=MessageResponse, summary="Unmount a screen")
async def unmount_screen(
    kind: EntityKind,
    console_session: ConsoleSession = Depends(get_console_session),
    store: SessionStore = Depends(get_session_store),
) -> MessageResponse:
    if not store.unmount(console_session, kind):
        return MessageResponse(message="Screen was not mounted")
    return MessageResponse(message="Screen unmounted")


@router.post("/{kind}/load", response_model=ScreenResponse, summary="Reload a screen")
async def reload_screen(
    view_model: EntityManagementViewModel = Depends(get_screen),
) -> ScreenResponse:
    await view_model.load()
    return _respond(view_model)


@router.post("/{kind}/modal/add", response_model=ScreenResponse)
async def open_add(
    view_model: EntityManagementViewModel = Depends(get_screen),
) -> ScreenResponse:
    view_model.open_add()
    return _respond(view_model)


@router.post("/{kind}/modal/edit/{entity_id}", response_model=ScreenResponse)
async def open_edit(
    entity_id: str,
    view_model: EntityManagementViewModel = Depends(get_screen),
) -> ScreenResponse:
    view_model.open_edit(_target(view_model, entity_id))
    return _respond(view_model)


@router.post("/{kind}/modal/toggle/{entity_id}", response_model=ScreenResponse)
async def open_toggle(
    entity_id: str,
    view_model: EntityManagementViewModel = Depends(get_screen),
) -> ScreenResponse:
    view_model.open_toggle(_target(view_model, entity_id))
    return _respond(view_model)


@router.post("/{kind}/modal/detail/{entity_id}", response_model=ScreenResponse)
async def open_detail(
    entity_id: str,
    view_model: EntityManagementViewModel = Depends(get_screen),
) -> ScreenResponse:
    await view_model.open_view_detail(_target(view_model, entity_id))
    return _respond(view_model)


@router.delete("/{kind}/modal", response_model=ScreenResponse)
async def close_modal(
    view_model: EntityManagementViewModel = Depends(get_screen),
) -> ScreenResponse:
    view_model.close_modal()
    return _respond(view_model)


@router.post("/{kind}/submit-add", response_model=ScreenResponse)
async def submit_add(
    fields: dict[str, Any] = Body(...),
    view_model: EntityManagementViewModel = Depends(get_screen),
) -> ScreenResponse:
    """Submit the add form. Rejected input shows up in field_errors."""
    await view_model.submit_add(fields)
    return _respond(view_model)


@router.post("/{kind}/submit-edit/{entity_id}", response_model=ScreenResponse)
async def submit_edit(
    entity_id: str,
    fields: dict[str, Any] = Body(...),
    view_model: EntityManagementViewModel = Depends(get_screen),
) -> ScreenResponse:
    await view_model.submit_edit(_target(view_model, entity_id), fields)
    return _respond(view_model)


@router.post("/{kind}/confirm-toggle/{entity_id}", response_model=ScreenResponse)
async def confirm_toggle(
    entity_id: str,
    view_model: EntityManagementViewModel = Depends(get_screen),
) -> ScreenResponse:
    await view_model.confirm_toggle(_target(view_model, entity_id))
    return _respond(view_model)
