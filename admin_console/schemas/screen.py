# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Schemas describing the state of a management screen."""
from typing import Any

from pydantic import BaseModel

from admin_console.models.enums import Action, EntityKind, ModalKind
from admin_console.viewmodels.state import ScreenSnapshot


class ModalResponse(BaseModel):
    """The open modal, if any."""

    kind: ModalKind
    target: dict[str, Any] | None = None
    busy: bool = False
    loading: bool = False


class ScreenResponse(BaseModel):
    """Schema for a management screen."""

    kind: EntityKind
    entities: list[dict[str, Any]]
    total: int
    search_term: str
    is_loading: bool
    last_error: str | None = None
    field_errors: dict[str, str] = {}
    active_modal: ModalResponse
    actions: list[Action]

    @classmethod
    def from_snapshot(cls, snapshot: ScreenSnapshot) -> "ScreenResponse":
        modal = snapshot.active_modal
        target = getattr(modal, "target", None)
        return cls(
            kind=snapshot.kind,
            entities=[entity.model_dump(mode="json") for entity in snapshot.entities],
            total=snapshot.total,
            search_term=snapshot.search_term,
            is_loading=snapshot.is_loading,
            last_error=snapshot.last_error,
            field_errors=dict(snapshot.field_errors),
            active_modal=ModalResponse(
                kind=modal.kind,
                target=target.model_dump(mode="json") if target is not None else None,
                busy=getattr(modal, "busy", False),
                loading=getattr(modal, "loading", False),
            ),
            actions=sorted(snapshot.actions, key=lambda action: list(Action).index(action)),
        )


class SessionResponse(BaseModel):
    """Schema returned when a console session is opened."""

    session_id: str
