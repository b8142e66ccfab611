# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""View state of a management screen.

The open overlay is a single tagged value, so two modals can never be open
at the same time.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import ClassVar, Generic, Union

from admin_console.datasources.base import E
from admin_console.models.enums import Action, EntityKind, ModalKind


@dataclass(frozen=True)
class NoModal:
    kind: ClassVar[ModalKind] = ModalKind.NONE


@dataclass(frozen=True)
class AddModal:
    kind: ClassVar[ModalKind] = ModalKind.ADD
    busy: bool = False


@dataclass(frozen=True)
class EditModal(Generic[E]):
    kind: ClassVar[ModalKind] = ModalKind.EDIT
    target: E
    busy: bool = False


@dataclass(frozen=True)
class ToggleModal(Generic[E]):
    kind: ClassVar[ModalKind] = ModalKind.TOGGLE
    target: E
    busy: bool = False


@dataclass(frozen=True)
class ViewDetailModal(Generic[E]):
    kind: ClassVar[ModalKind] = ModalKind.VIEW_DETAIL
    target: E
    loading: bool = False


ActiveModal = Union[NoModal, AddModal, EditModal, ToggleModal, ViewDetailModal]
TargetedModal = (EditModal, ToggleModal, ViewDetailModal)

NO_MODAL = NoModal()


@dataclass(frozen=True)
class ViewState:
    """State of one management screen."""

    search_term: str = ""
    active_modal: ActiveModal = NO_MODAL
    is_loading: bool = False
    last_error: str | None = None
    # inline form errors, keyed by field
    field_errors: Mapping[str, str] = field(default_factory=dict)


class FilteredEntities(Generic[E]):
    """Lazy, restartable view of the entities matching a search term.

    Matching is a case-insensitive substring test against each entity's
    search fields; an empty term matches everything. Every iteration
    recomputes the result from the same snapshot of the collection.
    """

    def __init__(self, entities: Sequence[E], search_term: str = "") -> None:
        self._entities = tuple(entities)
        self.search_term = search_term
        self._needle = search_term.casefold()

    def __iter__(self) -> Iterator[E]:
        for entity in self._entities:
            if self.matches(entity):
                yield entity

    def matches(self, entity: E) -> bool:
        if not self._needle:
            return True
        return any(self._needle in value.casefold() for value in entity.search_values())


@dataclass(frozen=True)
class ScreenSnapshot(Generic[E]):
    """Everything the presentation layer needs to render a screen."""

    kind: EntityKind
    entities: tuple[E, ...]
    total: int
    search_term: str
    is_loading: bool
    last_error: str | None
    field_errors: Mapping[str, str]
    active_modal: ActiveModal
    actions: frozenset[Action]
