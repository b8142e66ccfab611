# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Generic controller shared by every management screen."""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Generic

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from admin_console.datasources.base import (
    DataSourceError,
    E,
    EntityDataSource,
    NotFoundError,
    ValidationFailedError,
)
from admin_console.models.enums import Action, EntityKind, NotificationKind
from admin_console.notifications.center import NotificationCenter
from admin_console.rbac import policy
from admin_console.schemas.common import field_errors_from
from admin_console.viewmodels.state import (
    NO_MODAL,
    ActiveModal,
    AddModal,
    EditModal,
    FilteredEntities,
    ScreenSnapshot,
    TargetedModal,
    ToggleModal,
    ViewDetailModal,
    ViewState,
)

logger = logging.getLogger(__name__)

# Returns the current actor's profile rank; called on every permission check.
ProfileProvider = Callable[[], object]


class EntityManagementViewModel(Generic[E]):
    """Mediates between an entity collection, search, modals and permissions.

    Subclasses bind the entity kind and its form schemas. All state changes
    happen on the caller's event loop; the only suspension points are the
    data source calls. Data source failures never escape: they end up in
    ``state.last_error``, in ``state.field_errors`` (rejected input) or in
    the notification center.
    """

    kind: ClassVar[EntityKind]
    create_schema: ClassVar[type[BaseModel]]
    update_schema: ClassVar[type[BaseModel]]

    def __init__(
        self,
        data_source: EntityDataSource[E],
        actor_profile: ProfileProvider,
        notifications: NotificationCenter | None = None,
    ) -> None:
        """Initialize the view-model.

        Args:
            data_source: CRUD source for this screen's entity kind
            actor_profile: Callable returning the current actor's profile rank
            notifications: Notification center (process-wide one by default)
        """
        self._data_source = data_source
        self._actor_profile = actor_profile
        self._notifications = notifications or NotificationCenter.get_instance()
        self._entities: list[E] = []
        self._state = ViewState()
        self._load_generation = 0
        self._disposed = False

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def entities(self) -> tuple[E, ...]:
        return tuple(self._entities)

    @property
    def filtered_entities(self) -> list[E]:
        return list(self.filter())

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def actor_profile(self) -> object:
        return self._actor_profile()

    def find(self, entity_id: str | int) -> E | None:
        """Get a loaded entity by identifier."""
        for entity in self._entities:
            if str(entity.key) == str(entity_id):
                return entity
        return None

    def filter(self, search_term: str | None = None) -> FilteredEntities[E]:
        """Entities matching ``search_term`` (the current search by default)."""
        if search_term is None:
            search_term = self._state.search_term
        return FilteredEntities(self._entities, search_term)

    def set_search_term(self, search_term: str | None) -> None:
        self._set_state(search_term=search_term or "")

    def snapshot(self) -> ScreenSnapshot[E]:
        """Build the presentation view of the screen."""
        return ScreenSnapshot(
            kind=self.kind,
            entities=tuple(self.filter()),
            total=len(self._entities),
            search_term=self._state.search_term,
            is_loading=self._state.is_loading,
            last_error=self._state.last_error,
            field_errors=dict(self._state.field_errors),
            active_modal=self._state.active_modal,
            actions=self.permitted_actions(),
        )

    def dispose(self) -> None:
        """Tear the screen down. Results of in-flight calls are discarded."""
        self._disposed = True
        logger.debug(f"{self.kind.value} screen disposed")

    # ------------------------------------------------------------------ #
    # Permission gates
    # ------------------------------------------------------------------ #

    def is_accessible(self) -> bool:
        """Check if the actor may see this screen at all."""
        return policy.can_view_entities_of_kind(self.actor_profile, self.kind)

    def permitted_actions(self) -> frozenset[Action]:
        return policy.permitted_actions(self.actor_profile, self.kind)

    def can_add(self) -> bool:
        return policy.is_action_permitted(self.actor_profile, self.kind, Action.ADD)

    def can_edit(self, target: E) -> bool:
        return policy.is_action_permitted(
            self.actor_profile, self.kind, Action.EDIT, self.target_profile(target)
        )

    def can_toggle(self, target: E) -> bool:
        return policy.is_action_permitted(
            self.actor_profile, self.kind, Action.TOGGLE, self.target_profile(target)
        )

    def can_view_detail(self, target: E) -> bool:
        return policy.is_action_permitted(self.actor_profile, self.kind, Action.VIEW)

    def target_profile(self, target: E) -> object:
        """Profile rank of ``target`` for rank-gated actions."""
        return None

    def check_form(self, data: BaseModel) -> dict[str, str]:
        """Permission checks on submitted form values, keyed by field."""
        return {}

    # ------------------------------------------------------------------ #
    # Loading
    # ------------------------------------------------------------------ #

    async def load(self) -> None:
        """Fetch the full collection.

        A failed load keeps the previous collection and can be retried.
        Only the most recent of overlapping loads is applied.
        """
        if self._disposed or not self.is_accessible():
            return

        self._load_generation += 1
        generation = self._load_generation
        self._set_state(is_loading=True)
        try:
            entities = await self._data_source.list()
        except DataSourceError as e:
            if self._disposed or generation != self._load_generation:
                return
            logger.error(f"Failed to load {self.kind.value} list: {e}")
            message = f"Could not load the {self.kind.value} list: {e}"
            self._set_state(is_loading=False, last_error=message)
            self._notifications.enqueue_error(message)
            return

        if self._disposed or generation != self._load_generation:
            return
        self._entities = list(entities)
        self._set_state(is_loading=False, last_error=None)
        self._sync_modal_target()
        logger.debug(f"Loaded {len(self._entities)} {self.kind.value} records")

    # ------------------------------------------------------------------ #
    # Modal transitions
    # ------------------------------------------------------------------ #

    def open_add(self) -> bool:
        """Open the add form. Returns False when denied."""
        if self._disposed or not self.can_add():
            return False
        self._open(AddModal())
        return True

    def open_edit(self, target: E) -> bool:
        """Open the edit form for ``target``. Returns False when denied."""
        current = self._loaded(target)
        if current is None or not self.can_edit(current):
            return False
        self._open(EditModal(target=current))
        return True

    def open_toggle(self, target: E) -> bool:
        """Ask for confirmation before toggling ``target``."""
        current = self._loaded(target)
        if current is None or not self.can_toggle(current):
            return False
        self._open(ToggleModal(target=current))
        return True

    async def open_view_detail(self, target: E) -> bool:
        """Show ``target`` in detail, refreshing it from the data source.

        The modal is open with ``loading`` set until the fresh record
        arrives. If the refresh fails the already loaded record is shown.
        """
        current = self._loaded(target)
        if current is None or not self.can_view_detail(current):
            return False
        modal = ViewDetailModal(target=current, loading=True)
        self._open(modal)

        try:
            detail = await self._data_source.get(current.key)
        except DataSourceError as e:
            if self._disposed:
                return True
            if isinstance(e, NotFoundError):
                await self._handle_not_found(modal, e)
                return True
            logger.error(f"Failed to load {self.kind.value} {current.key}: {e}")
            self._notifications.enqueue_error(
                f"Could not load the {self.kind.value} details: {e}"
            )
            if self._state.active_modal is modal:
                self._set_state(active_modal=dataclasses.replace(modal, loading=False))
            return True

        if self._disposed:
            return True
        self._store(detail)
        if self._state.active_modal is modal:
            self._set_state(active_modal=ViewDetailModal(target=detail, loading=False))
        return True

    def close_modal(self) -> None:
        self._set_state(active_modal=NO_MODAL, field_errors={})

    # ------------------------------------------------------------------ #
    # Submissions
    # ------------------------------------------------------------------ #

    async def submit_add(self, fields: Mapping[str, Any] | BaseModel) -> E | None:
        """Create an entity from the add form.

        Returns the created entity, or None when nothing was created (denied,
        busy, rejected or failed).
        """
        modal = self._state.active_modal
        if self._disposed or not isinstance(modal, AddModal) or modal.busy:
            return None
        if not self.can_add():
            return None
        data = self._validate(self.create_schema, fields)
        if data is None:
            return None
        if not self._accept(data):
            return None

        busy = AddModal(busy=True)
        self._set_state(active_modal=busy, field_errors={})
        try:
            created = await self._data_source.create(data)
        except DataSourceError as e:
            await self._handle_submit_failure(busy, e, "add")
            return None

        if self._disposed:
            logger.debug(f"Discarding {self.kind.value} created after dispose")
            return None
        self._store(created)
        self._complete(busy)
        self._notifications.enqueue(
            f"{self._title()} {created.name} added", NotificationKind.SUCCESS
        )
        return created

    async def submit_edit(
        self, target: E, fields: Mapping[str, Any] | BaseModel
    ) -> E | None:
        """Update ``target`` from the edit form."""
        modal = self._state.active_modal
        if (
            self._disposed
            or not isinstance(modal, EditModal)
            or modal.busy
            or str(modal.target.key) != str(target.key)
        ):
            return None
        if not self.can_edit(modal.target):
            return None
        data = self._validate(self.update_schema, fields)
        if data is None:
            return None
        if not self._accept(data):
            return None

        busy = dataclasses.replace(modal, busy=True)
        self._set_state(active_modal=busy, field_errors={})
        try:
            updated = await self._data_source.update(modal.target.key, data)
        except DataSourceError as e:
            await self._handle_submit_failure(busy, e, "update")
            return None

        if self._disposed:
            logger.debug(f"Discarding {self.kind.value} update after dispose")
            return None
        self._store(updated)
        self._complete(busy)
        self._notifications.enqueue(
            f"{self._title()} {updated.name} updated", NotificationKind.SUCCESS
        )
        return updated

    async def confirm_toggle(self, target: E) -> E | None:
        """Flip the active flag of ``target`` after confirmation.

        Failures close the confirmation; the actor has to reopen it to retry.
        """
        modal = self._state.active_modal
        if (
            self._disposed
            or not isinstance(modal, ToggleModal)
            or modal.busy
            or str(modal.target.key) != str(target.key)
        ):
            return None
        if not self.can_toggle(modal.target):
            return None

        busy = dataclasses.replace(modal, busy=True)
        self._set_state(active_modal=busy)
        try:
            toggled = await self._data_source.toggle_activation(modal.target.key)
        except DataSourceError as e:
            if self._disposed:
                return None
            if isinstance(e, NotFoundError):
                await self._handle_not_found(busy, e)
                return None
            logger.error(f"Failed to toggle {self.kind.value} {modal.target.key}: {e}")
            message = f"Could not change the {self.kind.value} status: {e}"
            self._complete(busy)
            self._set_state(last_error=message)
            self._notifications.enqueue_error(message)
            return None

        if self._disposed:
            logger.debug(f"Discarding {self.kind.value} toggle after dispose")
            return None
        self._store(toggled)
        self._complete(busy)
        state = "activated" if toggled.is_active else "deactivated"
        self._notifications.enqueue(
            f"{self._title()} {toggled.name} {state}", NotificationKind.SUCCESS
        )
        return toggled

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    def _set_state(self, **changes: Any) -> None:
        self._state = dataclasses.replace(self._state, **changes)

    def _open(self, modal: ActiveModal) -> None:
        # Opening a modal replaces whatever was open before
        self._set_state(active_modal=modal, field_errors={})

    def _complete(self, modal: ActiveModal) -> None:
        """Close ``modal`` unless another one was opened in the meantime."""
        if self._state.active_modal is modal:
            self._set_state(active_modal=NO_MODAL, field_errors={})

    def _loaded(self, target: E) -> E | None:
        if self._disposed:
            return None
        return self.find(target.key)

    def _store(self, entity: E) -> None:
        """Insert ``entity`` or replace the loaded entity with its identifier."""
        for index, existing in enumerate(self._entities):
            if str(existing.key) == str(entity.key):
                self._entities[index] = entity
                return
        self._entities.append(entity)

    def _sync_modal_target(self) -> None:
        """Point the open modal at the freshly loaded copy of its target.

        If the target is gone the modal is closed. A modal waiting on the
        data source is left alone; its pending call settles it.
        """
        modal = self._state.active_modal
        if not isinstance(modal, TargetedModal):
            return
        if getattr(modal, "busy", False) or getattr(modal, "loading", False):
            return
        current = self.find(modal.target.key)
        if current is None:
            self.close_modal()
        else:
            self._set_state(active_modal=dataclasses.replace(modal, target=current))

    def _validate(
        self, schema: type[BaseModel], fields: Mapping[str, Any] | BaseModel
    ) -> BaseModel | None:
        if isinstance(fields, schema):
            return fields
        if isinstance(fields, BaseModel):
            fields = fields.model_dump(exclude_unset=True)
        try:
            return schema.model_validate(dict(fields))
        except PydanticValidationError as e:
            self._set_state(field_errors=field_errors_from(e))
            return None

    def _accept(self, data: BaseModel) -> bool:
        """Apply the screen-specific form checks. Rejections become field errors."""
        field_errors = self.check_form(data)
        if field_errors:
            self._set_state(field_errors=field_errors)
            return False
        return True

    async def _handle_submit_failure(
        self, busy: AddModal | EditModal, error: DataSourceError, verb: str
    ) -> None:
        if self._disposed:
            return
        if isinstance(error, NotFoundError):
            await self._handle_not_found(busy, error)
            return

        idle = dataclasses.replace(busy, busy=False)
        still_open = self._state.active_modal is busy
        if isinstance(error, ValidationFailedError) and error.field_errors:
            # Rejected input is shown next to the fields, not as a notification
            if still_open:
                self._set_state(active_modal=idle, field_errors=error.field_errors)
            return

        logger.error(f"Failed to {verb} {self.kind.value}: {error}")
        message = f"Could not {verb} {self.kind.value}: {error}"
        if still_open:
            self._set_state(active_modal=idle, last_error=message)
        else:
            self._set_state(last_error=message)
        self._notifications.enqueue_error(message)

    async def _handle_not_found(self, modal: ActiveModal, error: NotFoundError) -> None:
        """The target vanished upstream: close, report and reload."""
        logger.warning(f"{self.kind.value} vanished upstream: {error}")
        self._complete(modal)
        message = str(error) or f"This {self.kind.value} no longer exists"
        self._notifications.enqueue_error(message)
        await self.load()
        if not self._disposed:
            self._set_state(last_error=message)

    def _title(self) -> str:
        return self.kind.value.capitalize()
