# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""In-memory entity data sources.

Used when no upstream API is configured, and by the test-suite.
"""
from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from admin_console.datasources.base import (
    E,
    EntityDataSource,
    NotFoundError,
    ValidationFailedError,
)
from admin_console.models.enums import EntityKind
from admin_console.schemas.group import Group
from admin_console.schemas.user import User, UserSummary

logger = logging.getLogger(__name__)


class InMemoryEntityDataSource(EntityDataSource[E]):
    """Keeps entities in a dict keyed by identifier, in insertion order."""

    def __init__(
        self,
        kind: EntityKind,
        model: type[E],
        id_field: str,
        entities: Iterable[E] = (),
        id_factory: Callable[[], str | int] | None = None,
    ) -> None:
        self.kind = kind
        self.model = model
        self.id_field = id_field
        self._entities: dict[str, E] = {}
        for entity in entities:
            self._entities[str(entity.key)] = entity.model_copy(deep=True)
        if id_factory is None:
            start = max(
                (int(k) for k in self._entities if k.isdigit()), default=0
            ) + 1
            counter = itertools.count(start)
            id_factory = lambda: next(counter)  # noqa: E731
        self._id_factory = id_factory

    async def list(self) -> list[E]:
        return [entity.model_copy(deep=True) for entity in self._entities.values()]

    async def get(self, entity_id: str | int) -> E:
        return self.lookup(entity_id).model_copy(deep=True)

    async def create(self, data: BaseModel) -> E:
        payload = self._payload(data.model_dump(mode="json", exclude_none=True))
        payload[self.id_field] = self._id_factory()
        payload.setdefault("is_active", True)
        entity = self._build(payload)
        self._entities[str(entity.key)] = entity
        logger.info(f"Created {self.kind.value} {entity.key}")
        return entity.model_copy(deep=True)

    async def update(self, entity_id: str | int, data: BaseModel) -> E:
        current = self.lookup(entity_id)
        payload = current.model_dump()
        changes = data.model_dump(mode="json", exclude_unset=True)
        payload.update(self._payload(changes))
        entity = self._build(payload)
        self._entities[str(entity.key)] = entity
        return entity.model_copy(deep=True)

    async def toggle_activation(self, entity_id: str | int) -> E:
        current = self.lookup(entity_id)
        entity = current.model_copy(update={"is_active": not current.is_active})
        self._entities[str(entity.key)] = entity
        logger.info(
            f"{'Activated' if entity.is_active else 'Deactivated'} "
            f"{self.kind.value} {entity.key}"
        )
        return entity.model_copy(deep=True)

    def lookup(self, entity_id: str | int) -> E:
        """Get the stored entity or raise NotFoundError."""
        entity = self._entities.get(str(entity_id))
        if entity is None:
            raise NotFoundError(f"This {self.kind.value} no longer exists")
        return entity

    def _payload(self, data: dict[str, Any]) -> dict[str, Any]:
        """Hook to turn form fields into entity fields."""
        return data

    def _build(self, payload: dict[str, Any]) -> E:
        try:
            return self.model.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationFailedError(
                f"Invalid {self.kind.value} data",
                {
                    ".".join(str(p) for p in err["loc"]) or "__root__": err["msg"]
                    for err in e.errors()
                },
            ) from e


class InMemoryGroupDataSource(InMemoryEntityDataSource[Group]):
    """Group source that resolves member ids against a user source."""

    def __init__(
        self,
        users: InMemoryEntityDataSource[User] | None = None,
        entities: Iterable[Group] = (),
    ) -> None:
        super().__init__(EntityKind.GROUP, Group, "group_id", entities)
        self._users = users

    def _payload(self, data: dict[str, Any]) -> dict[str, Any]:
        user_ids = data.pop("user_ids", None)
        if user_ids is not None:
            data["users"] = [self._summary(user_id) for user_id in user_ids]
        return data

    def _summary(self, user_id: int) -> dict[str, Any]:
        if self._users is None:
            raise ValidationFailedError(
                "Group members cannot be resolved", {"user_ids": "Unknown users"}
            )
        try:
            user = self._users.lookup(user_id)
        except NotFoundError as e:
            raise ValidationFailedError(
                "Group members cannot be resolved",
                {"user_ids": f"User {user_id} does not exist"},
            ) from e
        return UserSummary(
            user_id=user.user_id, name=user.name, email=user.email, profile=user.profile
        ).model_dump()
