# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Base classes for entity data sources."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from admin_console.models.enums import EntityKind
from admin_console.schemas.common import Entity

E = TypeVar("E", bound=Entity)


class DataSourceError(Exception):
    """Base exception for data source errors (transport or server failure)."""


class NotFoundError(DataSourceError):
    """The requested entity does not exist (anymore)."""


class ValidationFailedError(DataSourceError):
    """The data source rejected the submitted fields."""

    def __init__(self, message: str, field_errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.field_errors = field_errors or {}


class EntityDataSource(ABC, Generic[E]):
    """CRUD contract for one entity kind.

    Entities are never deleted; toggle_activation flips the active flag.
    """

    kind: EntityKind
    model: type[E]

    @abstractmethod
    async def list(self) -> list[E]:
        """Fetch the full collection."""
        ...

    @abstractmethod
    async def get(self, entity_id: str | int) -> E:
        """Fetch a single entity."""
        ...

    @abstractmethod
    async def create(self, data: BaseModel) -> E:
        """Create an entity from validated form data."""
        ...

    @abstractmethod
    async def update(self, entity_id: str | int, data: BaseModel) -> E:
        """Update an entity from validated form data."""
        ...

    @abstractmethod
    async def toggle_activation(self, entity_id: str | int) -> E:
        """Activate an inactive entity or deactivate an active one."""
        ...

    async def close(self) -> None:
        """Clean up resources."""
        pass
