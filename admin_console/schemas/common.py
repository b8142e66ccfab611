# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""
from abc import abstractmethod

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


class ConsoleModel(BaseModel):
    """Base for payloads exchanged with the upstream API (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Entity(ConsoleModel):
    """A managed record. Entities are deactivated, never deleted.

    Concrete entity schemas must implement key and search_values.
    """

    name: str
    is_active: bool = True

    @property
    @abstractmethod
    def key(self) -> str | int:
        """Stable identifier of the entity."""
        ...

    @abstractmethod
    def search_values(self) -> tuple[str, ...]:
        """Text fields matched by the screen search box."""
        ...


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


def field_errors_from(error: ValidationError) -> dict[str, str]:
    """Flatten a pydantic validation error into ``{field: message}``."""
    return {
        ".".join(str(part) for part in err["loc"]) or "__root__": err["msg"]
        for err in error.errors()
    }
