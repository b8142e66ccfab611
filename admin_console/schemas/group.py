# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Group schemas."""
from pydantic import Field, field_validator

from admin_console.schemas.common import ConsoleModel, Entity
from admin_console.schemas.user import UserSummary


class Group(Entity):
    """Group with its member projection."""

    group_id: int
    description: str = ""
    users: list[UserSummary] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: str | None) -> str:
        return v or ""

    @field_validator("users", mode="before")
    @classmethod
    def default_users(cls, v: list | None) -> list:
        return v or []

    @property
    def key(self) -> int:
        return self.group_id

    def search_values(self) -> tuple[str, ...]:
        return (self.name, self.description)


class GroupCreate(ConsoleModel):
    """Schema for creating a group."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field("", max_length=500)
    user_ids: list[int] = Field(default_factory=list)


class GroupUpdate(ConsoleModel):
    """Schema for updating a group."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    user_ids: list[int] | None = None
