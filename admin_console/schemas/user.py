# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""
import datetime
from typing import Optional

from pydantic import EmailStr, Field

from admin_console.models.enums import Profile
from admin_console.schemas.common import ConsoleModel, Entity


class UserSummary(ConsoleModel):
    """Read-only projection of a user, as listed inside a group."""

    user_id: int
    name: str
    email: str = ""
    profile: int


class User(Entity):
    """User account as returned by the upstream API.

    profile is kept as a plain integer: the authorization policy decides
    what to do with values outside the known ranks.
    """

    user_id: int
    email: str
    profile: int
    last_login_at: Optional[datetime.datetime] = None
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None

    @property
    def key(self) -> int:
        return self.user_id

    def search_values(self) -> tuple[str, ...]:
        return (self.name, self.email, str(self.profile))


class UserCreate(ConsoleModel):
    """Schema for creating a user."""

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    profile: Profile
    password: Optional[str] = Field(None, min_length=8)


class UserUpdate(ConsoleModel):
    """Schema for updating a user."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    profile: Optional[Profile] = None
    password: Optional[str] = Field(None, min_length=8)
