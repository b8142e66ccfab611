# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Entity data sources."""
import uuid

from admin_console.config import Settings
from admin_console.datasources.base import (
    DataSourceError,
    EntityDataSource,
    NotFoundError,
    ValidationFailedError,
)
from admin_console.datasources.http import HttpEntityDataSource
from admin_console.datasources.memory import (
    InMemoryEntityDataSource,
    InMemoryGroupDataSource,
)
from admin_console.models.enums import EntityKind
from admin_console.schemas.company import Company
from admin_console.schemas.group import Group
from admin_console.schemas.user import User

RESOURCES = {
    EntityKind.COMPANY: ("companies", Company),
    EntityKind.GROUP: ("groups", Group),
    EntityKind.USER: ("users", User),
}


def build_data_sources(settings: Settings) -> dict[EntityKind, EntityDataSource]:
    """Create one data source per entity kind.

    Uses the upstream API when CONSOLE_API_BASE_URL is set, in-memory
    sources otherwise.
    """
    if settings.api_base_url:
        return {
            kind: HttpEntityDataSource(
                kind,
                model,
                base_url=settings.api_base_url,
                resource=resource,
                token=settings.api_token,
                timeout=settings.request_timeout,
            )
            for kind, (resource, model) in RESOURCES.items()
        }

    users = InMemoryEntityDataSource(EntityKind.USER, User, "user_id")
    return {
        EntityKind.COMPANY: InMemoryEntityDataSource(
            EntityKind.COMPANY, Company, "company_id", id_factory=lambda: uuid.uuid4().hex
        ),
        EntityKind.GROUP: InMemoryGroupDataSource(users=users),
        EntityKind.USER: users,
    }


__all__ = [
    "DataSourceError",
    "EntityDataSource",
    "HttpEntityDataSource",
    "InMemoryEntityDataSource",
    "InMemoryGroupDataSource",
    "NotFoundError",
    "ValidationFailedError",
    "build_data_sources",
]
