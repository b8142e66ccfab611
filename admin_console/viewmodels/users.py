# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User accounts screen."""
import logging

from pydantic import BaseModel

from admin_console.models.enums import EntityKind
from admin_console.rbac import policy
from admin_console.schemas.user import User, UserCreate, UserUpdate
from admin_console.viewmodels.base import EntityManagementViewModel

logger = logging.getLogger(__name__)


class UserManagementViewModel(EntityManagementViewModel[User]):
    """Editing and toggling a user also requires the actor not to be
    outranked by that user. The same holds for the profile assigned
    through the add and edit forms."""

    kind = EntityKind.USER
    create_schema = UserCreate
    update_schema = UserUpdate

    def target_profile(self, target: User) -> object:
        return target.profile

    def check_form(self, data: BaseModel) -> dict[str, str]:
        profile = getattr(data, "profile", None)
        if profile is None or policy.can_edit_user(self.actor_profile, profile):
            return {}
        logger.debug(f"Denied assigning profile {profile!r} to a user")
        return {"profile": "You cannot assign a profile above your own"}
