# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Groups screen."""
from admin_console.models.enums import EntityKind
from admin_console.schemas.group import Group, GroupCreate, GroupUpdate
from admin_console.schemas.user import UserSummary
from admin_console.viewmodels.base import EntityManagementViewModel
from admin_console.viewmodels.state import ViewDetailModal


class GroupManagementViewModel(EntityManagementViewModel[Group]):
    """Groups, with a detail view listing the group's members."""

    kind = EntityKind.GROUP
    create_schema = GroupCreate
    update_schema = GroupUpdate

    def detail_members(self) -> tuple[UserSummary, ...]:
        """Members of the group shown in the detail view, if one is open."""
        modal = self.state.active_modal
        if not isinstance(modal, ViewDetailModal):
            return ()
        return tuple(modal.target.users)
