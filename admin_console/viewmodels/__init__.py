# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Management screen view-models."""
from admin_console.models.enums import EntityKind
from admin_console.viewmodels.base import EntityManagementViewModel, ProfileProvider
from admin_console.viewmodels.companies import CompanyManagementViewModel
from admin_console.viewmodels.groups import GroupManagementViewModel
from admin_console.viewmodels.state import (
    NO_MODAL,
    AddModal,
    EditModal,
    FilteredEntities,
    NoModal,
    ScreenSnapshot,
    ToggleModal,
    ViewDetailModal,
    ViewState,
)
from admin_console.viewmodels.users import UserManagementViewModel

VIEW_MODELS: dict[EntityKind, type[EntityManagementViewModel]] = {
    EntityKind.COMPANY: CompanyManagementViewModel,
    EntityKind.GROUP: GroupManagementViewModel,
    EntityKind.USER: UserManagementViewModel,
}

__all__ = [
    "NO_MODAL",
    "VIEW_MODELS",
    "AddModal",
    "CompanyManagementViewModel",
    "EditModal",
    "EntityManagementViewModel",
    "FilteredEntities",
    "GroupManagementViewModel",
    "NoModal",
    "ProfileProvider",
    "ScreenSnapshot",
    "ToggleModal",
    "UserManagementViewModel",
    "ViewDetailModal",
    "ViewState",
]
