# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization policy package."""
from admin_console.rbac.policy import (
    can_edit_user,
    can_manage_entities_of_kind,
    can_view_entities_of_kind,
    is_action_permitted,
    permitted_actions,
    visible_actions_for_company,
)

__all__ = [
    "can_edit_user",
    "can_manage_entities_of_kind",
    "can_view_entities_of_kind",
    "is_action_permitted",
    "permitted_actions",
    "visible_actions_for_company",
]
