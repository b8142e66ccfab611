# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Profile permission matrix."""
from admin_console.models.enums import Action, EntityKind, Profile

READ_ONLY = frozenset({Action.VIEW})
FULL_ACCESS = frozenset(Action)
NO_ACCESS: frozenset[Action] = frozenset()

# Kinds missing from a profile's mapping are not accessible at all.
# Companies are reserved to administrators.
PROFILE_PERMISSIONS: dict[Profile, dict[EntityKind, frozenset[Action]]] = {
    Profile.ADMINISTRATOR: {
        EntityKind.COMPANY: FULL_ACCESS,
        EntityKind.GROUP: FULL_ACCESS,
        EntityKind.USER: FULL_ACCESS,
    },
    Profile.MANAGER: {
        EntityKind.GROUP: FULL_ACCESS,
        EntityKind.USER: FULL_ACCESS,
    },
    Profile.EMPLOYEE: {
        EntityKind.GROUP: READ_ONLY,
        EntityKind.USER: READ_ONLY,
    },
}

# Actions whose target must not outrank the actor.
RANK_GATED_ACTIONS: dict[EntityKind, frozenset[Action]] = {
    EntityKind.USER: frozenset({Action.EDIT, Action.TOGGLE}),
}
