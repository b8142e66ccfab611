# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization policy for the management screens.

All functions are pure. Profile values come from outside (session provider,
upstream API), so anything that is not a known rank is treated as having no
privilege at all instead of raising.
"""
import logging

from admin_console.models.enums import Action, EntityKind, Profile
from admin_console.rbac.permissions import (
    NO_ACCESS,
    PROFILE_PERMISSIONS,
    RANK_GATED_ACTIONS,
)

logger = logging.getLogger(__name__)

MANAGE_ACTIONS = frozenset({Action.ADD, Action.EDIT, Action.TOGGLE})


def coerce_profile(value: object) -> Profile | None:
    """Return the known profile for value or None."""
    if isinstance(value, bool):
        return None
    try:
        return Profile(value)
    except (TypeError, ValueError):
        return None


def permitted_actions(actor_profile: object, kind: EntityKind) -> frozenset[Action]:
    """Get the set of actions the actor may use on entities of kind."""
    profile = coerce_profile(actor_profile)
    if profile is None:
        return NO_ACCESS
    return PROFILE_PERMISSIONS[profile].get(kind, NO_ACCESS)


def can_view_entities_of_kind(actor_profile: object, kind: EntityKind) -> bool:
    """Check if the actor may open the screen for kind."""
    return Action.VIEW in permitted_actions(actor_profile, kind)


def can_manage_entities_of_kind(actor_profile: object, kind: EntityKind) -> bool:
    """Check if the actor may add, edit and toggle entities of kind."""
    return MANAGE_ACTIONS <= permitted_actions(actor_profile, kind)


def can_edit_user(actor_profile: object, target_profile: object) -> bool:
    """Check rank ordering: an actor may only edit equal or lower ranks.

    Rank 1 is the highest privilege, so this is a plain numeric comparison.
    """
    actor = coerce_profile(actor_profile)
    target = coerce_profile(target_profile)
    if actor is None or target is None:
        return False
    return actor <= target


def visible_actions_for_company(actor_profile: object) -> frozenset[Action]:
    """Get the actions shown on the companies screen.

    An empty set means the screen is not available and the actor is sent
    elsewhere.
    """
    return permitted_actions(actor_profile, EntityKind.COMPANY)


def is_action_permitted(
    actor_profile: object,
    kind: EntityKind,
    action: Action,
    target_profile: object = None,
) -> bool:
    """Combined gate used by the management screens.

    For kinds with rank-gated actions the target's profile must not outrank
    the actor's.
    """
    if action not in permitted_actions(actor_profile, kind):
        logger.debug(f"Denied {action.value} on {kind.value} for profile {actor_profile!r}")
        return False
    if action in RANK_GATED_ACTIONS.get(kind, NO_ACCESS):
        if not can_edit_user(actor_profile, target_profile):
            logger.debug(
                f"Denied {action.value} on {kind.value}: profile {actor_profile!r} "
                f"may not act on profile {target_profile!r}"
            )
            return False
    return True
