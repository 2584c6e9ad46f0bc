"""Range-band eligibility for melee, ranged and called-shot attacks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from config import LEGACY_RANGED_LONG, LEGACY_RANGED_SHORT, MELEE_RANGE
from models.save import WeaponKind
from models.view import ActionCategory, ReasonCode

if TYPE_CHECKING:
    from models.save import Weapon

RANGE_GATED = (ActionCategory.MELEE, ActionCategory.RANGED_LONG, ActionCategory.RANGED_SHORT)


def has_ranged_weapon(weapon: Weapon | None) -> bool:
    return weapon is not None and weapon.kind == WeaponKind.RANGED


def effective_long_range(weapon: Weapon | None) -> int | None:
    """Farthest distance a weapon can shoot, or None if it can't shoot at all.

    Ranged weapons declared without range bands fall back to the legacy
    8-square ceiling.
    """
    if not has_ranged_weapon(weapon):
        return None
    if weapon.range is None:
        return LEGACY_RANGED_LONG
    return weapon.range.long


def effective_short_range(weapon: Weapon | None) -> int | None:
    if not has_ranged_weapon(weapon):
        return None
    if weapon.range is None:
        return LEGACY_RANGED_SHORT
    return weapon.range.short


def ineligibility_reason(
    weapon: Weapon | None,
    dist: int | None,
    category: ActionCategory,
) -> ReasonCode | None:
    """Explain why an attack category can't reach the target.

    Args:
        weapon: The attacker's equipped weapon (None when unarmed).
        dist: Distance to the target in squares, None if positions are unknown.
        category: The attack category being considered.

    Returns:
        The failing range condition, or None if the category is eligible
        (or isn't range-gated at all).
    """
    if category == ActionCategory.MELEE:
        if dist is None or dist > MELEE_RANGE:
            return ReasonCode.REQUIRES_MELEE_RANGE
        return None

    if category in (ActionCategory.RANGED_LONG, ActionCategory.RANGED_SHORT):
        if not has_ranged_weapon(weapon):
            return ReasonCode.REQUIRES_RANGED_WEAPON
        if dist is None:
            return ReasonCode.OUT_OF_RANGE
        if dist <= MELEE_RANGE:
            return ReasonCode.IN_MELEE
        # Called shots share the long-range ceiling; there is no separate
        # short-range cap.
        if dist > effective_long_range(weapon):
            return ReasonCode.OUT_OF_RANGE
        return None

    return None


def is_eligible(weapon: Weapon | None, dist: int | None, category: ActionCategory) -> bool:
    """True if the attack category can reach a target at this distance."""
    return ineligibility_reason(weapon, dist, category) is None


def range_band(weapon: Weapon | None, dist: int | None) -> str | None:
    """Band label ("SHORT" or "LONG") for a ranged shot at this distance.

    Returns None when no ranged shot is possible at this distance.
    """
    if not is_eligible(weapon, dist, ActionCategory.RANGED_LONG):
        return None
    return "SHORT" if dist <= effective_short_range(weapon) else "LONG"
