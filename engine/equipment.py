"""Equipped weapon and armor lookups with display defaults."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from models.save import WeaponKind
from models.view import ArmorInfo, WeaponInfo

if TYPE_CHECKING:
    from models.save import Actor, Armor, GameSave, Weapon

logger = logging.getLogger(__name__)

UNARMED = WeaponInfo(weapon_id="unarmed", name="Unarmed", kind=WeaponKind.MELEE)
NO_ARMOR = ArmorInfo(armor_id="none", name="None", soak=0)


def get_actor_weapon(save: GameSave, actor: Actor | None) -> Weapon | None:
    """Resolve an actor's equipped weapon against the save's catalog.

    Returns:
        The Weapon, or None if the actor is unknown, unarmed, or references
        a weapon the catalog doesn't have.
    """
    if actor is None or actor.equipment.weapon_id is None:
        return None
    weapon = save.weapons_by_id.get(actor.equipment.weapon_id)
    if weapon is None:
        logger.debug(
            "Actor %s references unknown weapon %s", actor.id, actor.equipment.weapon_id
        )
    return weapon


def get_actor_armor(save: GameSave, actor: Actor | None) -> Armor | None:
    """Resolve an actor's equipped armor. None if there is nothing to resolve."""
    if actor is None or actor.equipment.armor_id is None:
        return None
    armor = save.armors_by_id.get(actor.equipment.armor_id)
    if armor is None:
        logger.debug(
            "Actor %s references unknown armor %s", actor.id, actor.equipment.armor_id
        )
    return armor


def weapon_display(weapon: Weapon | None) -> WeaponInfo:
    """Display record for a weapon lookup result ("Unarmed" when absent)."""
    if weapon is None:
        return UNARMED.model_copy()
    return WeaponInfo(
        weapon_id=weapon.id,
        name=weapon.name,
        kind=weapon.kind,
        range=weapon.range,
    )


def armor_display(armor: Armor | None) -> ArmorInfo:
    """Display record for an armor lookup result ("None", soak 0 when absent)."""
    if armor is None:
        return NO_ARMOR.model_copy()
    return ArmorInfo(armor_id=armor.id, name=armor.name, soak=armor.soak)
