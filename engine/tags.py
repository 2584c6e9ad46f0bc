"""Parsing of the engine's diagnostic tags ("namespace:key=value") for debug display."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from config import TAG_FORMAT_VERSION
from models.view import CheckDebugView, CombatDebugSummary, TagBreakdown, TagEntry

if TYPE_CHECKING:
    from models.save import CheckResult, GameSave

logger = logging.getLogger(__name__)

# Display order. Matching is longest-first so "att:calc:x" never lands in "calc".
NAMESPACES = ("calc", "att:calc", "def:calc", "combat")
_MATCH_ORDER = sorted(NAMESPACES, key=len, reverse=True)

FLAG_VALUE = "1"

# combat: keys lifted into CombatDebugSummary fields
_COMBAT_SUMMARY_KEYS = {
    "attackStat": "attack_stat",
    "attackTarget": "attack_target",
    "attackRoll": "attack_roll",
    "attackDoS": "attack_dos",
    "defense": "defense",
    "defTarget": "def_target",
    "defRoll": "def_roll",
    "defDoS": "def_dos",
}


def parse_tag(tag: str) -> TagEntry | None:
    """Parse one diagnostic tag.

    "combat:attackRoll=14" -> (combat, attackRoll, "14")
    "combat:defSuccess"    -> (combat, defSuccess, "1")

    Returns:
        The TagEntry, or None for unrecognized namespaces and empty keys.
    """
    for namespace in _MATCH_ORDER:
        prefix = namespace + ":"
        if not tag.startswith(prefix):
            continue
        key, sep, value = tag[len(prefix):].partition("=")
        if not key:
            return None
        return TagEntry(namespace=namespace, key=key, value=value if sep else FLAG_VALUE)
    return None


def parse_tags(tags: Iterable[str]) -> TagBreakdown:
    """Group tags by namespace, preserving their relative order.

    Every recognized namespace is present in the result, possibly empty.
    Tags that don't parse are left out of the groups but kept in the raw list.
    """
    raw = list(tags)
    groups: dict[str, list[TagEntry]] = {namespace: [] for namespace in NAMESPACES}
    for tag in raw:
        entry = parse_tag(tag)
        if entry is None:
            logger.debug("Ignoring unrecognized tag %r", tag)
            continue
        groups[entry.namespace].append(entry)
    return TagBreakdown(version=TAG_FORMAT_VERSION, groups=groups, tags=raw)


def summarize_combat_tags(entries: list[TagEntry]) -> CombatDebugSummary:
    """Lift well-known combat values out of the combat group. First occurrence wins."""
    values: dict[str, str] = {}
    for entry in entries:
        values.setdefault(entry.key, entry.value)

    fields = {
        field: values[key]
        for key, field in _COMBAT_SUMMARY_KEYS.items()
        if key in values
    }
    if "defSuccess" in values:
        fields["def_success"] = values["defSuccess"] == FLAG_VALUE
    return CombatDebugSummary(tie=values.get("tie") == FLAG_VALUE, **fields)


def select_debug_check(save: GameSave) -> tuple[CheckResult, bool] | None:
    """Pick the check to show: the player's last combat check, else the last check.

    Returns:
        (check, is_player_check), or None if the save has no resolved check.
    """
    if save.runtime.last_player_check is not None:
        return save.runtime.last_player_check, True
    if save.runtime.last_check is not None:
        return save.runtime.last_check, False
    return None


def build_check_debug_view(save: GameSave) -> CheckDebugView | None:
    """Debug panel contents for the save's most relevant check, if any."""
    selected = select_debug_check(save)
    if selected is None:
        return None
    check, is_player_check = selected
    breakdown = parse_tags(check.tags)
    return CheckDebugView(
        check_id=check.check_id,
        actor_id=check.actor_id,
        is_player_check=is_player_check,
        roll=check.roll,
        target=check.target,
        success=check.success,
        dos=check.dos,
        dof=check.dof,
        critical=check.critical,
        breakdown=breakdown,
        combat=summarize_combat_tags(breakdown.groups["combat"]),
    )
