"""Grid distance and movement-choice helpers for the combat view."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config import MELEE_RANGE

if TYPE_CHECKING:
    from models.save import CombatSession, GridPosition

logger = logging.getLogger(__name__)

MOVE_CHOICE_PREFIX = "combat_move_"
MOVE_DIRECTIONS = ("n", "ne", "e", "se", "s", "sw", "w", "nw")


def distance(pos1: GridPosition | None, pos2: GridPosition | None) -> int | None:
    """Calculate distance in squares between two grid positions.

    Uses Chebyshev distance, so a diagonal step costs the same as a
    cardinal one.

    Args:
        pos1: First position, or None if unknown.
        pos2: Second position, or None if unknown.

    Returns:
        max(|dx|, |dy|), or None if either position is unknown.
    """
    if pos1 is None or pos2 is None:
        return None
    dx = abs(pos1.x - pos2.x)
    dy = abs(pos1.y - pos2.y)
    return max(dx, dy)


def is_adjacent(pos1: GridPosition | None, pos2: GridPosition | None) -> bool:
    """Check if two positions are within melee range (including diagonals)."""
    dist = distance(pos1, pos2)
    return dist is not None and dist <= MELEE_RANGE


def combatant_distance(
    session: CombatSession | None,
    actor_id: str | None,
    other_id: str | None,
) -> int | None:
    """Distance between two combatants, or None outside combat or without positions.

    Args:
        session: The combat session, if any.
        actor_id: First combatant.
        other_id: Second combatant.

    Returns:
        Distance in squares, or None.
    """
    if session is None or not session.active or actor_id is None or other_id is None:
        return None
    pos1 = session.positions.get(actor_id)
    pos2 = session.positions.get(other_id)
    if pos1 is None or pos2 is None:
        logger.debug("No position for %s or %s", actor_id, other_id)
    return distance(pos1, pos2)


def move_choice_id(direction: str) -> str:
    """Choice ID for a step in the given compass direction ("n", "se", ...)."""
    if direction not in MOVE_DIRECTIONS:
        raise ValueError(f"Unknown move direction: {direction}")
    return f"{MOVE_CHOICE_PREFIX}{direction}"


def parse_move_choice_id(choice_id: str) -> str | None:
    """Return the direction of a movement choice ID, or None if it isn't one."""
    if not choice_id.startswith(MOVE_CHOICE_PREFIX):
        return None
    direction = choice_id[len(MOVE_CHOICE_PREFIX):]
    return direction if direction in MOVE_DIRECTIONS else None
