"""Turn ownership and turn-economy projection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from config import STAT_BONUS_DIVISOR
from models.view import TurnEconomyView

if TYPE_CHECKING:
    from models.save import Actor, CombatSession, GameSave


def current_turn_actor_id(session: CombatSession | None) -> str | None:
    """Get the ID of the combatant whose turn it is.

    Prefers the turn's explicit active actor when it is a participant;
    otherwise follows the session's turn pointer into the participant list.

    Returns:
        The actor ID, or None if combat is inactive or the pointer is invalid.
    """
    if session is None or not session.active:
        return None
    if session.turn.active_actor_id in session.participants:
        return session.turn.active_actor_id
    if 0 <= session.current_index < len(session.participants):
        return session.participants[session.current_index]
    return None


def is_player_turn(save: GameSave) -> bool:
    """True if combat is active and the party's active actor holds the turn."""
    current = current_turn_actor_id(save.runtime.combat)
    return current is not None and current == save.party.active_actor_id


def opponent_id(save: GameSave) -> str | None:
    """The first participant that isn't the player's active actor."""
    session = save.runtime.combat
    if session is None:
        return None
    for actor_id in session.participants:
        if actor_id != save.party.active_actor_id:
            return actor_id
    return None


def project_turn_economy(session: CombatSession | None) -> TurnEconomyView:
    """Read-only view of the current turn's remaining movement and action.

    Outside combat everything is spent: no movement, no action.
    """
    if session is None or not session.active:
        return TurnEconomyView()
    turn = session.turn
    return TurnEconomyView(
        move_remaining=turn.move_remaining,
        action_available=turn.action_available,
        has_moved=turn.has_moved,
        has_attacked=turn.has_attacked,
        stance=turn.stance,
    )


def stat_bonus(actor: Actor | None, stat: str = "AGI") -> int:
    """Tens digit of a stat (AGI 35 -> 3). Unknown actors and stats give 0."""
    if actor is None:
        return 0
    return actor.stats.get(stat, 0) // STAT_BONUS_DIVISOR
