"""Per-choice legality: is each engine choice clickable right now, and if not, why."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from engine.equipment import get_actor_weapon
from engine.grid import MOVE_CHOICE_PREFIX, combatant_distance, parse_move_choice_id
from engine.range_bands import RANGE_GATED, ineligibility_reason
from engine.turn import is_player_turn, opponent_id, project_turn_economy
from models.choices import CombatMode
from models.view import REASON_LABELS, ActionCategory, ActionLegality, ReasonCode

if TYPE_CHECKING:
    from models.choices import Choice
    from models.save import GameSave, Weapon
    from models.view import TurnEconomyView

logger = logging.getLogger(__name__)

START_COMBAT_ID = "start_combat"
END_TURN_ID = "combat_end_turn"
MELEE_CHOICE_ID = "combat_melee"
MELEE_CHOICE_PREFIX = "combat_melee_"
DEFEND_CHOICE_ID = "combat_defend"
AIM_CHOICE_ID = "combat_aim"
SPECIAL_ACTION_IDS = (DEFEND_CHOICE_ID, AIM_CHOICE_ID)
RANGED_CHOICE_PREFIX = "combat_ranged_"
RANGED_LONG_CHOICE_ID = "combat_ranged_long_heavy"
CALLED_SHOT_CHOICE_ID = "combat_ranged_called_shot"

ATTACK_CATEGORIES = RANGE_GATED


def categorize_choice(choice: Choice) -> ActionCategory:
    """Decide which legality rules apply to a choice.

    An attached combat attack check is authoritative; the well-known
    choice IDs are the fallback when a choice carries no check data.
    """
    if parse_move_choice_id(choice.id) is not None:
        return ActionCategory.MOVE

    check = choice.attack_check
    if check is not None:
        if check.attacker.mode == CombatMode.RANGED:
            if check.modifiers.called_shot:
                return ActionCategory.RANGED_SHORT
            return ActionCategory.RANGED_LONG
        return ActionCategory.MELEE

    if choice.id == CALLED_SHOT_CHOICE_ID:
        return ActionCategory.RANGED_SHORT
    if choice.id.startswith(RANGED_CHOICE_PREFIX):
        return ActionCategory.RANGED_LONG
    if choice.id.startswith(MELEE_CHOICE_ID):
        return ActionCategory.MELEE
    if choice.id in SPECIAL_ACTION_IDS:
        return ActionCategory.SPECIAL
    if choice.id == END_TURN_ID or choice.id.startswith(MOVE_CHOICE_PREFIX):
        return ActionCategory.COMBAT_OTHER
    return ActionCategory.NARRATIVE


def is_combat_choice(choice: Choice) -> bool:
    return categorize_choice(choice) != ActionCategory.NARRATIVE


def split_choices(choices: list[Choice]) -> tuple[list[Choice], list[Choice]]:
    """Partition engine choices into (combat, narrative), keeping order.

    The start-combat choice appears in neither list.
    """
    combat: list[Choice] = []
    narrative: list[Choice] = []
    for choice in choices:
        if choice.id == START_COMBAT_ID:
            continue
        if is_combat_choice(choice):
            combat.append(choice)
        else:
            narrative.append(choice)
    return combat, narrative


def range_reasons(
    weapon: Weapon | None,
    dist: int | None,
) -> dict[ActionCategory, ReasonCode | None]:
    """Range verdict for each attack category (None means in range)."""
    return {category: ineligibility_reason(weapon, dist, category) for category in ATTACK_CATEGORIES}


def range_eligibility(weapon: Weapon | None, dist: int | None) -> dict[ActionCategory, bool]:
    """Boolean form of range_reasons()."""
    return {category: reason is None for category, reason in range_reasons(weapon, dist).items()}


def _reason_for(
    category: ActionCategory,
    economy: TurnEconomyView,
    player_turn: bool,
    ranges: dict[ActionCategory, ReasonCode | None],
) -> ReasonCode | None:
    """Highest-precedence reason blocking a choice of this category."""
    if category == ActionCategory.NARRATIVE:
        return None
    if not player_turn:
        return ReasonCode.NOT_YOUR_TURN
    if category == ActionCategory.MOVE:
        if economy.move_remaining <= 0:
            return ReasonCode.NO_MOVEMENT_LEFT
        return None
    if category in ATTACK_CATEGORIES:
        if not economy.action_available or economy.has_attacked:
            return ReasonCode.ACTION_SPENT
        return ranges.get(category)
    if category == ActionCategory.SPECIAL and not economy.action_available:
        return ReasonCode.ACTION_SPENT
    return None


def resolve_legality(
    choices: list[Choice],
    economy: TurnEconomyView,
    player_turn: bool,
    ranges: dict[ActionCategory, ReasonCode | None],
) -> list[ActionLegality]:
    """Produce one ActionLegality per choice, in input order.

    Precedence, highest first: not the player's turn, spent movement or
    action, range. Choices outside combat are never narrowed.

    Args:
        choices: Candidate choices from the engine.
        economy: The current turn's remaining budget.
        player_turn: Whether combat is active and the player holds the turn.
        ranges: Output of range_reasons() for the player's weapon and target.

    Returns:
        A fresh list of ActionLegality, same length and order as choices.
    """
    result = []
    for choice in choices:
        category = categorize_choice(choice)
        reason = _reason_for(category, economy, player_turn, ranges)
        result.append(
            ActionLegality(
                choice_id=choice.id,
                category=category,
                available=reason is None,
                reason_code=reason,
                reason=REASON_LABELS[reason] if reason is not None else None,
            )
        )
    return result


def resolve_save_legality(save: GameSave, choices: list[Choice]) -> list[ActionLegality]:
    """Run the full pipeline (distance, range, economy, ownership) for a save."""
    session = save.runtime.combat
    player_id = save.party.active_actor_id
    dist = combatant_distance(session, player_id, opponent_id(save))
    weapon = get_actor_weapon(save, save.actors_by_id.get(player_id))
    legality = resolve_legality(
        choices,
        project_turn_economy(session),
        is_player_turn(save),
        range_reasons(weapon, dist),
    )
    logger.debug(
        "Resolved %d choices at distance %s: %d available",
        len(legality), dist, sum(1 for entry in legality if entry.available),
    )
    return legality
