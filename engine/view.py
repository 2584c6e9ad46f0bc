"""Assembly of the combat panel model from a save snapshot and its choices."""

from __future__ import annotations

from typing import TYPE_CHECKING

from engine.equipment import armor_display, get_actor_armor, get_actor_weapon, weapon_display
from engine.grid import combatant_distance
from engine.legality import (
    CALLED_SHOT_CHOICE_ID,
    MELEE_CHOICE_ID,
    MELEE_CHOICE_PREFIX,
    RANGED_LONG_CHOICE_ID,
    range_reasons,
    resolve_legality,
)
from engine.range_bands import has_ranged_weapon, range_band
from engine.turn import (
    current_turn_actor_id,
    is_player_turn,
    opponent_id,
    project_turn_economy,
    stat_bonus,
)
from models.view import ActionCategory, CombatantSummary, CombatUiModel, FeaturedChoices

if TYPE_CHECKING:
    from models.choices import Choice
    from models.save import GameSave


def _summarize(save: GameSave, actor_id: str | None) -> CombatantSummary | None:
    actor = save.actors_by_id.get(actor_id) if actor_id is not None else None
    if actor is None:
        return None
    return CombatantSummary(
        actor_id=actor.id,
        name=actor.name,
        hp=actor.resources.hp,
        rf=actor.resources.rf,
        weapon=weapon_display(get_actor_weapon(save, actor)),
        armor=armor_display(get_actor_armor(save, actor)),
    )


def featured_choices(choices: list[Choice]) -> FeaturedChoices:
    """Bind choices to the dedicated attack buttons.

    The plain melee choice wins over its variants; the first variant is
    used when there is no plain one.
    """
    ids = [choice.id for choice in choices]
    melee = MELEE_CHOICE_ID if MELEE_CHOICE_ID in ids else next(
        (choice_id for choice_id in ids if choice_id.startswith(MELEE_CHOICE_PREFIX)), None
    )
    return FeaturedChoices(
        melee=melee,
        ranged_long=RANGED_LONG_CHOICE_ID if RANGED_LONG_CHOICE_ID in ids else None,
        called_shot=CALLED_SHOT_CHOICE_ID if CALLED_SHOT_CHOICE_ID in ids else None,
    )


def build_combat_ui_model(save: GameSave, choices: list[Choice]) -> CombatUiModel:
    """Derive everything the combat panel shows from one save snapshot.

    Pure: the save and choices are only read, and every call builds a new
    model from scratch.

    Args:
        save: Engine save snapshot.
        choices: Choices the engine currently offers, in display order.

    Returns:
        The combat panel model, with one legality entry per choice.
    """
    session = save.runtime.combat
    active = session is not None and session.active
    player_id = save.party.active_actor_id
    player_actor = save.actors_by_id.get(player_id)
    target_id = opponent_id(save)

    turn_holder = current_turn_actor_id(session)
    turn_actor = save.actors_by_id.get(turn_holder) if turn_holder is not None else None
    player_turn = is_player_turn(save)
    economy = project_turn_economy(session)

    dist = combatant_distance(session, player_id, target_id)
    weapon = get_actor_weapon(save, player_actor)
    ranges = range_reasons(weapon, dist)

    return CombatUiModel(
        is_combat_active=active,
        is_player_turn=player_turn,
        round=session.round if active else None,
        current_turn_actor_id=turn_holder,
        current_turn_actor_name=turn_actor.name if turn_actor is not None else None,
        distance=dist,
        turn=economy,
        move_allowance=stat_bonus(player_actor, "AGI"),
        player=_summarize(save, player_id),
        opponent=_summarize(save, target_id),
        has_ranged_weapon=has_ranged_weapon(weapon),
        weapon_range=weapon.range if weapon is not None else None,
        range_band=range_band(weapon, dist),
        can_melee=ranges[ActionCategory.MELEE] is None,
        can_ranged=ranges[ActionCategory.RANGED_LONG] is None,
        featured=featured_choices(choices),
        legality=resolve_legality(choices, economy, player_turn, ranges),
    )
