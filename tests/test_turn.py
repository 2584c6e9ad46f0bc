"""Tests for turn ownership and turn-economy projection."""

from engine.turn import (
    current_turn_actor_id,
    is_player_turn,
    opponent_id,
    project_turn_economy,
    stat_bonus,
)
from models.save import Actor, CombatSession, GameSave, Party, Runtime, Stance, TurnState


def _make_session(
    current_index: int = 0,
    active: bool = True,
    turn: TurnState | None = None,
) -> CombatSession:
    """Helper to create a two-combatant session."""
    return CombatSession(
        active=active,
        participants=["PC_1", "NPC_1"],
        current_index=current_index,
        turn=turn or TurnState(move_remaining=3, action_available=True),
    )


def _make_save(session: CombatSession | None) -> GameSave:
    return GameSave(
        party=Party(actors=["PC_1"], active_actor_id="PC_1"),
        runtime=Runtime(combat=session),
    )


class TestCurrentTurnActor:
    """Tests for current_turn_actor_id()."""

    def test_follows_turn_pointer(self):
        assert current_turn_actor_id(_make_session(current_index=1)) == "NPC_1"

    def test_explicit_active_actor_wins(self):
        session = _make_session(current_index=0, turn=TurnState(active_actor_id="NPC_1"))
        assert current_turn_actor_id(session) == "NPC_1"

    def test_inactive_combat(self):
        assert current_turn_actor_id(_make_session(active=False)) is None
        assert current_turn_actor_id(None) is None

    def test_pointer_out_of_range(self):
        assert current_turn_actor_id(_make_session(current_index=5)) is None

    def test_non_participant_active_actor_ignored(self):
        session = _make_session(current_index=1, turn=TurnState(active_actor_id="GHOST"))
        assert current_turn_actor_id(session) == "NPC_1"


class TestIsPlayerTurn:
    """Tests for is_player_turn() / opponent_id()."""

    def test_player_turn(self):
        assert is_player_turn(_make_save(_make_session(current_index=0)))

    def test_npc_turn(self):
        assert not is_player_turn(_make_save(_make_session(current_index=1)))

    def test_no_combat(self):
        assert not is_player_turn(_make_save(None))

    def test_opponent_is_first_other_participant(self):
        assert opponent_id(_make_save(_make_session())) == "NPC_1"
        assert opponent_id(_make_save(None)) is None


class TestProjectTurnEconomy:
    """Tests for project_turn_economy()."""

    def test_copies_turn_state(self):
        turn = TurnState(
            move_remaining=2,
            action_available=False,
            has_moved=True,
            has_attacked=True,
            stance=Stance.DEFEND,
        )
        economy = project_turn_economy(_make_session(turn=turn))
        assert economy.move_remaining == 2
        assert not economy.action_available
        assert economy.has_moved and economy.has_attacked
        assert economy.stance == Stance.DEFEND

    def test_outside_combat_nothing_left(self):
        economy = project_turn_economy(None)
        assert economy.move_remaining == 0
        assert not economy.action_available
        assert economy.stance == Stance.NORMAL

    def test_does_not_mutate_session(self):
        session = _make_session()
        before = session.model_dump()
        project_turn_economy(session)
        assert session.model_dump() == before


class TestStatBonus:
    """Tests for stat_bonus()."""

    def test_tens_digit(self):
        actor = Actor(id="PC_1", name="Hero", stats={"AGI": 35})
        assert stat_bonus(actor, "AGI") == 3

    def test_missing_stat_or_actor(self):
        assert stat_bonus(Actor(id="PC_1", name="Hero"), "AGI") == 0
        assert stat_bonus(None) == 0
