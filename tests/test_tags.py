"""Tests for diagnostic tag parsing and the check debug view."""

from engine.tags import (
    NAMESPACES,
    build_check_debug_view,
    parse_tag,
    parse_tags,
    select_debug_check,
    summarize_combat_tags,
)
from models.save import CheckResult, GameSave, Party, Runtime


def _pairs(entries) -> list[tuple[str, str]]:
    return [(entry.key, entry.value) for entry in entries]


def _make_check(check_id: str = "chk_melee", tags: list[str] | None = None) -> CheckResult:
    """Helper to create a resolved check."""
    return CheckResult(
        check_id=check_id,
        actor_id="PC_1",
        roll=14,
        target=42,
        success=True,
        dos=2,
        dof=0,
        tags=tags or [],
    )


def _make_save(
    last_check: CheckResult | None = None,
    last_player_check: CheckResult | None = None,
) -> GameSave:
    return GameSave(
        party=Party(actors=["PC_1"], active_actor_id="PC_1"),
        runtime=Runtime(last_check=last_check, last_player_check=last_player_check),
    )


class TestParseTag:
    """Tests for parse_tag()."""

    def test_key_value(self):
        entry = parse_tag("combat:attackRoll=14")
        assert (entry.namespace, entry.key, entry.value) == ("combat", "attackRoll", "14")

    def test_flag_defaults_to_one(self):
        entry = parse_tag("combat:defSuccess")
        assert (entry.key, entry.value) == ("defSuccess", "1")

    def test_splits_on_first_equals(self):
        assert parse_tag("calc:formula=a=b").value == "a=b"

    def test_nested_key(self):
        entry = parse_tag("combat:damage:raw=7")
        assert (entry.namespace, entry.key) == ("combat", "damage:raw")

    def test_longest_prefix_wins(self):
        assert parse_tag("att:calc:base=40").namespace == "att:calc"
        assert parse_tag("def:calc:base=35").namespace == "def:calc"
        assert parse_tag("calc:base=30").namespace == "calc"

    def test_unrecognized_namespace(self):
        assert parse_tag("bogus") is None
        assert parse_tag("magic:dos=2") is None
        assert parse_tag("calcx:base=1") is None

    def test_empty_key_is_dropped(self):
        assert parse_tag("combat:") is None
        assert parse_tag("combat:=3") is None


class TestParseTags:
    """Tests for parse_tags()."""

    def test_groups_preserve_order(self):
        breakdown = parse_tags(
            ["combat:attackRoll=14", "combat:tie=1", "bogus", "combat:defSuccess"]
        )
        assert _pairs(breakdown.groups["combat"]) == [
            ("attackRoll", "14"),
            ("tie", "1"),
            ("defSuccess", "1"),
        ]
        assert breakdown.tags == [
            "combat:attackRoll=14", "combat:tie=1", "bogus", "combat:defSuccess"
        ]

    def test_interleaved_namespaces(self):
        breakdown = parse_tags([
            "att:calc:ws=40",
            "calc:base=30",
            "def:calc:ag=35",
            "att:calc:mod=10",
            "calc:total=42",
        ])
        assert _pairs(breakdown.groups["calc"]) == [("base", "30"), ("total", "42")]
        assert _pairs(breakdown.groups["att:calc"]) == [("ws", "40"), ("mod", "10")]
        assert _pairs(breakdown.groups["def:calc"]) == [("ag", "35")]

    def test_every_namespace_present(self):
        breakdown = parse_tags([])
        assert list(breakdown.groups) == list(NAMESPACES)
        assert all(entries == [] for entries in breakdown.groups.values())
        assert breakdown.version == 1


class TestCombatSummary:
    """Tests for summarize_combat_tags()."""

    def test_well_known_values(self):
        breakdown = parse_tags([
            "combat:attackStat=WS",
            "combat:attackRoll=14",
            "combat:attackDoS=2",
            "combat:defense=parry",
            "combat:defSuccess=0",
            "combat:weapon=sword",
        ])
        summary = summarize_combat_tags(breakdown.groups["combat"])
        assert summary.attack_stat == "WS"
        assert summary.attack_roll == "14"
        assert summary.attack_dos == "2"
        assert summary.defense == "parry"
        assert summary.def_success is False
        assert summary.tie is False
        assert summary.def_roll is None

    def test_tie_and_flag_success(self):
        breakdown = parse_tags(["combat:tie=1", "combat:defSuccess"])
        summary = summarize_combat_tags(breakdown.groups["combat"])
        assert summary.tie is True
        assert summary.def_success is True

    def test_first_occurrence_wins(self):
        breakdown = parse_tags(["combat:attackRoll=14", "combat:attackRoll=99"])
        assert summarize_combat_tags(breakdown.groups["combat"]).attack_roll == "14"


class TestCheckDebugView:
    """Tests for select_debug_check() / build_check_debug_view()."""

    def test_prefers_player_check(self):
        save = _make_save(
            last_check=_make_check("chk_npc"),
            last_player_check=_make_check("chk_player"),
        )
        check, is_player = select_debug_check(save)
        assert check.check_id == "chk_player"
        assert is_player

    def test_falls_back_to_last_check(self):
        view = build_check_debug_view(_make_save(last_check=_make_check("chk_npc")))
        assert view.check_id == "chk_npc"
        assert not view.is_player_check

    def test_no_check(self):
        assert select_debug_check(_make_save()) is None
        assert build_check_debug_view(_make_save()) is None

    def test_view_contents(self):
        check = _make_check(tags=["calc:base=30", "combat:attackRoll=14", "combat:tie=1"])
        view = build_check_debug_view(_make_save(last_player_check=check))
        assert (view.roll, view.target, view.dos, view.dof) == (14, 42, 2, 0)
        assert view.critical == "none"
        assert _pairs(view.breakdown.groups["calc"]) == [("base", "30")]
        assert view.combat.attack_roll == "14"
        assert view.combat.tie is True
