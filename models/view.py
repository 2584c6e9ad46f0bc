"""Derived, display-ready models. Recomputed on every request, never stored."""

from enum import Enum

from models.base import EngineModel
from models.save import Stance, WeaponKind, WeaponRange


class ActionCategory(str, Enum):
    """Legality rules that apply to a choice."""
    MOVE = "move"
    MELEE = "melee"
    RANGED_LONG = "ranged_long"
    RANGED_SHORT = "ranged_short"   # Called shot
    SPECIAL = "special"             # Defend, aim: spend the action, no range
    COMBAT_OTHER = "combat_other"   # e.g. combat_end_turn: turn-gated only
    NARRATIVE = "narrative"         # Not a combat choice: never gated


class ReasonCode(str, Enum):
    """Why a choice is unavailable. Only the highest-precedence one is reported."""
    NOT_YOUR_TURN = "not_your_turn"
    NO_MOVEMENT_LEFT = "no_movement_left"
    ACTION_SPENT = "action_spent"
    REQUIRES_MELEE_RANGE = "requires_melee_range"
    REQUIRES_RANGED_WEAPON = "requires_ranged_weapon"
    IN_MELEE = "in_melee"
    OUT_OF_RANGE = "out_of_range"


REASON_LABELS: dict[ReasonCode, str] = {
    ReasonCode.NOT_YOUR_TURN: "Not your turn",
    ReasonCode.NO_MOVEMENT_LEFT: "No movement left",
    ReasonCode.ACTION_SPENT: "Action spent",
    ReasonCode.REQUIRES_MELEE_RANGE: "Requires melee range",
    ReasonCode.REQUIRES_RANGED_WEAPON: "No ranged weapon",
    ReasonCode.IN_MELEE: "In melee",
    ReasonCode.OUT_OF_RANGE: "Out of range",
}


class ActionLegality(EngineModel):
    """Availability of one engine choice, in input order."""
    choice_id: str
    category: ActionCategory
    available: bool
    reason_code: ReasonCode | None = None
    reason: str | None = None       # Human-readable label for reason_code


class TurnEconomyView(EngineModel):
    """What the current turn holder has left to spend this turn."""
    move_remaining: int = 0
    action_available: bool = False
    has_moved: bool = False
    has_attacked: bool = False
    stance: Stance = Stance.NORMAL


class WeaponInfo(EngineModel):
    """An actor's equipped weapon, or the unarmed default."""
    weapon_id: str                  # "unarmed" when nothing is equipped
    name: str
    kind: WeaponKind
    range: WeaponRange | None = None


class ArmorInfo(EngineModel):
    """An actor's equipped armor, or the no-armor default."""
    armor_id: str                   # "none" when nothing is equipped
    name: str
    soak: int = 0


class CombatantSummary(EngineModel):
    """Header line for one combatant."""
    actor_id: str
    name: str
    hp: int
    rf: int
    weapon: WeaponInfo
    armor: ArmorInfo


class TagEntry(EngineModel):
    """One parsed diagnostic tag."""
    namespace: str
    key: str
    value: str


class TagBreakdown(EngineModel):
    """Diagnostic tags grouped by namespace, plus the raw list for fallback display."""
    version: int
    groups: dict[str, list[TagEntry]]
    tags: list[str]


class CombatDebugSummary(EngineModel):
    """Well-known values lifted from the combat: namespace."""
    attack_stat: str | None = None
    attack_target: str | None = None
    attack_roll: str | None = None
    attack_dos: str | None = None
    defense: str | None = None
    def_target: str | None = None
    def_roll: str | None = None
    def_dos: str | None = None
    def_success: bool | None = None
    tie: bool = False               # Ties go to the defender


class CheckDebugView(EngineModel):
    """Debug panel contents for the most relevant resolved check."""
    check_id: str
    actor_id: str
    is_player_check: bool
    roll: int
    target: int
    success: bool
    dos: int
    dof: int
    critical: str
    breakdown: TagBreakdown
    combat: CombatDebugSummary


class FeaturedChoices(EngineModel):
    """Choice IDs bound to the dedicated attack buttons."""
    melee: str | None = None
    ranged_long: str | None = None
    called_shot: str | None = None


class CombatUiModel(EngineModel):
    """Everything the combat panel renders, derived from one save snapshot."""
    is_combat_active: bool
    is_player_turn: bool
    round: int | None = None
    current_turn_actor_id: str | None = None
    current_turn_actor_name: str | None = None
    distance: int | None = None
    turn: TurnEconomyView
    move_allowance: int = 0
    player: CombatantSummary | None = None
    opponent: CombatantSummary | None = None
    has_ranged_weapon: bool = False
    weapon_range: WeaponRange | None = None
    range_band: str | None = None
    can_melee: bool = False
    can_ranged: bool = False
    featured: FeaturedChoices = FeaturedChoices()
    legality: list[ActionLegality] = []
