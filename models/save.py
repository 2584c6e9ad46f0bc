"""Game save snapshot models, as exported by the rules engine."""

from enum import Enum

from pydantic import Field, model_validator

from models.base import EngineModel


class WeaponKind(str, Enum):
    """How a weapon reaches its target."""
    MELEE = "MELEE"
    RANGED = "RANGED"


class Stance(str, Enum):
    """Defensive posture of the combatant whose turn it is."""
    NORMAL = "normal"
    DEFEND = "defend"


class GridPosition(EngineModel):
    """A square on the combat grid. Negative coordinates are allowed."""
    x: int
    y: int


class Grid(EngineModel):
    """Combat grid dimensions in squares."""
    width: int = 0
    height: int = 0


class WeaponRange(EngineModel):
    """Declared range bands of a ranged weapon, in Chebyshev squares."""
    short: int
    long: int

    @model_validator(mode="after")
    def _short_below_long(self) -> "WeaponRange":
        if self.short >= self.long:
            raise ValueError(
                f"Weapon short range ({self.short}) must be below long range ({self.long})"
            )
        return self


class Weapon(EngineModel):
    """A weapon from the save's catalog."""
    id: str
    name: str
    kind: WeaponKind = WeaponKind.MELEE
    range: WeaponRange | None = None  # Ranged weapons only


class Armor(EngineModel):
    """An armor from the save's catalog."""
    id: str
    name: str
    soak: int = 0                   # Flat damage reduction


class Equipment(EngineModel):
    """Equipped item references, resolved against the save catalogs."""
    weapon_id: str | None = None
    armor_id: str | None = None


class Resources(EngineModel):
    """Spendable actor resources."""
    hp: int = 0
    rf: int = 0                     # Fatigue


class Actor(EngineModel):
    """A PC or NPC known to the save."""
    id: str
    name: str
    kind: str = "NPC"               # "PC" or "NPC"
    stats: dict[str, int] = {}      # e.g. {"AGI": 35, "WS": 40}
    resources: Resources = Resources()
    equipment: Equipment = Equipment()


class Party(EngineModel):
    """The player's party; the active actor is the one the player controls."""
    actors: list[str] = []
    active_actor_id: str


class TurnState(EngineModel):
    """Per-turn action economy of the current turn holder."""
    active_actor_id: str | None = None
    has_moved: bool = False
    has_attacked: bool = False
    move_remaining: int = Field(default=0, ge=0)
    action_available: bool = False
    stance: Stance = Stance.NORMAL


class CombatSession(EngineModel):
    """Combat encounter state. Absent from the save outside combat."""
    active: bool = False
    round: int = Field(default=1, ge=1)
    participants: list[str] = []    # Ordered, unique actor IDs
    current_index: int = 0          # Turn pointer into participants
    grid: Grid = Grid()
    positions: dict[str, GridPosition] = {}
    turn: TurnState = TurnState()


class CheckResult(EngineModel):
    """Outcome of the last resolved check, including diagnostic tags."""
    check_id: str
    actor_id: str
    roll: int = 0
    target: int = 0
    success: bool = False
    dos: int = 0                    # Degrees of Success
    dof: int = 0                    # Degrees of Failure
    critical: str = "none"
    tags: list[str] = []


class Runtime(EngineModel):
    """Mutable runtime portion of the save (read-only here)."""
    current_scene_id: str | None = None
    combat: CombatSession | None = None
    last_check: CheckResult | None = None
    last_player_check: CheckResult | None = None


class GameSave(EngineModel):
    """A full save snapshot. Only the fields the combat view reads are modelled."""
    party: Party
    actors_by_id: dict[str, Actor] = {}
    weapons_by_id: dict[str, Weapon] = {}
    armors_by_id: dict[str, Armor] = {}
    runtime: Runtime = Runtime()
