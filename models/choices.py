"""Choice and check models as listed by the rules engine."""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Discriminator, Tag

from models.base import EngineModel

COMBAT_ATTACK_KIND = "combatAttack"


class CombatMode(str, Enum):
    """Attack delivery declared on a combat attack check."""
    MELEE = "MELEE"
    RANGED = "RANGED"


class Attacker(EngineModel):
    """Attacker side of a combat attack check."""
    mode: CombatMode = CombatMode.MELEE
    weapon_id: str | None = None


class AttackModifiers(EngineModel):
    """Optional situational modifiers on a combat attack check."""
    outnumbering: int | None = None
    range_band: str | None = None
    called_shot: bool = False
    cover: str | None = None


class CombatAttackCheck(EngineModel):
    """An attack roll against another combatant."""
    id: str | None = None
    kind: Literal["combatAttack"] = COMBAT_ATTACK_KIND
    attacker: Attacker = Attacker()
    modifiers: AttackModifiers = AttackModifiers()


class OtherCheck(EngineModel):
    """Any check kind this service does not interpret (kept as-is)."""
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    kind: str


def _check_tag(value: Any) -> str:
    kind = value.get("kind") if isinstance(value, dict) else getattr(value, "kind", None)
    return "attack" if kind == COMBAT_ATTACK_KIND else "other"


Check = Annotated[
    Union[
        Annotated[CombatAttackCheck, Tag("attack")],
        Annotated[OtherCheck, Tag("other")],
    ],
    Discriminator(_check_tag),
]


class Choice(EngineModel):
    """A candidate action offered by the engine for the current scene."""
    id: str
    label: str = ""
    checks: list[Check] = []

    @property
    def attack_check(self) -> CombatAttackCheck | None:
        """First combat attack check on this choice, if any."""
        for check in self.checks:
            if isinstance(check, CombatAttackCheck):
                return check
        return None
