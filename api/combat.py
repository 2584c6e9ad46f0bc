"""Combat panel endpoints: UI model, per-choice legality, and distance."""

from fastapi import APIRouter

from engine.grid import distance
from engine.legality import resolve_save_legality
from engine.view import build_combat_ui_model
from models.base import EngineModel
from models.choices import Choice
from models.save import GameSave, GridPosition
from models.view import ActionLegality, CombatUiModel

router = APIRouter()


class CombatViewRequest(EngineModel):
    """A save snapshot and the choices the engine lists for it."""
    save: GameSave
    choices: list[Choice] = []


class DistanceRequest(EngineModel):
    """Two optional grid positions."""
    a: GridPosition | None = None
    b: GridPosition | None = None


class DistanceResponse(EngineModel):
    distance: int | None


@router.post("/view", response_model=CombatUiModel)
def get_combat_view(body: CombatViewRequest) -> CombatUiModel:
    """Everything the combat panel renders for this snapshot."""
    return build_combat_ui_model(body.save, body.choices)


@router.post("/legality", response_model=list[ActionLegality])
def get_legality(body: CombatViewRequest) -> list[ActionLegality]:
    """Availability and reason for each choice, in request order."""
    return resolve_save_legality(body.save, body.choices)


@router.post("/distance", response_model=DistanceResponse)
def get_distance(body: DistanceRequest) -> DistanceResponse:
    """Chebyshev distance between two squares (null if either is missing)."""
    return DistanceResponse(distance=distance(body.a, body.b))
