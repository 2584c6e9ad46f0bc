"""Diagnostic tag breakdown endpoints for the debug panels."""

from fastapi import APIRouter, HTTPException

from engine.tags import build_check_debug_view, parse_tags
from models.base import EngineModel
from models.save import GameSave
from models.view import CheckDebugView, TagBreakdown

router = APIRouter()


class TagsRequest(EngineModel):
    """Raw diagnostic tags, in emission order."""
    tags: list[str] = []


class CheckRequest(EngineModel):
    save: GameSave


@router.post("/tags", response_model=TagBreakdown)
def get_tag_breakdown(body: TagsRequest) -> TagBreakdown:
    """Group tags by namespace. Unrecognized tags are only kept in the raw list."""
    return parse_tags(body.tags)


@router.post("/check", response_model=CheckDebugView)
def get_check_debug(body: CheckRequest) -> CheckDebugView:
    """Debug view of the player's last combat check, else the last check."""
    view = build_check_debug_view(body.save)
    if view is None:
        raise HTTPException(status_code=404, detail="No check has been resolved yet")
    return view
