"""Health, content and presentation parameter endpoints."""

from fastapi import APIRouter, Depends

from folklorerun.engine import GameEngine
from folklorerun.mechanics import TOKENS

from .deps import get_engine
from .models import CreatureSummary

router = APIRouter()


@router.get("/health")
async def health():
    """Health check."""
    return {"status": "ok"}


@router.get("/content/creatures", response_model=list[CreatureSummary])
async def list_creatures(engine: GameEngine = Depends(get_engine)):
    """Selectable creatures."""
    return [
        CreatureSummary(id=c.id, name=c.name, mechanic=c.mechanic)
        for c in engine.content.creatures
    ]


@router.get("/content/origin")
async def content_origin(engine: GameEngine = Depends(get_engine)):
    """Whether each dataset came from the server or the embedded fallback."""
    return {
        "creatures": engine.content.creatures_origin,
        "ui": engine.content.ui_origin,
    }


@router.get("/content/tokens")
async def list_tokens():
    """The six deduction clue tokens."""
    return TOKENS


@router.get("/presentation")
async def presentation(engine: GameEngine = Depends(get_engine)):
    """Theme and intensity parameters for the current state."""
    ui = engine.content.ui
    snapshot = engine.snapshot()
    intensity = engine.intensity()
    creature_id = snapshot.creature.id if snapshot.creature else None
    return {
        "intensity": intensity,
        "theme": ui.theme_for(creature_id),
        "params": ui.params_for(intensity),
        "soundCues": ui.sound_cues,
        "transitions": ui.transitions,
        "accessibility": ui.accessibility,
    }
