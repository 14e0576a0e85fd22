"""FastAPI API endpoints under /api.

Endpoint groups: health and content (creature list, dataset origin, clue
tokens, presentation parameters) and game progression (one POST per engine
operation plus the current state and outcome text).

All game endpoints share the single GameEngine stored on app.state by
backend.app.create_app().
"""

from fastapi import APIRouter

from .content import router as content_router
from .game import router as game_router

router = APIRouter()
router.include_router(content_router)
router.include_router(game_router)
