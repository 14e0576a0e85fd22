"""Shared endpoint dependencies."""

from fastapi import HTTPException, Request

from folklorerun.engine import GameEngine


def get_engine(request: Request) -> GameEngine:
    """The app's single engine; 503 until startup content loading has finished."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(503, "Content not loaded yet")
    return engine
