"""Game progression endpoints: one POST per engine operation.

Every POST answers with {"applied": bool, "state": <snapshot>}. An operation
the engine ignores (wrong phase, unknown creature, bad choice index) comes
back with applied=false and the unchanged state, not an HTTP error.
"""

from fastapi import APIRouter, Depends

from folklorerun.engine import GameEngine

from .deps import get_engine
from .models import ActionResult, RiddleAnswer, RiddleResult

router = APIRouter()


def _result(engine: GameEngine, applied: bool) -> ActionResult:
    return ActionResult(applied=applied, state=engine.snapshot())


@router.get("/state")
async def get_state(engine: GameEngine = Depends(get_engine)):
    """Current game snapshot."""
    return engine.snapshot()


@router.post("/intro/acknowledge", response_model=ActionResult)
async def acknowledge_intro(engine: GameEngine = Depends(get_engine)):
    """Finish the intro and show creature selection."""
    return _result(engine, engine.acknowledge_intro())


@router.post("/creatures/{creature_id}/select", response_model=ActionResult)
async def select_creature(creature_id: str, engine: GameEngine = Depends(get_engine)):
    """Pick a creature and start its character reveal."""
    return _result(engine, engine.select_creature(creature_id))


@router.post("/reveal/entrance", response_model=ActionResult)
async def acknowledge_entrance(engine: GameEngine = Depends(get_engine)):
    return _result(engine, engine.acknowledge_entrance())


@router.post("/reveal/close-up", response_model=ActionResult)
async def acknowledge_close_up(engine: GameEngine = Depends(get_engine)):
    """Finish the reveal and start the story."""
    return _result(engine, engine.acknowledge_close_up())


@router.post("/story/advance", response_model=ActionResult)
async def advance_story(engine: GameEngine = Depends(get_engine)):
    """Next story bubble, or the first level after the last bubble."""
    return _result(engine, engine.advance_story())


@router.post("/choices/{choice_index}", response_model=ActionResult)
async def submit_choice(choice_index: int, engine: GameEngine = Depends(get_engine)):
    """Choose one of the current level's two options."""
    return _result(engine, engine.submit_choice(choice_index))


@router.post("/transition/complete", response_model=ActionResult)
async def complete_level_transition(engine: GameEngine = Depends(get_engine)):
    return _result(engine, engine.complete_level_transition())


@router.post("/riddle", response_model=RiddleResult)
async def submit_riddle_answer(body: RiddleAnswer, engine: GameEngine = Depends(get_engine)):
    """Answer the current level's riddle (riddle creatures only)."""
    verdict = engine.submit_riddle_answer(body.answer)
    return RiddleResult(applied=verdict is not None, verdict=verdict, state=engine.snapshot())


@router.post("/tokens/{token_id}/toggle", response_model=ActionResult)
async def toggle_token(token_id: str, engine: GameEngine = Depends(get_engine)):
    """Collect or drop a clue token (deduction creatures only)."""
    return _result(engine, engine.toggle_token(token_id))


@router.post("/restart", response_model=ActionResult)
async def restart(engine: GameEngine = Depends(get_engine)):
    """Replay the same creature after the end card."""
    return _result(engine, engine.restart())


@router.post("/home", response_model=ActionResult)
async def go_home(engine: GameEngine = Depends(get_engine)):
    """Back to creature selection from anywhere."""
    return _result(engine, engine.go_home())


@router.get("/outcome-text")
async def outcome_text(engine: GameEngine = Depends(get_engine)):
    """A random victory/defeat line, or null before the game has ended."""
    return {"text": engine.outcome_text()}
