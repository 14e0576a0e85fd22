import pytest

from folklorerun.engine import GameEngine


@pytest.fixture
def start_level(engine: GameEngine):
    """Drive a fresh engine from the intro to level 0 of the given creature."""

    def _start(creature_id: str) -> GameEngine:
        assert engine.acknowledge_intro()
        assert engine.select_creature(creature_id)
        assert engine.acknowledge_entrance()
        assert engine.acknowledge_close_up()
        while engine.phase == "story":
            engine.advance_story()
        assert engine.phase == "level"
        return engine

    return _start


@pytest.fixture
def recorder(engine: GameEngine) -> list[tuple[str, object]]:
    """Every emitted event with its snapshot, in order."""
    seen: list[tuple[str, object]] = []
    engine.events.subscribe("*", lambda name, snap: seen.append((name, snap)))
    return seen
