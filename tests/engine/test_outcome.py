"""Scoring and end-of-game outcome."""

import itertools
import random

import pytest

from folklorerun.engine import GameEngine
from folklorerun.loader import fallback_repository

CREATURES = ["baba-yaga", "banshee", "aswang"]


def _play(engine: GameEngine, correctness: tuple[bool, bool, bool]) -> None:
    """Play three levels; choice 0 is the correct one in the embedded content."""
    for level, correct in enumerate(correctness):
        engine.submit_choice(0 if correct else 1)
        if level < 2:
            engine.complete_level_transition()


@pytest.mark.parametrize("creature_id", CREATURES)
@pytest.mark.parametrize("correctness", list(itertools.product([True, False], repeat=3)))
def test_outcome_depends_only_on_correct_count(start_level, creature_id, correctness) -> None:
    engine = start_level(creature_id)
    _play(engine, correctness)
    snap = engine.snapshot()
    assert snap.phase == "end"
    assert snap.correct_count == sum(correctness)
    assert snap.outcome == ("victory" if sum(correctness) >= 2 else "defeat")


def test_wrong_first_choice_does_not_end_game(start_level) -> None:
    engine = start_level("baba-yaga")
    engine.submit_choice(1)
    assert engine.phase == "level_transition"
    assert engine.snapshot().outcome is None


def test_riddle_playthrough_with_misses(start_level) -> None:
    engine = start_level("baba-yaga")

    verdict = engine.submit_riddle_answer("a person")
    assert verdict.correct is False
    verdict = engine.submit_riddle_answer("Human")
    assert verdict.correct is True
    engine.submit_choice(0)
    engine.complete_level_transition()

    engine.submit_choice(1)
    engine.complete_level_transition()

    assert engine.submit_riddle_answer(" FOOTSTEPS ").correct is True
    engine.submit_choice(0)

    snap = engine.snapshot()
    assert snap.outcome == "victory"
    assert snap.correct_count == 2
    assert snap.mechanic.hints_revealed == 1


class TestOutcomeText:
    def test_none_before_end(self, start_level) -> None:
        assert start_level("banshee").outcome_text() is None

    def test_none_without_session(self, engine: GameEngine) -> None:
        assert engine.outcome_text() is None

    def test_victory_text_from_creature(self, start_level) -> None:
        engine = start_level("banshee")
        _play(engine, (True, True, False))
        texts = engine.content.get_creature("banshee").victory_texts
        assert engine.outcome_text(random.Random(7)) in texts

    def test_defeat_text_from_creature(self, start_level) -> None:
        engine = start_level("aswang")
        _play(engine, (False, False, True))
        texts = engine.content.get_creature("aswang").defeat_texts
        assert engine.outcome_text() in texts

    def test_seeded_rng_is_repeatable(self, start_level) -> None:
        engine = start_level("baba-yaga")
        _play(engine, (True, True, True))
        assert engine.outcome_text(random.Random(3)) == engine.outcome_text(random.Random(3))


def test_sessions_are_isolated_between_engines() -> None:
    content = fallback_repository()
    first, second = GameEngine(content), GameEngine(content)
    for engine in (first, second):
        engine.acknowledge_intro()
        engine.select_creature("banshee")
        engine.acknowledge_close_up()
        while engine.phase == "story":
            engine.advance_story()
    first.submit_choice(1)
    assert first.snapshot().mechanic.calmness_level == 75
    assert second.snapshot().mechanic.calmness_level == 100
    assert second.snapshot().correct_count == 0
