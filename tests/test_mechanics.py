"""Tests for folklorerun.mechanics: riddle, calmness and deduction rules."""

import itertools

import pytest

from folklorerun import mechanics
from folklorerun.models import (
    CalmnessState,
    DeductionState,
    InertState,
    RiddleData,
    RiddleState,
)

RIDDLE = RiddleData(
    riddle="I have cities but no houses. What am I?",
    hint="You hold me to find your way.",
    answer_key="map",
)


class TestInitialState:
    @pytest.mark.parametrize("kind,expected", [
        ("riddle", RiddleState(hints_revealed=0)),
        ("calmness", CalmnessState(calmness_level=100)),
        ("deduction", DeductionState(tokens_collected=frozenset())),
        ("none", InertState()),
    ])
    def test_defaults_per_kind(self, kind, expected) -> None:
        assert mechanics.initial_state(kind) == expected


# ---------------------------------------------------------------------------
# Riddle
# ---------------------------------------------------------------------------

class TestRiddle:
    def test_exact_answer_is_correct(self) -> None:
        state, verdict = mechanics.submit_answer(RiddleState(), RIDDLE, "map")
        assert verdict.correct is True
        assert verdict.hint is None
        assert state.hints_revealed == 0

    def test_answer_is_trimmed_and_lowercased(self) -> None:
        _, verdict = mechanics.submit_answer(RiddleState(), RIDDLE, "  MaP \n")
        assert verdict.correct is True

    def test_answer_key_is_normalised_too(self) -> None:
        riddle = RIDDLE.model_copy(update={"answer_key": " Footsteps "})
        _, verdict = mechanics.submit_answer(RiddleState(), riddle, "footsteps")
        assert verdict.correct is True

    def test_partial_match_is_wrong(self) -> None:
        _, verdict = mechanics.submit_answer(RiddleState(), RIDDLE, "a map")
        assert verdict.correct is False

    def test_miss_reveals_hint_and_counts(self) -> None:
        state, verdict = mechanics.submit_answer(RiddleState(), RIDDLE, "river")
        assert verdict.correct is False
        assert verdict.hint == "You hold me to find your way."
        assert state.hints_revealed == 1
        assert verdict.hints_revealed == 1

    def test_every_miss_counts_without_cap(self) -> None:
        state = RiddleState()
        for _ in range(7):
            state, _ = mechanics.submit_answer(state, RIDDLE, "wrong")
        assert state.hints_revealed == 7

    def test_correct_after_misses_keeps_count(self) -> None:
        state, _ = mechanics.submit_answer(RiddleState(), RIDDLE, "wrong")
        state, verdict = mechanics.submit_answer(state, RIDDLE, "map")
        assert verdict.correct is True
        assert state.hints_revealed == 1

    def test_input_state_untouched(self) -> None:
        before = RiddleState()
        mechanics.submit_answer(before, RIDDLE, "wrong")
        assert before.hints_revealed == 0


# ---------------------------------------------------------------------------
# Calmness
# ---------------------------------------------------------------------------

class TestCalmness:
    @pytest.mark.parametrize("level,expected", [(0, 75), (1, 70), (2, 65)])
    def test_incorrect_choice_decrements_by_level(self, level, expected) -> None:
        state = mechanics.apply_choice_outcome(CalmnessState(), level, is_correct=False)
        assert state.calmness_level == expected

    @pytest.mark.parametrize("level", [0, 1, 2])
    def test_correct_choice_never_changes_meter(self, level) -> None:
        state = CalmnessState(calmness_level=40)
        assert mechanics.apply_choice_outcome(state, level, is_correct=True) == state

    def test_clamped_at_zero(self) -> None:
        state = mechanics.apply_choice_outcome(CalmnessState(calmness_level=10), 2, False)
        assert state.calmness_level == 0

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="level 3"):
            mechanics.apply_choice_outcome(CalmnessState(), 3, False)

    @pytest.mark.parametrize("start", [0, 1, 24, 50, 60, 89, 100])
    def test_sequence_matches_formula(self, start) -> None:
        for misses in itertools.product([False, True], repeat=3):
            state = CalmnessState(calmness_level=start)
            for level, missed in enumerate(misses):
                state = mechanics.apply_choice_outcome(state, level, is_correct=not missed)
            expected = max(0, start - 25 * misses[0] - 30 * misses[1] - 35 * misses[2])
            assert state.calmness_level == expected
            assert 0 <= state.calmness_level <= 100

    @pytest.mark.parametrize("value,mood", [
        (100, "peaceful"), (60, "peaceful"),
        (59, "sorrowful"), (30, "sorrowful"),
        (29, "anguished"), (0, "anguished"),
    ])
    def test_mood_thresholds(self, value, mood) -> None:
        assert mechanics.calmness_mood(value) == mood


# ---------------------------------------------------------------------------
# Deduction
# ---------------------------------------------------------------------------

class TestDeduction:
    def test_universe_has_six_tokens(self) -> None:
        assert len(mechanics.TOKENS) == 6
        assert len(mechanics.TOKEN_IDS) == 6

    def test_toggle_adds_then_removes(self) -> None:
        state = mechanics.toggle_token(DeductionState(), "no-shadow")
        assert state.tokens_collected == {"no-shadow"}
        state = mechanics.toggle_token(state, "no-shadow")
        assert state.tokens_collected == frozenset()

    @pytest.mark.parametrize("token_id", sorted(mechanics.TOKEN_IDS))
    def test_double_toggle_restores_state(self, token_id) -> None:
        start = DeductionState(tokens_collected=frozenset({"salt-reaction", "leathery-wings"}))
        twice = mechanics.toggle_token(mechanics.toggle_token(start, token_id), token_id)
        assert twice == start

    def test_unknown_token_rejected(self) -> None:
        with pytest.raises(ValueError, match="silver-bullet"):
            mechanics.toggle_token(DeductionState(), "silver-bullet")

    @pytest.mark.parametrize("pair", mechanics.VALID_PAIRS)
    def test_each_valid_pair_reveals(self, pair) -> None:
        assert mechanics.is_revealed(DeductionState(tokens_collected=pair)) is True

    def test_superset_reveals(self) -> None:
        tokens = frozenset({"salt-reaction", "garlic-aversion", "no-shadow"})
        assert mechanics.is_revealed(DeductionState(tokens_collected=tokens)) is True

    def test_mixed_pairs_do_not_reveal(self) -> None:
        tokens = frozenset({"reversed-reflection", "salt-reaction", "extended-tongue"})
        assert mechanics.is_revealed(DeductionState(tokens_collected=tokens)) is False

    def test_removing_a_token_unreveals(self) -> None:
        state = DeductionState()
        for token in ("extended-tongue", "leathery-wings"):
            state = mechanics.toggle_token(state, token)
        assert mechanics.is_revealed(state) is True
        state = mechanics.toggle_token(state, "leathery-wings")
        assert mechanics.is_revealed(state) is False
