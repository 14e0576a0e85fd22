"""Rules for the three creature mechanics.

Each creature carries one mechanic tag; the engine dispatches on it:

  riddle     (Baba Yaga): answer the level's riddle; every miss reveals the
                           hint and counts one more hint revealed.
  calmness   (Banshee)  : a 0–100 meter that only incorrect choices lower:
                           level 0 −25, level 1 −30, level 2 −35, clamped.
  deduction  (Aswang)   : collect clue tokens; the creature is revealed while
                           any valid pair is held. Toggling is unconditional.

Every rule is a pure function (state, input) → new state. States are frozen
models, so callers always get a new object back and the old one is intact.
"""

from __future__ import annotations

from pydantic import BaseModel

from folklorerun.models import (
    CalmnessState,
    DeductionState,
    InertState,
    MechanicKind,
    MechanicState,
    Mood,
    RiddleData,
    RiddleState,
    RiddleVerdict,
)

CALMNESS_MAX = 100
CALMNESS_MIN = 0

# Decrement applied per incorrect choice, indexed by level
CALMNESS_DECAY = (25, 30, 35)

# (lower bound inclusive, mood)
MOOD_THRESHOLDS: list[tuple[int, Mood]] = [
    (60, "peaceful"),
    (30, "sorrowful"),
    (0, "anguished"),
]


class Token(BaseModel):
    id: str
    name: str
    description: str


TOKENS: tuple[Token, ...] = (
    Token(id="reversed-reflection", name="Reversed Reflection", description="Mirror shows wrong image"),
    Token(id="no-shadow", name="No Shadow", description="Casts no shadow in moonlight"),
    Token(id="salt-reaction", name="Salt Reaction", description="Recoils from salt"),
    Token(id="garlic-aversion", name="Garlic Aversion", description="Avoids garlic"),
    Token(id="extended-tongue", name="Extended Tongue", description="Impossibly long tongue"),
    Token(id="leathery-wings", name="Leathery Wings", description="Hidden wings visible"),
)

TOKEN_IDS = frozenset(t.id for t in TOKENS)

VALID_PAIRS: tuple[frozenset[str], ...] = (
    frozenset({"reversed-reflection", "no-shadow"}),
    frozenset({"salt-reaction", "garlic-aversion"}),
    frozenset({"extended-tongue", "leathery-wings"}),
)


def initial_state(kind: MechanicKind) -> MechanicState:
    """Fresh mechanic state for a creature's mechanic tag."""
    if kind == "riddle":
        return RiddleState()
    if kind == "calmness":
        return CalmnessState(calmness_level=CALMNESS_MAX)
    if kind == "deduction":
        return DeductionState()
    return InertState()


# ---------------------------------------------------------------------------
# Riddle
# ---------------------------------------------------------------------------

def normalize_answer(text: str) -> str:
    return text.strip().lower()


def submit_answer(
    state: RiddleState, riddle: RiddleData, raw_input: str
) -> tuple[RiddleState, RiddleVerdict]:
    """Check an answer against the riddle's key.

    A miss bumps hints_revealed (no cap, every miss counts) and exposes the
    hint; a match leaves the state untouched.
    """
    if normalize_answer(raw_input) == normalize_answer(riddle.answer_key):
        return state, RiddleVerdict(correct=True, hints_revealed=state.hints_revealed)

    new_state = state.model_copy(update={"hints_revealed": state.hints_revealed + 1})
    verdict = RiddleVerdict(
        correct=False,
        hints_revealed=new_state.hints_revealed,
        hint=riddle.hint,
    )
    return new_state, verdict


# ---------------------------------------------------------------------------
# Calmness
# ---------------------------------------------------------------------------

def clamp_calmness(value: int) -> int:
    return max(CALMNESS_MIN, min(CALMNESS_MAX, value))


def apply_choice_outcome(
    state: CalmnessState, level_index: int, is_correct: bool
) -> CalmnessState:
    """Lower the meter for an incorrect choice at the given level."""
    if not 0 <= level_index < len(CALMNESS_DECAY):
        raise ValueError(f"No calmness decay defined for level {level_index}")
    if is_correct:
        return state
    level = clamp_calmness(state.calmness_level - CALMNESS_DECAY[level_index])
    return state.model_copy(update={"calmness_level": level})


def calmness_mood(calmness_level: int) -> Mood:
    """Display mood for a meter value: ≥60 peaceful, 30–59 sorrowful, <30 anguished."""
    value = clamp_calmness(calmness_level)
    for lower, mood in MOOD_THRESHOLDS:
        if value >= lower:
            return mood
    return "anguished"


# ---------------------------------------------------------------------------
# Deduction
# ---------------------------------------------------------------------------

def toggle_token(state: DeductionState, token_id: str) -> DeductionState:
    """Add the token if absent, remove it if present."""
    if token_id not in TOKEN_IDS:
        raise ValueError(f"Unknown deduction token {token_id!r}")
    return state.model_copy(
        update={"tokens_collected": state.tokens_collected ^ {token_id}}
    )


def is_revealed(state: DeductionState) -> bool:
    """True while the collected tokens contain at least one valid pair."""
    return any(pair <= state.tokens_collected for pair in VALID_PAIRS)
