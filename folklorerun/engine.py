"""Game engine — phase state machine and progression rules.

Phase flow:

    intro → select → character_reveal → story → level
                                                  │
                  ┌─────── level_transition ◄─────┤ (levels 0 and 1)
                  └──────────► level              │
                                                  ▼ (level 2)
                                                 end → character_reveal (restart)

    any phase → select (go home; the session is discarded)

Every trigger is a named method. A trigger called in the wrong phase or with
a bad argument (unknown creature, out-of-range choice) is ignored: it is
logged at WARNING, returns False, and leaves the state untouched.

Scoring: each level offers two choices. A correct choice adds one to the
correct count; play always continues to the next level. After the level 2
choice the outcome is victory with at least 2 of 3 correct, defeat otherwise.

The engine owns the only Session. Presentation reads GameSnapshot values and
subscribes to events; it never mutates state directly.
"""

from __future__ import annotations

import logging
import random

from folklorerun import mechanics
from folklorerun.events import EventBus, EventName
from folklorerun.models import (
    CalmnessState,
    ContentRepository,
    Creature,
    DeductionState,
    GameSnapshot,
    Intensity,
    Level,
    Phase,
    RiddleState,
    RiddleVerdict,
    Session,
)

logger = logging.getLogger(__name__)

FINAL_LEVEL = 2

# Correct choices needed (out of 3) for victory
WIN_THRESHOLD = 2

INTENSITY_BY_LEVEL: tuple[Intensity, ...] = ("calm", "tense", "critical")


class GameEngine:
    """Drives one player through the game for a fixed ContentRepository."""

    def __init__(self, content: ContentRepository, events: EventBus | None = None) -> None:
        self._content = content
        self.events = events or EventBus()
        self._phase: Phase = "intro"
        self._session: Session | None = None

    @property
    def content(self) -> ContentRepository:
        return self._content

    @property
    def phase(self) -> Phase:
        return self._phase

    # ------------------------------------------------------------------
    # Intro, selection and reveal
    # ------------------------------------------------------------------

    def acknowledge_intro(self) -> bool:
        if self._phase != "intro":
            return self._ignore("acknowledge_intro", "phase is %s", self._phase)
        self._set_phase("select")
        self._emit("intro_acknowledged")
        return True

    def select_creature(self, creature_id: str) -> bool:
        """Start a fresh session with the given creature."""
        if self._phase != "select":
            return self._ignore("select_creature", "phase is %s", self._phase)
        creature = self._content.get_creature(creature_id)
        if creature is None:
            return self._ignore("select_creature", "unknown creature %r", creature_id)

        self._session = _new_session(creature)
        self._set_phase("character_reveal")
        self._emit("creature_selected")
        return True

    def acknowledge_entrance(self) -> bool:
        if self._phase != "character_reveal":
            return self._ignore("acknowledge_entrance", "phase is %s", self._phase)
        self._require_session().entrance_complete = True
        self._emit("entrance_complete")
        return True

    def acknowledge_close_up(self) -> bool:
        """Finish the reveal and start the story bubbles."""
        if self._phase != "character_reveal":
            return self._ignore("acknowledge_close_up", "phase is %s", self._phase)
        session = self._require_session()
        session.close_up_complete = True
        session.story_index = 0
        self._set_phase("story")
        self._emit("story_started")
        return True

    def advance_story(self) -> bool:
        """Show the next story line, or enter level 0 after the last one."""
        if self._phase != "story":
            return self._ignore("advance_story", "phase is %s", self._phase)
        session = self._require_session()
        if session.story_index + 1 < len(session.creature.story_lines):
            session.story_index += 1
            self._emit("story_advanced")
        else:
            self._set_phase("level")
            self._emit("level_started")
        return True

    # ------------------------------------------------------------------
    # Levels
    # ------------------------------------------------------------------

    def submit_choice(self, choice_index: int) -> bool:
        """Resolve the player's choice for the current level."""
        if self._phase != "level":
            return self._ignore("submit_choice", "phase is %s", self._phase)
        session = self._require_session()
        level = _current_level(session)
        if not 0 <= choice_index < len(level.choices):
            return self._ignore("submit_choice", "choice index %s out of range", choice_index)

        choice = level.choices[choice_index]
        session.consequence_text = choice.consequence
        if choice.is_correct:
            session.correct_count += 1
        calmness_changed = self._apply_choice_to_mechanic(session, choice.is_correct)

        if session.level_index >= FINAL_LEVEL:
            session.outcome = "victory" if session.correct_count >= WIN_THRESHOLD else "defeat"
            self._set_phase("end")
        else:
            session.transition_from = session.level_index
            self._set_phase("level_transition")

        logger.debug(
            "choice level=%d index=%d correct=%s correct_count=%d",
            session.level_index, choice_index, choice.is_correct, session.correct_count,
        )
        self._emit("choice_made")
        if calmness_changed:
            self._emit("calmness_changed")
        self._emit("game_over" if self._phase == "end" else "level_transition")
        return True

    def complete_level_transition(self) -> bool:
        if self._phase != "level_transition":
            return self._ignore("complete_level_transition", "phase is %s", self._phase)
        session = self._require_session()
        if session.level_index >= FINAL_LEVEL:
            return self._ignore("complete_level_transition", "already at the final level")
        session.level_index += 1
        session.consequence_text = ""
        self._set_phase("level")
        self._emit("level_started")
        return True

    # ------------------------------------------------------------------
    # Mechanic actions
    # ------------------------------------------------------------------

    def submit_riddle_answer(self, raw_input: str) -> RiddleVerdict | None:
        """Check an answer to the current level's riddle.

        Returns None (and changes nothing) when the creature has no riddle
        mechanic, the level has no riddle, or no level is being played.
        """
        if self._phase != "level":
            self._ignore("submit_riddle_answer", "phase is %s", self._phase)
            return None
        session = self._require_session()
        mechanic = session.mechanic
        if not isinstance(mechanic, RiddleState):
            self._ignore("submit_riddle_answer", "creature mechanic is %s", mechanic.kind)
            return None
        riddle = _current_level(session).riddle_data
        if riddle is None:
            self._ignore("submit_riddle_answer", "level %d has no riddle", session.level_index)
            return None

        session.mechanic, verdict = mechanics.submit_answer(mechanic, riddle, raw_input)
        self._emit("riddle_answered")
        return verdict

    def toggle_token(self, token_id: str) -> bool:
        """Collect or drop a deduction clue token."""
        if self._phase != "level":
            return self._ignore("toggle_token", "phase is %s", self._phase)
        session = self._require_session()
        mechanic = session.mechanic
        if not isinstance(mechanic, DeductionState):
            return self._ignore("toggle_token", "creature mechanic is %s", mechanic.kind)
        if token_id not in mechanics.TOKEN_IDS:
            return self._ignore("toggle_token", "unknown token %r", token_id)

        session.mechanic = mechanics.toggle_token(mechanic, token_id)
        self._emit("token_toggled")
        return True

    # ------------------------------------------------------------------
    # Restart and home
    # ------------------------------------------------------------------

    def restart(self) -> bool:
        """Replay the same creature from the character reveal."""
        if self._phase != "end":
            return self._ignore("restart", "phase is %s", self._phase)
        self._session = _new_session(self._require_session().creature)
        self._set_phase("character_reveal")
        self._emit("restarted")
        return True

    def go_home(self) -> bool:
        self._session = None
        self._set_phase("select")
        self._emit("went_home")
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def intensity(self) -> Intensity:
        """calm / tense / critical for level 0 / 1 / 2."""
        if self._session is None:
            return "calm"
        return INTENSITY_BY_LEVEL[self._session.level_index]

    def outcome_text(self, rng: random.Random | None = None) -> str | None:
        """A random victory or defeat line for the finished game."""
        session = self._session
        if session is None or session.outcome is None:
            return None
        creature = session.creature
        texts = creature.victory_texts if session.outcome == "victory" else creature.defeat_texts
        return (rng or random).choice(texts)

    def snapshot(self) -> GameSnapshot:
        session = self._session
        if session is None:
            return GameSnapshot(phase=self._phase)

        creature = session.creature
        mechanic = session.mechanic
        story_line = None
        if self._phase == "story" and creature.story_lines:
            story_line = creature.story_lines[session.story_index]

        return GameSnapshot(
            phase=self._phase,
            creature=creature,
            level_index=session.level_index,
            level=_current_level(session),
            story_index=session.story_index,
            story_line=story_line,
            correct_count=session.correct_count,
            consequence_text=session.consequence_text,
            mechanic=mechanic,
            revealed=mechanics.is_revealed(mechanic) if isinstance(mechanic, DeductionState) else None,
            mood=mechanics.calmness_mood(mechanic.calmness_level) if isinstance(mechanic, CalmnessState) else None,
            outcome=session.outcome,
            transition_from=session.transition_from,
            entrance_complete=session.entrance_complete,
            close_up_complete=session.close_up_complete,
            intensity=self.intensity(),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply_choice_to_mechanic(self, session: Session, is_correct: bool) -> bool:
        """Run the mechanic's choice side effect. Returns True if the state changed."""
        mechanic = session.mechanic
        if isinstance(mechanic, CalmnessState):
            updated = mechanics.apply_choice_outcome(mechanic, session.level_index, is_correct)
            session.mechanic = updated
            return updated != mechanic
        # riddle, deduction and inert states are not touched by choices
        return False

    def _require_session(self) -> Session:
        assert self._session is not None, f"No session in phase {self._phase}"
        return self._session

    def _set_phase(self, phase: Phase) -> None:
        logger.debug("phase %s -> %s", self._phase, phase)
        self._phase = phase

    def _emit(self, event: EventName) -> None:
        self.events.emit(event, self.snapshot())

    def _ignore(self, operation: str, reason: str, *args: object) -> bool:
        logger.warning("%s ignored: " + reason, operation, *args)
        return False


def _new_session(creature: Creature) -> Session:
    return Session(creature=creature, mechanic=mechanics.initial_state(creature.mechanic))


def _current_level(session: Session) -> Level:
    return session.creature.levels[session.level_index]
