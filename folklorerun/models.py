"""Core domain models.

Content types (creatures, levels, choices, UI parameters) are frozen and use
tuples for ordered data: they are loaded once and never change during a
session. The JSON form keeps the camelCase keys of the content files
("coreMechanic", "isCorrect", "riddleData", ...) through aliases.

Mechanic state is a discriminated union on ``kind``. Session is the only
mutable type and is owned by the GameEngine.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel

Phase = Literal[
    "intro",
    "select",
    "character_reveal",
    "story",
    "level",
    "level_transition",
    "end",
]

MechanicKind = Literal["riddle", "calmness", "deduction", "none"]

Outcome = Literal["victory", "defeat"]

Intensity = Literal["calm", "tense", "critical"]

Mood = Literal["peaceful", "sorrowful", "anguished"]

Origin = Literal["remote", "embedded"]


class _Content(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ---------------------------------------------------------------------------
# Story content
# ---------------------------------------------------------------------------

class Choice(_Content):
    """One of the two options offered by a level."""

    text: str
    is_correct: StrictBool = False  # 1 or "true" is rejected, not coerced
    consequence: str = ""


class RiddleData(_Content):
    riddle: str = ""
    hint: str = ""
    answer_key: str = ""


class Level(_Content):
    level_index: int = Field(ge=0, le=2)
    scene_text: str = ""
    enriched_scene: str = ""
    choices: tuple[Choice, Choice]
    riddle_data: RiddleData | None = None


class Creature(_Content):
    """A playable creature with its story, levels and mechanic."""

    id: str
    name: str
    story_lines: tuple[str, ...] = ()
    intros: tuple[str, ...] = Field(default=(), alias="enrichedIntros")
    mechanic: MechanicKind = Field(default="none", alias="coreMechanic")
    levels: tuple[Level, Level, Level]
    victory_texts: tuple[str, ...] = Field(min_length=1)
    defeat_texts: tuple[str, ...] = Field(min_length=1)


# ---------------------------------------------------------------------------
# UI parameters (consumed by presentation only)
# ---------------------------------------------------------------------------

class CreatureTheme(_Content):
    primary_color: str = "#ffffff"
    secondary_color: str = "#cccccc"
    fog_color: str = ""
    particle_type: str = ""
    particle_color: str = ""
    animation_speed: float = 1.0
    glow_intensity: float = 0.5


class IntensityParams(_Content):
    fog_density: float = 0.3
    particle_count: int = 20
    animation_intensity: float = 0.5
    screen_tilt: bool = False
    vignette: bool = False
    vignette_intensity: float = 0.0
    distortion: bool = False
    distortion_amount: float = 0.0


class SoundCue(_Content):
    descriptor: str = ""
    visual_effect: str = "ripple"
    duration: int = 500  # milliseconds


class UIConfig(_Content):
    creatures: dict[str, CreatureTheme]
    game_states: dict[str, IntensityParams]
    sound_cues: dict[str, SoundCue] = Field(default_factory=dict)
    transitions: dict[str, str] = Field(default_factory=dict)
    accessibility: dict[str, Any] = Field(default_factory=dict)
    performance: dict[str, Any] = Field(default_factory=dict)

    def theme_for(self, creature_id: str | None) -> CreatureTheme:
        if creature_id is None:
            return CreatureTheme()
        return self.creatures.get(creature_id) or CreatureTheme()

    def params_for(self, intensity: Intensity) -> IntensityParams:
        """Parameters for an intensity state, falling back to calm."""
        params = self.game_states.get(intensity) or self.game_states.get("calm")
        return params or IntensityParams()


class ContentRepository(_Content):
    """Validated, fully defaulted content for one session."""

    creatures: tuple[Creature, ...] = Field(min_length=1)
    ui: UIConfig
    creatures_origin: Origin = "embedded"
    ui_origin: Origin = "embedded"

    def get_creature(self, creature_id: str) -> Creature | None:
        for creature in self.creatures:
            if creature.id == creature_id:
                return creature
        return None

    def creature_ids(self) -> list[str]:
        return [c.id for c in self.creatures]


# ---------------------------------------------------------------------------
# Mechanic state
# ---------------------------------------------------------------------------

class RiddleState(_Content):
    kind: Literal["riddle"] = "riddle"
    hints_revealed: int = Field(default=0, ge=0)


class CalmnessState(_Content):
    kind: Literal["calmness"] = "calmness"
    calmness_level: int = Field(default=100, ge=0, le=100)


class DeductionState(_Content):
    kind: Literal["deduction"] = "deduction"
    tokens_collected: frozenset[str] = frozenset()


class InertState(_Content):
    """State for creatures without a recognised mechanic. Never changes."""

    kind: Literal["none"] = "none"


MechanicState = Annotated[
    Union[RiddleState, CalmnessState, DeductionState, InertState],
    Field(discriminator="kind"),
]


class RiddleVerdict(_Content):
    correct: bool
    hints_revealed: int
    hint: str | None = None  # exposed after a miss


# ---------------------------------------------------------------------------
# Session and snapshots
# ---------------------------------------------------------------------------

class Session(BaseModel):
    """Mutable run-time state for one playthrough with one creature."""

    creature: Creature
    mechanic: MechanicState
    level_index: int = 0
    correct_count: int = 0
    consequence_text: str = ""
    outcome: Outcome | None = None
    transition_from: int = 0
    story_index: int = 0
    entrance_complete: bool = False
    close_up_complete: bool = False


class GameSnapshot(_Content):
    """Read-only view of the engine handed to presentation and listeners."""

    phase: Phase
    creature: Creature | None = None
    level_index: int = 0
    level: Level | None = None
    story_index: int = 0
    story_line: str | None = None
    correct_count: int = 0
    consequence_text: str = ""
    mechanic: MechanicState | None = None
    revealed: bool | None = None  # deduction creatures only
    mood: Mood | None = None  # calmness creatures only
    outcome: Outcome | None = None
    transition_from: int = 0
    entrance_complete: bool = False
    close_up_complete: bool = False
    intensity: Intensity = "calm"
