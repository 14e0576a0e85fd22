"""Named transition events for audio/animation collaborators.

The engine emits one event after every applied operation, passing the new
GameSnapshot. Collaborators subscribe by name (or "*" for everything); the
engine never depends on who is listening.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, Literal

from folklorerun.models import GameSnapshot

logger = logging.getLogger(__name__)

EventName = Literal[
    "intro_acknowledged",
    "creature_selected",
    "entrance_complete",
    "story_started",
    "story_advanced",
    "level_started",
    "choice_made",
    "level_transition",
    "game_over",
    "restarted",
    "went_home",
    "riddle_answered",
    "token_toggled",
    "calmness_changed",
]

ALL_EVENTS = "*"

Listener = Callable[[str, GameSnapshot], None]


class EventBus:
    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def subscribe(self, event: EventName | Literal["*"], listener: Listener) -> Callable[[], None]:
        """Register a listener and return a function that removes it."""
        self._listeners[event].append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners[event]:
                self._listeners[event].remove(listener)

        return unsubscribe

    def emit(self, event: EventName, snapshot: GameSnapshot) -> None:
        listeners = [*self._listeners[event], *self._listeners[ALL_EVENTS]]
        logger.debug("event %s listeners=%d", event, len(listeners))
        for listener in listeners:
            listener(event, snapshot)
