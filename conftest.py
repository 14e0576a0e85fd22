import pytest

from folklorerun.engine import GameEngine
from folklorerun.loader import fallback_repository
from folklorerun.models import ContentRepository


@pytest.fixture
def content() -> ContentRepository:
    """The embedded content: baba-yaga (riddle), banshee (calmness), aswang (deduction)."""
    return fallback_repository()


@pytest.fixture
def engine(content: ContentRepository) -> GameEngine:
    """A fresh engine sitting in the intro phase."""
    return GameEngine(content)
