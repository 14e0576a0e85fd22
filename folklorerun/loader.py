"""Content loader: fetch, validate and default the two content datasets.

    creatures_game_data.json: creatures, story lines, levels, choices
    ui_dynamic_config.json  : per-creature themes, per-intensity parameters

Both are fetched concurrently from a base URL. Each dataset succeeds or falls
back on its own: a transport error, timeout, non-2xx status, unparseable body
or failed validation swaps in the embedded copy from fallback.py for that
dataset only. There are no retries.

Successful payloads go through two steps:

  1. Structural validation (_validate_*): the minimum shape the game needs.
  2. Defaulting (_apply_*_defaults): every optional field is filled in, then
     the pydantic schema checks the result (3 levels × 2 choices each).

load_content() never raises; callers always get a playable ContentRepository.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from folklorerun.fallback import (
    FALLBACK_CREATURE_DATA,
    FALLBACK_UI_CONFIG,
    fallback_story_lines,
)
from folklorerun.models import ContentRepository, Creature, Origin, UIConfig

logger = logging.getLogger(__name__)

CREATURE_RESOURCE = "creatures_game_data.json"
UI_RESOURCE = "ui_dynamic_config.json"

DEFAULT_TIMEOUT = 5.0

KNOWN_MECHANICS = ("riddle", "calmness", "deduction")

UI_PASSTHROUGH_TABLES = ("soundCues", "transitions", "accessibility", "performance")


async def load_content(
    base_url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    creature_resource: str = CREATURE_RESOURCE,
    ui_resource: str = UI_RESOURCE,
    client: httpx.AsyncClient | None = None,
) -> ContentRepository:
    """Fetch both datasets concurrently and return a validated repository.

    Args:
        base_url:          Where the content files are served, e.g.
                           "http://localhost:13015/content".
        timeout:           Per-request timeout in seconds. A timeout counts as
                           a failed fetch.
        creature_resource: File name of the creature dataset.
        ui_resource:       File name of the UI parameter dataset.
        client:            Optional shared client. When omitted a client is
                           created and closed here.
    """
    creature_url = _resource_url(base_url, creature_resource)
    ui_url = _resource_url(base_url, ui_resource)

    if client is None:
        async with httpx.AsyncClient(timeout=timeout) as owned:
            return await _load_both(owned, creature_url, ui_url, timeout)
    return await _load_both(client, creature_url, ui_url, timeout)


def fallback_repository() -> ContentRepository:
    """Repository built only from the embedded datasets."""
    return ContentRepository(
        creatures=build_creatures(FALLBACK_CREATURE_DATA),
        ui=build_ui_config(FALLBACK_UI_CONFIG),
    )


async def _load_both(
    client: httpx.AsyncClient, creature_url: str, ui_url: str, timeout: float
) -> ContentRepository:
    (creatures, creatures_origin), (ui, ui_origin) = await asyncio.gather(
        _load_creatures(client, creature_url, timeout),
        _load_ui_config(client, ui_url, timeout),
    )
    logger.info(
        "content loaded creatures=%d creatures_origin=%s ui_origin=%s",
        len(creatures), creatures_origin, ui_origin,
    )
    return ContentRepository(
        creatures=creatures,
        ui=ui,
        creatures_origin=creatures_origin,
        ui_origin=ui_origin,
    )


# ---------------------------------------------------------------------------
# Per-dataset loading, each falls back independently
# ---------------------------------------------------------------------------

async def _load_creatures(
    client: httpx.AsyncClient, url: str, timeout: float
) -> tuple[tuple[Creature, ...], Origin]:
    try:
        data = await _fetch_json(client, url, timeout)
        _validate_creature_data(data)
        return build_creatures(data), "remote"
    except (ContentError, ValidationError) as e:
        logger.warning("Creature data unavailable (%s), using embedded content", _reason(e))
        return build_creatures(FALLBACK_CREATURE_DATA), "embedded"


async def _load_ui_config(
    client: httpx.AsyncClient, url: str, timeout: float
) -> tuple[UIConfig, Origin]:
    try:
        data = await _fetch_json(client, url, timeout)
        _validate_ui_config(data)
        return build_ui_config(data), "remote"
    except (ContentError, ValidationError) as e:
        logger.warning("UI config unavailable (%s), using embedded content", _reason(e))
        return build_ui_config(FALLBACK_UI_CONFIG), "embedded"


async def _fetch_json(client: httpx.AsyncClient, url: str, timeout: float) -> Any:
    logger.debug("content fetch url=%s timeout=%s", url, timeout)
    try:
        resp = await client.get(url, timeout=timeout)
        resp.raise_for_status()
    except httpx.TimeoutException as e:
        raise ContentError(f"{url} timed out after {timeout}s") from e
    except httpx.HTTPStatusError as e:
        raise ContentError(f"{url} returned HTTP {e.response.status_code}") from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise ContentError(f"Cannot fetch {url}: {e}") from e

    try:
        return resp.json()
    except (ValueError, RecursionError) as e:
        raise ContentError(f"{url} is not valid JSON") from e


def _resource_url(base_url: str, resource: str) -> str:
    return f"{base_url.rstrip('/')}/{resource.lstrip('/')}"


def _reason(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return f"{error.error_count()} schema error(s)"
    return str(error)


# ---------------------------------------------------------------------------
# Structural validation
# ---------------------------------------------------------------------------

def _validate_creature_data(data: Any) -> None:
    if not isinstance(data, dict):
        raise ContentError("creature data must be a JSON object")
    creatures = data.get("creatures")
    if not isinstance(creatures, list) or not creatures:
        raise ContentError("creature data needs a non-empty 'creatures' array")
    for i, creature in enumerate(creatures):
        if not isinstance(creature, dict):
            raise ContentError(f"creatures[{i}] is not an object")
        if not creature.get("id") or not creature.get("name"):
            raise ContentError(f"creatures[{i}] is missing id or name")
        levels = creature.get("levels")
        if not isinstance(levels, list) or not levels:
            raise ContentError(f"creatures[{i}] has no levels")


def _validate_ui_config(data: Any) -> None:
    if not isinstance(data, dict):
        raise ContentError("UI config must be a JSON object")
    for table in ("creatures", "gameStates"):
        value = data.get(table)
        if not isinstance(value, dict) or not value:
            raise ContentError(f"UI config needs a non-empty '{table}' object")


# ---------------------------------------------------------------------------
# Safe defaults
# ---------------------------------------------------------------------------

def build_creatures(data: dict[str, Any]) -> tuple[Creature, ...]:
    """Apply defaults to a validated creature payload and build the models."""
    return tuple(
        Creature.model_validate(_apply_creature_defaults(raw))
        for raw in data["creatures"]
    )


def build_ui_config(data: dict[str, Any]) -> UIConfig:
    return UIConfig.model_validate(_apply_ui_defaults(data))


def _text(value: Any, default: str = "") -> Any:
    """Return value unless it is missing or an empty string."""
    if value is None or value == "":
        return default
    return value


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _apply_creature_defaults(raw: dict[str, Any]) -> dict[str, Any]:
    creature_id = _text(raw.get("id"), "unknown")
    mechanic = raw.get("coreMechanic")
    if mechanic not in KNOWN_MECHANICS:
        mechanic = "none"

    story_lines = raw.get("storyLines")
    if not isinstance(story_lines, list):
        story_lines = fallback_story_lines(creature_id)

    return {
        "id": creature_id,
        "name": _text(raw.get("name"), "Unknown Creature"),
        "storyLines": story_lines,
        "enrichedIntros": _list(raw.get("enrichedIntros")),
        "coreMechanic": mechanic,
        "levels": [
            _apply_level_defaults(level, position)
            for position, level in enumerate(_list(raw.get("levels")))
        ],
        "victoryTexts": _list(raw.get("victoryTexts")) or ["You have succeeded."],
        "defeatTexts": _list(raw.get("defeatTexts")) or ["You have failed."],
    }


def _apply_level_defaults(level: Any, position: int) -> dict[str, Any]:
    if not isinstance(level, dict):
        level = {}
    scene_text = _text(level.get("sceneText"))
    riddle = level.get("riddleData")
    return {
        "levelIndex": _text(level.get("levelIndex"), position),
        "sceneText": scene_text,
        "enrichedScene": _text(level.get("enrichedScene"), scene_text),
        "choices": [_apply_choice_defaults(c) for c in _list(level.get("choices"))],
        "riddleData": {
            "riddle": _text(riddle.get("riddle")),
            "hint": _text(riddle.get("hint")),
            "answerKey": _text(riddle.get("answerKey")),
        } if isinstance(riddle, dict) else None,
    }


def _apply_choice_defaults(choice: Any) -> dict[str, Any]:
    if not isinstance(choice, dict):
        choice = {}
    is_correct = choice.get("isCorrect")
    return {
        "text": _text(choice.get("text"), "Continue"),
        "isCorrect": False if is_correct is None else is_correct,
        "consequence": _text(choice.get("consequence")),
    }


def _apply_ui_defaults(data: dict[str, Any]) -> dict[str, Any]:
    config = {
        "creatures": data["creatures"],
        "gameStates": data["gameStates"],
    }
    for table in UI_PASSTHROUGH_TABLES:
        value = data.get(table)
        config[table] = value if isinstance(value, dict) else FALLBACK_UI_CONFIG[table]
    return config


# ---------------------------------------------------------------------------
# ContentError: raised internally for every fetch and validation failure
# ---------------------------------------------------------------------------

class ContentError(RuntimeError):
    """A dataset could not be fetched or failed validation."""
