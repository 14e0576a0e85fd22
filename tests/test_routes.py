"""Tests for the HTTP API in backend.routes."""

import httpx
import pytest

from backend.app import create_app
from folklorerun.loader import fallback_repository
from folklorerun.settings import Settings


@pytest.fixture
async def client():
    app = create_app(content=fallback_repository(), settings=Settings())
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def _post(client: httpx.AsyncClient, path: str, **kwargs) -> dict:
    resp = await client.post(f"/api{path}", **kwargs)
    assert resp.status_code == 200
    return resp.json()


async def _to_level(client: httpx.AsyncClient, creature_id: str) -> dict:
    await _post(client, "/intro/acknowledge")
    await _post(client, f"/creatures/{creature_id}/select")
    body = await _post(client, "/reveal/close-up")
    while body["state"]["phase"] == "story":
        body = await _post(client, "/story/advance")
    return body


class TestContentEndpoints:
    async def test_health(self, client) -> None:
        resp = await client.get("/api/health")
        assert resp.json() == {"status": "ok"}

    async def test_creatures(self, client) -> None:
        resp = await client.get("/api/content/creatures")
        assert resp.json() == [
            {"id": "baba-yaga", "name": "Baba Yaga", "mechanic": "riddle"},
            {"id": "banshee", "name": "Banshee", "mechanic": "calmness"},
            {"id": "aswang", "name": "Aswang", "mechanic": "deduction"},
        ]

    async def test_origin(self, client) -> None:
        resp = await client.get("/api/content/origin")
        assert resp.json() == {"creatures": "embedded", "ui": "embedded"}

    async def test_tokens(self, client) -> None:
        resp = await client.get("/api/content/tokens")
        assert len(resp.json()) == 6

    async def test_presentation_follows_level(self, client) -> None:
        resp = await client.get("/api/presentation")
        assert resp.json()["intensity"] == "calm"

        await _to_level(client, "banshee")
        await _post(client, "/choices/0")
        await _post(client, "/transition/complete")
        body = (await client.get("/api/presentation")).json()
        assert body["intensity"] == "tense"
        assert body["theme"]["primaryColor"] == "#B8D4E8"
        assert "victory" in body["soundCues"]


class TestGameEndpoints:
    async def test_initial_state(self, client) -> None:
        resp = await client.get("/api/state")
        assert resp.json()["phase"] == "intro"

    async def test_ignored_operation_reports_not_applied(self, client) -> None:
        body = await _post(client, "/choices/0")
        assert body["applied"] is False
        assert body["state"]["phase"] == "intro"

    async def test_unknown_creature_not_applied(self, client) -> None:
        await _post(client, "/intro/acknowledge")
        body = await _post(client, "/creatures/kappa/select")
        assert body["applied"] is False
        assert body["state"]["phase"] == "select"

    async def test_full_game(self, client) -> None:
        body = await _to_level(client, "baba-yaga")
        assert body["state"]["phase"] == "level"

        for _ in range(2):
            body = await _post(client, "/choices/0")
            assert body["state"]["phase"] == "level_transition"
            await _post(client, "/transition/complete")
        body = await _post(client, "/choices/1")
        assert body["state"]["phase"] == "end"
        assert body["state"]["correctCount"] == 2
        assert body["state"]["outcome"] == "victory"

        text = (await client.get("/api/outcome-text")).json()["text"]
        assert text

        body = await _post(client, "/restart")
        assert body["state"]["phase"] == "character_reveal"
        assert body["state"]["correctCount"] == 0

    async def test_riddle(self, client) -> None:
        await _to_level(client, "baba-yaga")
        body = await _post(client, "/riddle", json={"answer": "Wolf"})
        assert body["applied"] is True
        assert body["verdict"]["correct"] is False
        assert body["verdict"]["hint"]
        assert body["state"]["mechanic"]["hintsRevealed"] == 1

    async def test_riddle_for_other_mechanic(self, client) -> None:
        await _to_level(client, "aswang")
        body = await _post(client, "/riddle", json={"answer": "human"})
        assert body["applied"] is False
        assert body["verdict"] is None

    async def test_token_toggle(self, client) -> None:
        await _to_level(client, "aswang")
        await _post(client, "/tokens/no-shadow/toggle")
        body = await _post(client, "/tokens/reversed-reflection/toggle")
        assert body["applied"] is True
        assert body["state"]["revealed"] is True
        assert sorted(body["state"]["mechanic"]["tokensCollected"]) == ["no-shadow", "reversed-reflection"]

    async def test_home(self, client) -> None:
        await _to_level(client, "banshee")
        body = await _post(client, "/home")
        assert body["state"]["phase"] == "select"
        assert body["state"]["creature"] is None


async def test_not_ready_without_content() -> None:
    app = create_app(settings=Settings())
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        resp = await c.get("/api/state")
    assert resp.status_code == 503
