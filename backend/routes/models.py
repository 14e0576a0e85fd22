"""Pydantic request/response models for API endpoints."""

from pydantic import BaseModel

from folklorerun.models import GameSnapshot, RiddleVerdict


class RiddleAnswer(BaseModel):
    answer: str


class ActionResult(BaseModel):
    applied: bool
    state: GameSnapshot


class RiddleResult(BaseModel):
    applied: bool
    verdict: RiddleVerdict | None = None
    state: GameSnapshot


class CreatureSummary(BaseModel):
    id: str
    name: str
    mechanic: str
