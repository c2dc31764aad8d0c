"""Pydantic models for agent intent resolution."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class CascadeStage(StrEnum):
    EXPLICIT = "explicit"
    CARRYOVER = "carryover"
    INTENT = "intent"
    CONTEXT = "context"
    PROJECT_DEFAULT = "project-default"
    SYSTEM_DEFAULT = "system-default"
    # mode strategies
    PLAN = "plan"
    MODE_DEFAULT = "mode-default"


class ResolvedIntent(BaseModel):
    """Outcome of routing one request.

    ``source`` equals ``stage`` except for intent matches, where it is
    the name of the matching category (``"tooling"``, ``"mobile"``, ...).
    """

    agent: str
    confidence: float
    source: str
    stage: CascadeStage
    matched_description: str | None = None
    reason: str = ""
