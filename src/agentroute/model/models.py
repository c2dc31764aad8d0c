"""Pydantic models for model resolution."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ModelSource(StrEnum):
    AGENT = "agent"
    MODE = "mode"
    GLOBAL = "global"
    SYSTEM = "system"


class ModelConfig(BaseModel):
    """``model`` block of an agent or mode profile."""

    model_config = ConfigDict(frozen=True)

    preferred: str
    reason: str | None = None


class ResolveModelParams(BaseModel):
    agent_model: ModelConfig | None = None
    mode_model: ModelConfig | None = None
    global_default_model: str | None = None
    additional_prefixes: list[str] = Field(default_factory=list)


class ResolvedModel(BaseModel):
    model: str
    source: ModelSource
    warning: str | None = None


def is_model_config(value: object) -> bool:
    """True for a ModelConfig (or dict shaped like one) with a non-empty ``preferred``."""
    if isinstance(value, ModelConfig):
        return bool(value.preferred)
    if isinstance(value, dict):
        preferred = value.get("preferred")
        return isinstance(preferred, str) and len(preferred) > 0
    return False
