"""Pydantic models for agent profiles."""

from __future__ import annotations

from pydantic import BaseModel

from agentroute.model.models import ModelConfig


class AgentProfile(BaseModel):
    """Profile of a primary or mode agent."""

    name: str
    display_name: str = ""
    description: str = ""
    mode: str | None = None  # "PLAN" | "ACT" | "EVAL"; None for mode agents
    model: ModelConfig | None = None
