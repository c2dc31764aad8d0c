"""Request/response models and the single entry point shared by the CLI, HTTP and MCP surfaces."""

from __future__ import annotations

from pydantic import BaseModel, Field

from agentroute.agents import MODE_AGENTS
from agentroute.config import Settings
from agentroute.intent.models import ResolvedIntent
from agentroute.intent.strategies import resolve_primary_agent
from agentroute.keywords import parse_mode
from agentroute.model.models import ResolvedModel
from agentroute.model.service import ModelResolverService


class RouteAgentRequest(BaseModel):
    prompt: str
    file_paths: list[str] = Field(default_factory=list)
    recommended_agent: str | None = None
    mode: str | None = None  # parsed from the prompt's leading keyword when omitted
    project_type: str | None = None


class RouteAgentResponse(BaseModel):
    mode: str
    prompt: str
    result: ResolvedIntent
    warnings: list[str] = Field(default_factory=list)


class RouteModelRequest(BaseModel):
    agent: str | None = None
    mode_agent: str | None = None
    mode: str | None = None  # shorthand for the mode agent, e.g. "PLAN" -> "plan-mode"

    def resolved_mode_agent(self) -> str | None:
        if self.mode_agent:
            return self.mode_agent
        if self.mode:
            return MODE_AGENTS.get(self.mode.upper())
        return None


def route_agent(req: RouteAgentRequest, settings: Settings | None = None) -> RouteAgentResponse:
    warnings: list[str] = []
    if req.mode:
        mode, prompt = req.mode.upper(), req.prompt
    else:
        parsed = parse_mode(req.prompt)
        mode, prompt, warnings = parsed.mode, parsed.prompt, parsed.warnings

    result = resolve_primary_agent(
        mode,
        prompt,
        file_paths=req.file_paths,
        recommended_agent=req.recommended_agent,
        settings=settings,
        project_type=req.project_type,
    )
    return RouteAgentResponse(mode=mode, prompt=prompt, result=result, warnings=warnings)


async def route_model(req: RouteModelRequest, service: ModelResolverService) -> ResolvedModel:
    return await service.resolve(agent_name=req.agent, mode_agent_name=req.resolved_mode_agent())
