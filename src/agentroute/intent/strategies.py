"""Mode-specific primary agent selection.

PLAN picks between the two planning agents, EVAL always reviews, ACT
runs the full intent cascade with project settings applied.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Iterable

from agentroute.agents import (
    DEFAULT_ACT_AGENT,
    EVAL_PRIMARY_AGENT,
    PLAN_PRIMARY_AGENTS,
)
from agentroute.config import Settings
from agentroute.intent.models import CascadeStage, ResolvedIntent
from agentroute.intent.resolver import parse_explicit_request, resolve_intent

logger = logging.getLogger(__name__)

ARCHITECTURE_PATTERN = re.compile(
    r"아키텍처|architecture|시스템\s*설계|system\s*design|구조|structure|API\s*설계"
    r"|마이크로서비스|microservice|기술\s*선택|technology",
    re.IGNORECASE,
)

PLANNING_PATTERN = re.compile(
    r"계획|plan|단계|step|태스크|task|TDD|구현\s*순서|implementation\s*order|리팩토링|refactor",
    re.IGNORECASE,
)


def _result(
    agent: str, stage: CascadeStage, confidence: float, reason: str
) -> ResolvedIntent:
    return ResolvedIntent(
        agent=agent, confidence=confidence, source=stage.value, stage=stage, reason=reason
    )


def resolve_eval_agent() -> ResolvedIntent:
    return _result(
        EVAL_PRIMARY_AGENT,
        CascadeStage.MODE_DEFAULT,
        1.0,
        f"EVAL mode always uses {EVAL_PRIMARY_AGENT}",
    )


def resolve_plan_agent(
    prompt: str, available_agents: Collection[str] | None = None
) -> ResolvedIntent:
    """Architecture wording selects the solution architect, planning wording the planner."""
    available = set(PLAN_PRIMARY_AGENTS) if available_agents is None else set(available_agents)

    explicit = parse_explicit_request(prompt, PLAN_PRIMARY_AGENTS, available)
    if explicit:
        return _result(
            explicit, CascadeStage.EXPLICIT, 1.0, f"Explicit request for {explicit} in prompt"
        )

    architecture = bool(ARCHITECTURE_PATTERN.search(prompt))
    planning = bool(PLANNING_PATTERN.search(prompt))

    if architecture and not planning and "solution-architect" in available:
        return _result(
            "solution-architect",
            CascadeStage.PLAN,
            0.9,
            "Architecture-focused task detected in PLAN mode",
        )
    if planning and not architecture and "technical-planner" in available:
        return _result(
            "technical-planner",
            CascadeStage.PLAN,
            0.9,
            "Planning/implementation-focused task detected in PLAN mode",
        )
    if architecture and planning and "solution-architect" in available:
        return _result(
            "solution-architect",
            CascadeStage.PLAN,
            0.85,
            "Both architecture and planning detected; architecture takes precedence",
        )

    if "solution-architect" in available:
        default = "solution-architect"
    elif "technical-planner" in available:
        default = "technical-planner"
    else:
        default = DEFAULT_ACT_AGENT
    return _result(
        default, CascadeStage.MODE_DEFAULT, 1.0, f"PLAN mode default: {default}"
    )


def get_excluded_agents(settings: Settings | None) -> frozenset[str]:
    """Lowercased ``routing.exclude_agents``; empty without settings."""
    if settings is None:
        return frozenset()
    excluded = frozenset(a.lower() for a in settings.routing.exclude_agents)
    if excluded:
        logger.debug(f"Excluded agents from resolution: {', '.join(sorted(excluded))}")
    return excluded


def resolve_act_agent(
    prompt: str,
    file_paths: Iterable[str] = (),
    recommended_agent: str | None = None,
    settings: Settings | None = None,
    available_agents: Collection[str] | None = None,
    project_type: str | None = None,
) -> ResolvedIntent:
    excluded = get_excluded_agents(settings)

    primary = settings.routing.primary_agent if settings else None
    if primary:
        primary = primary.lower()
        unavailable = available_agents is not None and primary not in available_agents
        if primary in excluded or unavailable:
            logger.warning(f"Configured primary agent '{primary}' is excluded or unavailable")
            primary = None

    return resolve_intent(
        prompt,
        file_paths,
        recommended_agent,
        primary,
        project_type=project_type,
        available_agents=available_agents,
        excluded_agents=excluded,
    )


def resolve_primary_agent(
    mode: str,
    prompt: str,
    file_paths: Iterable[str] = (),
    recommended_agent: str | None = None,
    settings: Settings | None = None,
    available_agents: Collection[str] | None = None,
    project_type: str | None = None,
) -> ResolvedIntent:
    """Resolve the primary agent for ``mode`` (PLAN, ACT or EVAL; unknown modes act as ACT)."""
    mode = mode.upper()
    if mode == "EVAL":
        result = resolve_eval_agent()
    elif mode == "PLAN":
        result = resolve_plan_agent(prompt, available_agents)
    else:
        result = resolve_act_agent(
            prompt, file_paths, recommended_agent, settings, available_agents, project_type
        )
    logger.debug(
        f"[{mode}] Resolved agent: {result.agent} "
        f"(source: {result.source}, confidence: {result.confidence})"
    )
    return result
