"""Priority cascade mapping a prompt, file paths and hints to one agent.

Resolution order (first success wins):

1. explicit directive in the prompt ("backend-developer로 작업해")
2. agent carried over from a previous planning step
3. meta-discussion gate (skips step 4 only)
4. intent categories in ``INTENT_CATEGORIES`` order
5. file path context, then project type
6. project default agent
7. system default agent

The cascade is total: every input ends at step 7 at the latest.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable

from agentroute.agents import ACT_PRIMARY_AGENTS, DEFAULT_ACT_AGENT
from agentroute.intent.models import CascadeStage, ResolvedIntent
from agentroute.patterns import (
    CONTEXT_PATTERNS,
    EXPLICIT_PATTERNS,
    INTENT_CATEGORIES,
    META_DISCUSSION_PATTERNS,
    IntentCategory,
)

logger = logging.getLogger(__name__)

EXPLICIT_CONFIDENCE = 1.0
CARRYOVER_CONFIDENCE = 0.9
PROJECT_TYPE_CONFIDENCE = 0.85
PROJECT_DEFAULT_CONFIDENCE = 0.5
SYSTEM_DEFAULT_CONFIDENCE = 0.3

INFRASTRUCTURE_PROJECT_TYPE = "infrastructure"


def _is_available(
    agent: str,
    available_agents: Collection[str] | None,
    excluded_agents: Collection[str] = (),
) -> bool:
    if agent.lower() in excluded_agents:
        return False
    return available_agents is None or agent in available_agents


def is_meta_discussion(prompt: str) -> bool:
    """True when the prompt talks about agents instead of asking one for work."""
    return any(pattern.search(prompt) for pattern in META_DISCUSSION_PATTERNS)


def parse_explicit_request(
    prompt: str,
    allowed_agents: Collection[str] = ACT_PRIMARY_AGENTS,
    available_agents: Collection[str] | None = None,
    excluded_agents: Collection[str] = (),
) -> str | None:
    """Return the agent named by an explicit directive, if it is an allowed agent."""
    for pattern in EXPLICIT_PATTERNS:
        match = pattern.search(prompt)
        if match is None:
            continue
        agent = match.group(1).lower()
        if agent in allowed_agents and _is_available(agent, available_agents, excluded_agents):
            return agent
    return None


def match_intent_categories(
    prompt: str,
    categories: Iterable[IntentCategory] = INTENT_CATEGORIES,
    available_agents: Collection[str] | None = None,
    excluded_agents: Collection[str] = (),
) -> ResolvedIntent | None:
    for category in categories:
        if not _is_available(category.agent, available_agents, excluded_agents):
            continue
        entry = category.first_match(prompt)
        if entry is not None:
            return ResolvedIntent(
                agent=category.agent,
                confidence=entry.confidence,
                source=category.name,
                stage=CascadeStage.INTENT,
                matched_description=entry.description,
                reason=f"{category.label} pattern detected: {entry.description}",
            )
    return None


def match_context(
    file_paths: Iterable[str],
    project_type: str | None = None,
    available_agents: Collection[str] | None = None,
    excluded_agents: Collection[str] = (),
) -> ResolvedIntent | None:
    for path in file_paths:
        for entry in CONTEXT_PATTERNS:
            if entry.pattern.search(path) and _is_available(
                entry.agent, available_agents, excluded_agents
            ):
                return ResolvedIntent(
                    agent=entry.agent,
                    confidence=entry.confidence,
                    source=CascadeStage.CONTEXT.value,
                    stage=CascadeStage.CONTEXT,
                    matched_description=path,
                    reason=f"Inferred from file path: {path}",
                )

    if project_type == INFRASTRUCTURE_PROJECT_TYPE and _is_available(
        "devops-engineer", available_agents, excluded_agents
    ):
        return ResolvedIntent(
            agent="devops-engineer",
            confidence=PROJECT_TYPE_CONFIDENCE,
            source=CascadeStage.CONTEXT.value,
            stage=CascadeStage.CONTEXT,
            reason=f"Inferred from project type: {project_type}",
        )
    return None


def _stage_result(
    agent: str, stage: CascadeStage, confidence: float, reason: str
) -> ResolvedIntent:
    return ResolvedIntent(
        agent=agent,
        confidence=confidence,
        source=stage.value,
        stage=stage,
        reason=reason,
    )


def resolve_intent(
    prompt: str,
    file_paths: Iterable[str] = (),
    recommended_agent: str | None = None,
    project_default_agent: str | None = None,
    *,
    project_type: str | None = None,
    available_agents: Collection[str] | None = None,
    excluded_agents: Collection[str] = (),
) -> ResolvedIntent:
    """Resolve the agent for an implementation request.

    Args:
        prompt: User request text.
        file_paths: Paths the request touches, in caller order.
        recommended_agent: Agent recommended by a previous planning step.
        project_default_agent: Project level ``primary_agent`` setting.
        project_type: Optional project kind hint (``"infrastructure"``).
        available_agents: Optional whitelist. Agents outside it are skipped
            by every stage except the two defaults.
        excluded_agents: Agent ids skipped by the same stages, compared
            case-insensitively. Agents not listed are never affected.

    Caller supplied agent ids (recommendation, project default) are
    returned as given, without checking them against the catalogue.
    """
    prompt = prompt or ""
    paths = list(file_paths)
    excluded = {a.lower() for a in excluded_agents}

    explicit = parse_explicit_request(
        prompt, available_agents=available_agents, excluded_agents=excluded
    )
    if explicit:
        logger.debug(f"Explicit agent request: {explicit}")
        return _stage_result(
            explicit,
            CascadeStage.EXPLICIT,
            EXPLICIT_CONFIDENCE,
            f"Explicit request for {explicit} in prompt",
        )

    if recommended_agent and _is_available(
        recommended_agent, available_agents, excluded
    ):
        logger.debug(f"Using carried-over recommendation: {recommended_agent}")
        return _stage_result(
            recommended_agent,
            CascadeStage.CARRYOVER,
            CARRYOVER_CONFIDENCE,
            f"Using agent recommended by planning step: {recommended_agent}",
        )

    if is_meta_discussion(prompt):
        logger.debug("Meta-agent discussion detected, skipping intent patterns")
    else:
        from_intent = match_intent_categories(
            prompt, available_agents=available_agents, excluded_agents=excluded
        )
        if from_intent:
            logger.debug(f"Intent pattern match: {from_intent.agent} ({from_intent.reason})")
            return from_intent

    from_context = match_context(paths, project_type, available_agents, excluded)
    if from_context:
        logger.debug(f"Context-based agent: {from_context.agent}")
        return from_context

    if project_default_agent:
        return _stage_result(
            project_default_agent,
            CascadeStage.PROJECT_DEFAULT,
            PROJECT_DEFAULT_CONFIDENCE,
            f"Configured in project: {project_default_agent}",
        )

    return _stage_result(
        DEFAULT_ACT_AGENT,
        CascadeStage.SYSTEM_DEFAULT,
        SYSTEM_DEFAULT_CONFIDENCE,
        f"Default fallback: {DEFAULT_ACT_AGENT} (no specific intent detected)",
    )
