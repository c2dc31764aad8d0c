"""Agent intent resolution."""

from agentroute.intent.models import CascadeStage, ResolvedIntent
from agentroute.intent.resolver import (
    is_meta_discussion,
    match_context,
    match_intent_categories,
    parse_explicit_request,
    resolve_intent,
)
from agentroute.intent.strategies import (
    resolve_act_agent,
    resolve_eval_agent,
    resolve_plan_agent,
    resolve_primary_agent,
)

__all__ = [
    "CascadeStage",
    "ResolvedIntent",
    "is_meta_discussion",
    "match_context",
    "match_intent_categories",
    "parse_explicit_request",
    "resolve_act_agent",
    "resolve_eval_agent",
    "resolve_intent",
    "resolve_plan_agent",
    "resolve_primary_agent",
]
