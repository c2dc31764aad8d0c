"""Compiled-in routing tables.

Category order is part of routing behaviour: the first category with a
matching entry wins, and within a category the first matching entry
wins. Confidence values are reported, never compared. Agent architect
patterns come first: prompts about building agents ("AI 에이전트 설계",
"MCP 서버 개발") also match AI/ML and backend entries.
"""

from agentroute.patterns.agent import AGENT_INTENT_PATTERNS
from agentroute.patterns.ai_ml import AI_ML_INTENT_PATTERNS
from agentroute.patterns.backend import BACKEND_INTENT_PATTERNS
from agentroute.patterns.context import CONTEXT_PATTERNS
from agentroute.patterns.data import DATA_INTENT_PATTERNS
from agentroute.patterns.explicit import EXPLICIT_PATTERNS
from agentroute.patterns.meta_discussion import META_DISCUSSION_PATTERNS
from agentroute.patterns.mobile import MOBILE_INTENT_PATTERNS
from agentroute.patterns.models import ContextPattern, IntentCategory, IntentPattern
from agentroute.patterns.platform import PLATFORM_INTENT_PATTERNS
from agentroute.patterns.tooling import TOOLING_INTENT_PATTERNS

INTENT_CATEGORIES: tuple[IntentCategory, ...] = (
    IntentCategory("agent", "agent-architect", "Agent", AGENT_INTENT_PATTERNS),
    IntentCategory("tooling", "tooling-engineer", "Tooling", TOOLING_INTENT_PATTERNS),
    IntentCategory("platform", "platform-engineer", "Platform", PLATFORM_INTENT_PATTERNS),
    IntentCategory("data", "data-engineer", "Data", DATA_INTENT_PATTERNS),
    IntentCategory("ai-ml", "ai-ml-engineer", "AI/ML", AI_ML_INTENT_PATTERNS),
    IntentCategory("backend", "backend-developer", "Backend", BACKEND_INTENT_PATTERNS),
    IntentCategory("mobile", "mobile-developer", "Mobile", MOBILE_INTENT_PATTERNS),
)

__all__ = [
    "AGENT_INTENT_PATTERNS",
    "AI_ML_INTENT_PATTERNS",
    "BACKEND_INTENT_PATTERNS",
    "CONTEXT_PATTERNS",
    "ContextPattern",
    "DATA_INTENT_PATTERNS",
    "EXPLICIT_PATTERNS",
    "INTENT_CATEGORIES",
    "IntentCategory",
    "IntentPattern",
    "META_DISCUSSION_PATTERNS",
    "MOBILE_INTENT_PATTERNS",
    "PLATFORM_INTENT_PATTERNS",
    "TOOLING_INTENT_PATTERNS",
]
