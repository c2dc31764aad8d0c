"""Agent profile registry: bundled profiles plus project overrides."""

from agentroute.registry.loader import (
    AgentRegistry,
    InvalidAgentProfileError,
    discover_project_agents,
    parse_agent_profile,
)
from agentroute.registry.models import AgentProfile
from agentroute.registry.store import AgentNotFoundError, AgentProfileStore

__all__ = [
    "AgentNotFoundError",
    "AgentProfile",
    "AgentProfileStore",
    "AgentRegistry",
    "InvalidAgentProfileError",
    "discover_project_agents",
    "parse_agent_profile",
]
