"""Async agent profile lookup used by the model resolver service."""

from __future__ import annotations

import asyncio
from pathlib import Path

from agentroute.registry.loader import AgentRegistry
from agentroute.registry.models import AgentProfile


class AgentNotFoundError(LookupError):
    """Raised when no profile exists for the requested agent name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Agent '{name}' not found")
        self.name = name


class AgentProfileStore:
    """Loads the merged registry lazily and answers lookups by name."""

    def __init__(
        self,
        project_root: Path | None = None,
        registry: AgentRegistry | None = None,
    ) -> None:
        self._project_root = project_root
        self._registry = registry

    async def _get_registry(self) -> AgentRegistry:
        if self._registry is None:
            self._registry = await asyncio.to_thread(
                AgentRegistry.load_merged, self._project_root
            )
        return self._registry

    async def get_agent(self, name: str) -> AgentProfile:
        registry = await self._get_registry()
        profile = registry.get(name)
        if profile is None:
            raise AgentNotFoundError(name)
        return profile

    async def list_agents(self) -> list[AgentProfile]:
        registry = await self._get_registry()
        return registry.all_agents()
