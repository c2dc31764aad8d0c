"""Bridge between the pure model resolver and the configuration stores."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from agentroute.config import Settings
from agentroute.model.models import (
    ModelConfig,
    ResolvedModel,
    ResolveModelParams,
    is_model_config,
)
from agentroute.model.resolver import resolve_model

logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    async def get_settings(self) -> Settings | None: ...


class AgentProfile(Protocol):
    @property
    def model(self) -> ModelConfig | None: ...


class AgentStore(Protocol):
    async def get_agent(self, name: str) -> AgentProfile: ...


class ModelResolverService:
    """Loads agent, mode and global model settings, then delegates to ``resolve_model``.

    A store that fails is logged and treated as having nothing configured
    at its level; resolution always completes.
    """

    def __init__(self, settings_store: SettingsStore, agent_store: AgentStore) -> None:
        self._settings_store = settings_store
        self._agent_store = agent_store

    async def resolve_for_mode(self, mode_agent_name: str | None = None) -> ResolvedModel:
        """Resolve for a mode agent (``plan-mode``, ``act-mode``, ``eval-mode``)."""
        settings = await self._load_settings()
        mode_model = await self._load_agent_model(mode_agent_name)
        return resolve_model(self._params(settings, mode_model=mode_model))

    async def resolve_for_agent(self, agent_model: ModelConfig | None = None) -> ResolvedModel:
        """Resolve with a caller-supplied agent model config."""
        settings = await self._load_settings()
        return resolve_model(self._params(settings, agent_model=agent_model))

    async def resolve(
        self,
        agent_name: str | None = None,
        mode_agent_name: str | None = None,
    ) -> ResolvedModel:
        """Resolve across all four levels, loading both agent and mode profiles."""
        settings = await self._load_settings()
        agent_model = await self._load_agent_model(agent_name)
        mode_model = await self._load_agent_model(mode_agent_name)
        return resolve_model(
            self._params(settings, agent_model=agent_model, mode_model=mode_model)
        )

    @staticmethod
    def _params(
        settings: Settings | None,
        *,
        agent_model: ModelConfig | None = None,
        mode_model: ModelConfig | None = None,
    ) -> ResolveModelParams:
        return ResolveModelParams(
            agent_model=agent_model,
            mode_model=mode_model,
            global_default_model=settings.ai.default_model if settings else None,
            additional_prefixes=settings.ai.additional_model_prefixes if settings else [],
        )

    async def _load_settings(self) -> Settings | None:
        try:
            return await self._settings_store.get_settings()
        except Exception as e:
            logger.warning(
                f"Failed to load global config for model resolution: {e}. Using system default."
            )
            return None

    async def _load_agent_model(self, name: str | None) -> ModelConfig | None:
        if not name:
            return None
        try:
            profile = await self._agent_store.get_agent(name)
        except Exception as e:
            logger.warning(
                f"Failed to load agent '{name}' for model resolution: {e}. Using fallback."
            )
            return None
        model = profile.model
        return ModelConfig.model_validate(model) if is_model_config(model) else None


def create_model_resolver_service(project_root: Path | None = None) -> ModelResolverService:
    """Service wired to the project's settings file and merged agent registry."""
    from agentroute.config import ProjectSettingsStore, get_project_root, get_settings_path
    from agentroute.registry.store import AgentProfileStore

    root = project_root or get_project_root()
    return ModelResolverService(
        settings_store=ProjectSettingsStore(get_settings_path(root)),
        agent_store=AgentProfileStore(project_root=root),
    )
