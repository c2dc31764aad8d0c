"""Model resolution: pure cascade plus constants and models."""

from agentroute.model.constants import (
    CLAUDE_HAIKU_35,
    CLAUDE_OPUS_4,
    CLAUDE_SONNET_4,
    DEFAULT_MODEL,
    KNOWN_MODEL_PREFIXES,
    SYSTEM_DEFAULT_MODEL,
)
from agentroute.model.models import (
    ModelConfig,
    ModelSource,
    ResolvedModel,
    ResolveModelParams,
    is_model_config,
)
from agentroute.model.resolver import (
    format_unknown_model_warning,
    get_all_prefixes,
    is_known_model,
    resolve_model,
)

__all__ = [
    "CLAUDE_HAIKU_35",
    "CLAUDE_OPUS_4",
    "CLAUDE_SONNET_4",
    "DEFAULT_MODEL",
    "KNOWN_MODEL_PREFIXES",
    "ModelConfig",
    "ModelSource",
    "ResolveModelParams",
    "ResolvedModel",
    "SYSTEM_DEFAULT_MODEL",
    "format_unknown_model_warning",
    "get_all_prefixes",
    "is_known_model",
    "is_model_config",
    "resolve_model",
]
