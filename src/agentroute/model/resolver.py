"""Pure four-level model resolution: agent > mode > global > system."""

from __future__ import annotations

from collections.abc import Sequence

from agentroute.model.constants import KNOWN_MODEL_PREFIXES, SYSTEM_DEFAULT_MODEL
from agentroute.model.models import ModelConfig, ModelSource, ResolvedModel, ResolveModelParams


def get_all_prefixes(additional_prefixes: Sequence[str] | None = None) -> tuple[str, ...]:
    if not additional_prefixes:
        return KNOWN_MODEL_PREFIXES
    return (*KNOWN_MODEL_PREFIXES, *additional_prefixes)


def is_known_model(model_id: str, additional_prefixes: Sequence[str] | None = None) -> bool:
    return any(model_id.startswith(p) for p in get_all_prefixes(additional_prefixes))


def format_unknown_model_warning(
    model_id: str, additional_prefixes: Sequence[str] | None = None
) -> str:
    prefixes = ", ".join(get_all_prefixes(additional_prefixes))
    return f'Unknown model ID: "{model_id}". Known prefixes: {prefixes}'


def _preferred(config: ModelConfig | None) -> str | None:
    if config is not None and config.preferred:
        return config.preferred
    return None


def resolve_model(params: ResolveModelParams) -> ResolvedModel:
    """Pick the model from the first configured level.

    A configured but unrecognized model id is still returned, with a
    warning attached. Only an empty cascade yields the system default.
    """
    levels: list[tuple[str | None, ModelSource]] = [
        (_preferred(params.agent_model), ModelSource.AGENT),
        (_preferred(params.mode_model), ModelSource.MODE),
        (params.global_default_model or None, ModelSource.GLOBAL),
    ]
    for model, source in levels:
        if model:
            break
    else:
        return ResolvedModel(model=SYSTEM_DEFAULT_MODEL, source=ModelSource.SYSTEM)

    warning = None
    if not is_known_model(model, params.additional_prefixes):
        warning = format_unknown_model_warning(model, params.additional_prefixes)
    return ResolvedModel(model=model, source=source, warning=warning)
