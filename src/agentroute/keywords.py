"""Leading mode keyword parsing (PLAN / ACT / EVAL and localized forms)."""

from __future__ import annotations

from pydantic import BaseModel, Field

from agentroute.agents import MODES

# Stored uppercase; CJK keys match exactly, Latin keys case-insensitively.
LOCALIZED_KEYWORD_MAP: dict[str, str] = {
    "계획": "PLAN",
    "실행": "ACT",
    "평가": "EVAL",
    "計画": "PLAN",
    "実行": "ACT",
    "評価": "EVAL",
    "计划": "PLAN",
    "执行": "ACT",
    "评估": "EVAL",
    "PLANIFICAR": "PLAN",
    "ACTUAR": "ACT",
    "EVALUAR": "EVAL",
}

DEFAULT_MODE = "PLAN"


class ParsedMode(BaseModel):
    mode: str
    prompt: str
    warnings: list[str] = Field(default_factory=list)


def keyword_to_mode(word: str) -> str | None:
    upper = word.upper()
    if upper in MODES:
        return upper
    return LOCALIZED_KEYWORD_MAP.get(word) or LOCALIZED_KEYWORD_MAP.get(upper)


def parse_mode(prompt: str, default_mode: str = DEFAULT_MODE) -> ParsedMode:
    """Split a leading mode keyword off the prompt.

    >>> parse_mode("ACT add a login form").mode
    'ACT'
    """
    trimmed = prompt.strip()
    parts = trimmed.split()
    first = parts[0] if parts else ""

    mode = keyword_to_mode(first) if first else None
    if mode is None:
        return ParsedMode(
            mode=default_mode,
            prompt=trimmed,
            warnings=[f"No keyword found, defaulting to {default_mode}"],
        )

    warnings: list[str] = []
    if len(parts) > 1 and keyword_to_mode(parts[1]) is not None:
        warnings.append("Multiple keywords found, using first")
    rest = trimmed[len(first) :].strip()
    if not rest:
        warnings.append("No prompt content after keyword")
    return ParsedMode(mode=mode, prompt=rest, warnings=warnings)
