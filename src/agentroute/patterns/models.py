"""Immutable pattern table types shared by every routing category."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class IntentPattern:
    """A prompt pattern with the confidence it carries when it matches."""

    pattern: re.Pattern[str]
    confidence: float
    description: str


@dataclass(frozen=True)
class ContextPattern:
    """A file path pattern pointing at the agent that usually owns such files."""

    pattern: re.Pattern[str]
    agent: str
    confidence: float


@dataclass(frozen=True)
class IntentCategory:
    """Ordered group of intent patterns routed to a single agent.

    ``name`` is the source tag reported on a match, ``label`` is the
    human readable category used in reasons.
    """

    name: str
    agent: str
    label: str
    patterns: tuple[IntentPattern, ...]

    def first_match(self, prompt: str) -> IntentPattern | None:
        for entry in self.patterns:
            if entry.pattern.search(prompt):
                return entry
        return None


def intent(
    regex: str, confidence: float, description: str, flags: int = re.IGNORECASE
) -> IntentPattern:
    return IntentPattern(re.compile(regex, flags), confidence, description)


def context(regex: str, agent: str, confidence: float) -> ContextPattern:
    return ContextPattern(re.compile(regex, re.IGNORECASE), agent, confidence)
