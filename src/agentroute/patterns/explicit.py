"""Explicit agent directives.

Each pattern captures the requested agent id in group 1, e.g.
"backend-developer로 작업해", "use frontend-developer agent",
"as data-engineer". Word characters are ASCII only so a trailing
Korean particle is never captured as part of the id.
"""

from __future__ import annotations

import re

_FLAGS = re.IGNORECASE | re.ASCII

EXPLICIT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Korean: "~로 작업해", "~으로 해줘"
    re.compile(r"(\w+-\w+)(?:로|으로)\s*(?:작업|개발|해)", _FLAGS),
    re.compile(r"(?:use|using)\s+(\w+-\w+)(?:\s+agent)?", _FLAGS),
    re.compile(r"as\s+(\w+-\w+)", _FLAGS),
    re.compile(r"(\w+-\w+)\s+agent(?:로|으로)", _FLAGS),
)
