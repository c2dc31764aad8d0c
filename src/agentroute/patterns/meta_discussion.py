"""Prompts that talk about agents rather than asking one to work.

"Mobile Developer가 매칭되었어" names an agent but is a report about
routing, not a mobile task. Matching any of these turns off intent
category matching for the request.
"""

from __future__ import annotations

import re

META_DISCUSSION_PATTERNS: tuple[re.Pattern[str], ...] = (
    # agent name followed by a Korean subject/object particle
    re.compile(
        r"(?:mobile|frontend|backend|data|platform|devops|ai-?ml).?(?:developer|engineer)"
        r"\s*(?:가|이|를|은|는|로|에|의|와|과)",
        re.IGNORECASE,
    ),
    re.compile(
        r"(?:agent|에이전트)\s*(?:매칭|호출|선택|resolution|matching|selection|추천|recommendation)",
        re.IGNORECASE,
    ),
    # "primary agent 선택 로직" is discussion, "primary agent resolver 코드 수정" is work
    re.compile(r"primary\s*agent\s*(?:선택|매칭|시스템|system)", re.IGNORECASE),
    re.compile(
        r"(?:agent|에이전트)\s*(?:활성화|activation|호출|invocation|파이프라인|pipeline)",
        re.IGNORECASE,
    ),
    re.compile(
        r"(?:agent|에이전트).{0,20}(?:버그|bug|문제|issue|오류|error|잘못|wrong)",
        re.IGNORECASE,
    ),
)
