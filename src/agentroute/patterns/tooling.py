"""Tooling engineer patterns: config files, build tools, package management.

Specific config file names come before generic "build settings"
phrasing, so "Fix tsconfig.json error" reports the TypeScript entry.
"""

from __future__ import annotations

from agentroute.patterns.models import IntentPattern, intent

TOOLING_INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    intent(r"codingbuddy\.config", 0.98, "CodingBuddy config"),
    intent(r"tsconfig.*\.json", 0.95, "TypeScript config"),
    intent(r"eslint", 0.95, "ESLint config"),
    intent(r"prettier", 0.95, "Prettier config"),
    intent(r"stylelint", 0.95, "Stylelint config"),
    # build tools
    intent(r"vite\.config", 0.95, "Vite config"),
    intent(r"next\.config", 0.95, "Next.js config"),
    intent(r"webpack", 0.9, "Webpack config"),
    intent(r"rollup\.config", 0.9, "Rollup config"),
    # package management
    intent(r"package\.json", 0.9, "Package.json"),
    intent(r"yarn\.lock|pnpm-lock|package-lock", 0.85, "Lock files"),
    intent(r"\.config\.(js|ts|mjs|cjs|json)$", 0.85, "Config file extension"),
    intent(r"설정\s*(파일|변경|수정)", 0.85, "Korean: config file"),
    intent(r"빌드\s*(설정|도구|환경)", 0.85, "Korean: build config"),
    intent(r"패키지\s*(관리|설치|업데이트|의존성)", 0.85, "Korean: package management"),
    intent(r"린터|린트\s*설정", 0.85, "Korean: linter config"),
)
