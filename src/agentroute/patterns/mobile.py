"""Mobile developer patterns.

Framework names (React Native, Flutter, SwiftUI) come before generic
"mobile app" phrasing. The category is evaluated last among the work
categories because phrases like "mobile develop" also show up when
people merely name the Mobile Developer agent.
"""

from __future__ import annotations

from agentroute.patterns.models import IntentPattern, intent

MOBILE_INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    intent(r"react.?native", 0.95, "React Native"),
    intent(r"flutter", 0.95, "Flutter"),
    intent(r"expo", 0.9, "Expo"),
    intent(r"swiftui", 0.95, "SwiftUI"),
    intent(r"jetpack\s*compose", 0.95, "Jetpack Compose"),
    intent(r"모바일\s*(앱|개발|화면)", 0.9, "Korean: mobile app"),
    intent(r"mobile\s*(app|develop|screen)", 0.9, "Mobile app"),
    intent(r"iOS\s*(앱|개발)", 0.9, "iOS app"),
    intent(r"android\s*(앱|개발)", 0.9, "Android app"),
)
