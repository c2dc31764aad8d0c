"""Model id constants. Update when new model versions ship."""

CLAUDE_OPUS_4 = "claude-opus-4-20250514"
CLAUDE_SONNET_4 = "claude-sonnet-4-20250514"
# Not recommended for coding tasks.
CLAUDE_HAIKU_35 = "claude-haiku-3-5-20241022"

DEFAULT_MODEL = CLAUDE_SONNET_4
SYSTEM_DEFAULT_MODEL = DEFAULT_MODEL

# Prefix matching lets future dated releases count as known.
KNOWN_MODEL_PREFIXES: tuple[str, ...] = (
    "claude-opus-4",
    "claude-sonnet-4",
    "claude-sonnet-3",
    "claude-haiku-3",
)
