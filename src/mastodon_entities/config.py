import logging
import os


def get_log_level() -> int:
    name = os.getenv("MASTODON_ENTITIES_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in MASTODON_ENTITIES_LOG_LEVEL: {name!r}")
    return level


def get_indent() -> int | None:
    """Indentation for pretty-printed JSON, ``None`` for compact output."""
    raw = os.getenv("MASTODON_ENTITIES_INDENT", "").strip()
    if not raw:
        return None
    try:
        indent = int(raw)
    except ValueError:
        raise ValueError(f"MASTODON_ENTITIES_INDENT must be an integer, got {raw!r}") from None
    return indent or None
