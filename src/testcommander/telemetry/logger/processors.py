# src/testcommander/telemetry/logger/processors.py

"""
Custom structlog processors.
"""

from structlog.typing import EventDict, WrappedLogger

LEVEL_EMOJIS: dict[str, str] = {
    "debug": "🐛",
    "info": "ℹ️",
    "warning": "⚠️",
    "error": "❌",
    "critical": "💥",
}
# Keys added by stdlib integration that only clutter console output.
INTERNAL_KEYS = ("_record", "_from_structlog")


def add_emoji_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefixes the event message with an emoji matching its level."""
    level = str(event_dict.get("level", method_name)).lower()
    emoji = event_dict.pop("emoji", None) or LEVEL_EMOJIS.get(level)
    event = event_dict.get("event")
    if emoji and isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    for key in INTERNAL_KEYS:
        event_dict.pop(key, None)
    return event_dict

