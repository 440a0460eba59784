# src/shelldiff/telemetry/logger/processors.py

import logging
from typing import Any

LOG_EMOJIS = {
    logging.DEBUG: "🐛",
    logging.INFO: "ℹ️",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "💥",
}

# Keys that are noise in console output once rendered.
EXTRA_KEYS = ("_record", "_from_structlog")


def add_emoji_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Prefix the event with an emoji for its level (or an explicit `emoji` key)."""
    emoji = event_dict.pop("emoji", None)
    if emoji is None:
        level_name = str(event_dict.get("level", method_name)).upper()
        emoji = LOG_EMOJIS.get(logging.getLevelName(level_name), "➡️")
    event = event_dict.get("event")
    if isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    for key in EXTRA_KEYS:
        event_dict.pop(key, None)
    return event_dict

# 🔼⚙️
