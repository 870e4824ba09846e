"""Core utility functions for the application"""

import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from leaddesk.core.config import config


def generate_record_id(strategy: Optional[str] = None, now: Optional[datetime] = None) -> str:
    """
    Generate a fresh record id.

    Args:
        strategy: "timestamp" (ISO-8601 UTC with milliseconds, e.g.
            "2024-05-01T10:15:30.123Z") or "uuid" (hex). Defaults to ID_STRATEGY.
        now: Clock override for the timestamp strategy

    Returns:
        str: The new id
    """
    strategy = strategy or config.id_strategy
    if strategy == "uuid":
        return uuid.uuid4().hex

    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def unique_record_id(
    existing_ids: Iterable[str],
    strategy: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    """
    Generate an id that does not collide with any of existing_ids.

    Two records created within the same millisecond get "-1", "-2", ...
    appended to the timestamp.
    """
    taken = set(existing_ids)
    base = generate_record_id(strategy, now)
    candidate = base
    suffix = 0
    while candidate in taken:
        suffix += 1
        candidate = f"{base}-{suffix}"
    return candidate


def humanize_field_name(name: str) -> str:
    """
    Turn a camelCase field name into a label.

    Example: "ownerEmail" -> "Owner Email"
    """
    words = []
    current = ""
    for char in name:
        if char.isupper() and current and not current[-1].isupper():
            words.append(current)
            current = char
        else:
            current += char
    if current:
        words.append(current)
    return " ".join(word[:1].upper() + word[1:] for word in words)
