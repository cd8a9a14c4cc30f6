from __future__ import annotations

from typing import Optional

__all__ = ["DEFAULT_GROUP", "normalize_group", "redact_for_log"]

DEFAULT_GROUP = "DEFAULT"

_SECRET_MARKERS = ("secret", "password", "passwd", "token", "api_key", "apikey")


def normalize_group(group: Optional[str]) -> str:
    return group if group else DEFAULT_GROUP


def redact_for_log(item: str, value: object) -> str:
    """Redact likely secrets in logs."""
    lowered = item.lower()
    if any(s in lowered for s in _SECRET_MARKERS):
        return "***"
    try:
        return repr(value)
    except Exception:
        return "<unreprable>"
