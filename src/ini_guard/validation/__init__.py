from __future__ import annotations

from .base import ConfigValidator, matches_kind

__all__ = ["ConfigValidator", "matches_kind"]
