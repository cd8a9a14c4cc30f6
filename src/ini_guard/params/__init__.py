from __future__ import annotations

from .registry import RegistrationTable
from .spec import ConfigValueType, ItemSpec

__all__ = [
    "ConfigValueType",
    "ItemSpec",
    "RegistrationTable",
]
