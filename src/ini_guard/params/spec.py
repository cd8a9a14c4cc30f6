from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ConfigValueType(Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING_ARRAY = "string_array"
    UNDEFINED = "undefined"

    def zero_value(self) -> Any:
        """Value returned by getters on failure, and written when no default is given."""
        if self is ConfigValueType.STRING:
            return ""
        if self is ConfigValueType.INTEGER:
            return 0
        if self is ConfigValueType.FLOAT:
            return 0.0
        if self is ConfigValueType.BOOLEAN:
            return False
        if self is ConfigValueType.STRING_ARRAY:
            return ()
        raise ValueError("UNDEFINED has no zero value")


@dataclass(frozen=True)
class ItemSpec:
    group: str
    item: str
    value_type: ConfigValueType
    default: Any = None
    required: bool = False
    description: Optional[str] = None

    @property
    def key(self) -> str:
        return f"{self.group}.{self.item}"

    def resolved_default(self) -> Any:
        if self.default is None:
            return self.value_type.zero_value()
        return self.default

    def to_mapping(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "default": self.resolved_default(),
            "value_type": self.value_type,
            "required": self.required,
        }
        if self.description:
            d["description"] = self.description
        return d

    def __getitem__(self, item: str) -> Any:
        return self.to_mapping()[item]
