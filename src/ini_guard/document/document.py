from __future__ import annotations

import logging
from copy import deepcopy
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from .values import Value, freeze_value, render_value

logger = logging.getLogger("ini_guard.document")
logger.addHandler(logging.NullHandler())


class TypedDocument:
    """
    Ordered (group, key) -> value store backing a ConfigRegistry.

    Values are str, int, float, bool or a tuple of those. Lists are frozen
    into tuples on the way in.
    """

    def __init__(self, data: Optional[Mapping[str, Mapping[str, Any]]] = None) -> None:
        self._groups: Dict[str, Dict[str, Value]] = {}
        if data:
            for group, items in data.items():
                for key, value in items.items():
                    self.set(group, key, value)

    def get(self, group: str, key: str) -> Optional[Value]:
        return self._groups.get(group, {}).get(key)

    def has(self, group: str, key: str) -> bool:
        return key in self._groups.get(group, {})

    def set(self, group: str, key: str, value: Any) -> None:
        frozen = freeze_value(value)
        items = self._groups.setdefault(group, {})
        logger.debug(
            "Document.set group=%r key=%r replaced=%s value=%r", group, key, key in items, frozen
        )
        items[key] = frozen

    def add_group(self, group: str) -> None:
        self._groups.setdefault(group, {})

    def groups(self) -> Tuple[str, ...]:
        return tuple(self._groups.keys())

    def items(self, group: str) -> Tuple[Tuple[str, Value], ...]:
        return tuple(self._groups.get(group, {}).items())

    def to_dict(self) -> MappingProxyType:
        return MappingProxyType(
            {group: MappingProxyType(dict(items)) for group, items in self._groups.items()}
        )

    def to_ini(self) -> str:
        """Render the document back to INI text."""
        blocks = []
        for group, items in self._groups.items():
            lines = [f"[{group}]"]
            lines.extend(f"{key} = {render_value(value)}" for key, value in items.items())
            blocks.append("\n".join(lines) + "\n")
        return "\n".join(blocks)

    def copy(self) -> "TypedDocument":
        clone = TypedDocument()
        clone._groups = deepcopy(self._groups)
        return clone

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._groups.keys()))

    def __len__(self) -> int:
        return sum(len(items) for items in self._groups.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedDocument):
            return False
        return self._groups == other._groups

    def __repr__(self) -> str:
        return f"<TypedDocument groups={len(self._groups)} items={len(self)}>"
