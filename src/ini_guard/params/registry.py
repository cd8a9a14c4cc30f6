from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional, Tuple

from ini_guard.exceptions import ConfigDuplicateError

from .spec import ConfigValueType, ItemSpec

logger = logging.getLogger("ini_guard.params")
logger.addHandler(logging.NullHandler())


class RegistrationTable:
    """Declared types per (group, item). Entries are never overwritten."""

    def __init__(self) -> None:
        self._groups: Dict[str, Dict[str, ItemSpec]] = {}
        logger.debug("RegistrationTable initialized id=%s", hex(id(self)))

    def register(self, spec: ItemSpec) -> None:
        logger.debug(
            "Register called: group=%r item=%r value_type=%s required=%s",
            spec.group,
            spec.item,
            spec.value_type.name,
            spec.required,
        )
        if spec.value_type is ConfigValueType.UNDEFINED:
            raise ValueError("Cannot register an item with value_type UNDEFINED")
        items = self._groups.setdefault(spec.group, {})
        if spec.item in items:
            logger.error("Register failed: %r already registered", spec.key)
            raise ConfigDuplicateError(spec.group, spec.item, "Item already registered.")
        items[spec.item] = spec
        logger.debug(
            "Register complete: groups=%d items=%d",
            len(self._groups),
            len(self),
        )

    def get(self, group: str, item: str) -> Optional[ItemSpec]:
        return self._groups.get(group, {}).get(item)

    def has(self, group: str, item: str) -> bool:
        found = self.get(group, item) is not None
        logger.debug("Has(%r, %r) -> %s", group, item, found)
        return found

    def registered_type(self, group: str, item: str) -> ConfigValueType:
        spec = self.get(group, item)
        if spec is None:
            return ConfigValueType.UNDEFINED
        return spec.value_type

    def groups(self) -> Tuple[str, ...]:
        return tuple(self._groups.keys())

    def items(self, group: str) -> Tuple[str, ...]:
        return tuple(self._groups.get(group, {}).keys())

    def all_specs(self) -> Tuple[ItemSpec, ...]:
        return tuple(iter(self))

    def clear(self) -> None:
        logger.debug("Clearing registration table: groups=%d items=%d", len(self._groups), len(self))
        self._groups.clear()

    def __iter__(self) -> Iterator[ItemSpec]:
        for items in self._groups.values():
            yield from items.values()

    def __len__(self) -> int:
        return sum(len(items) for items in self._groups.values())
