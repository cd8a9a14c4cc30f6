from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ini_guard.document.protocol import DocumentProtocol
from ini_guard.document.values import ValueKind, kind_of
from ini_guard.exceptions import ConfigTypeMismatchError
from ini_guard.params.spec import ConfigValueType, ItemSpec

logger = logging.getLogger("ini_guard.validation")
logger.addHandler(logging.NullHandler())

_SCALAR_KINDS: Dict[ValueKind, ConfigValueType] = {
    ValueKind.STRING: ConfigValueType.STRING,
    ValueKind.INTEGER: ConfigValueType.INTEGER,
    ValueKind.FLOAT: ConfigValueType.FLOAT,
    ValueKind.BOOLEAN: ConfigValueType.BOOLEAN,
}


def matches_kind(value: Any, declared_type: ConfigValueType) -> bool:
    """True if a document value may be read back as ``declared_type``."""
    kind = kind_of(value)
    if kind is ValueKind.ARRAY:
        return declared_type is ConfigValueType.STRING_ARRAY
    return _SCALAR_KINDS[kind] is declared_type


class ConfigValidator:
    def check_type(
        self, document: DocumentProtocol, group: str, item: str, declared_type: ConfigValueType
    ) -> bool:
        current = document.get(group, item)
        if current is None:
            return True
        ok = matches_kind(current, declared_type)
        logger.debug(
            "check_type group=%r item=%r declared=%s current=%r -> %s",
            group,
            item,
            declared_type.name,
            current,
            ok,
        )
        return ok

    def coerce_default(self, spec: ItemSpec) -> Any:
        """
        Return the default of ``spec`` in its stored form.
        Raises ConfigTypeMismatchError if it does not fit the declared type.
        """
        value_type = spec.value_type
        default = spec.resolved_default()

        if value_type is ConfigValueType.STRING_ARRAY:
            if isinstance(default, (list, tuple)) and all(isinstance(v, str) for v in default):
                return tuple(default)
        elif value_type is ConfigValueType.FLOAT:
            if isinstance(default, (int, float)) and not isinstance(default, bool):
                return float(default)
        elif value_type is ConfigValueType.INTEGER:
            if isinstance(default, int) and not isinstance(default, bool):
                return default
        elif value_type is ConfigValueType.BOOLEAN:
            if isinstance(default, bool):
                return default
        elif value_type is ConfigValueType.STRING:
            if isinstance(default, str):
                return default

        raise ConfigTypeMismatchError(
            spec.group,
            spec.item,
            f"Default {default!r} does not fit declared type {value_type.name}.",
        )

    def is_missing(self, spec: ItemSpec, file_value: Optional[Any]) -> bool:
        """
        A required item is missing when the file gave nothing usable and the
        default is absent or the kind's zero value.
        """
        if file_value is not None:
            return file_value == "" or file_value == ()
        if spec.default is None:
            return True
        default = spec.default
        if spec.value_type is ConfigValueType.STRING_ARRAY:
            return len(default) == 0
        return bool(default == spec.value_type.zero_value())
