from __future__ import annotations

import dataclasses
import logging
import threading
from types import MappingProxyType, TracebackType
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type

from ini_guard.exceptions import (
    ConfigDuplicateError,
    ConfigRegistrationError,
    ConfigRequiredError,
    ConfigTypeMismatchError,
    ConfigValidationError,
)

from .document import DocumentProtocol, TypedDocument, kind_of, load_file, parse_ini, to_text
from .document.ini import PathType
from .params import ConfigValueType, ItemSpec, RegistrationTable
from .utils import normalize_group, redact_for_log
from .validation import ConfigValidator, matches_kind

logger = logging.getLogger("ini_guard.config")
logger.addHandler(logging.NullHandler())


class ConfigRegistry:
    """
    Typed view over an INI document.

    Every option the program reads is registered first with its group, item,
    value type, default and required flag. Registration checks the value the
    file holds against the declared type and fills the default when the file
    has none. Typed getters only succeed for registered items read with their
    own type.

    Registration problems never raise: they are logged, kept in ``errors`` and
    flip ``is_config_valid()`` to False for the lifetime of the loaded file.
    Call ensure_valid() once all options are registered to turn them into a
    ConfigValidationError.
    """

    def __init__(self, document: Optional[DocumentProtocol] = None) -> None:
        self.__lock = threading.RLock()
        self.__validator = ConfigValidator()
        self.__table = RegistrationTable()
        self.__document: DocumentProtocol = TypedDocument()
        self.__source: Optional[str] = None
        self.__initialized = False
        self.__valid = True
        self.__errors: List[ConfigRegistrationError] = []

        if document is not None:
            self._install(document, source="<document>")

    @classmethod
    def from_file(cls, path: PathType) -> "ConfigRegistry":
        registry = cls()
        registry.init_config(path)
        return registry

    @classmethod
    def from_string(cls, text: str, source: str = "<string>") -> "ConfigRegistry":
        registry = cls()
        registry.load_string(text, source=source)
        return registry

    # lifecycle
    def init_config(self, path: PathType) -> None:
        """
        Read and parse the INI file at ``path`` and make it the backing document.

        Raises ConfigFileReadError or ConfigParseError; on failure the current
        state is left untouched. Any earlier registrations are dropped on success.
        """
        document = load_file(path)
        with self.__lock:
            self._install(document, source=str(path))

    def load_string(self, text: str, source: str = "<string>") -> None:
        document = parse_ini(text, source=source)
        with self.__lock:
            self._install(document, source=source)

    def _install(self, document: DocumentProtocol, *, source: str) -> None:
        if not isinstance(document, DocumentProtocol):
            raise TypeError("document must provide get(group, key) and set(group, key, value)")
        self.__document = document
        self.__source = source
        self.__table.clear()
        self.__errors.clear()
        self.__valid = True
        self.__initialized = True
        logger.info("Config initialized from %s", source)

    def reset(self) -> None:
        """Drop the document, every registration and the recorded errors."""
        with self.__lock:
            self.__document = TypedDocument()
            self.__source = None
            self.__table.clear()
            self.__errors.clear()
            self.__valid = True
            self.__initialized = False
            logger.info("ConfigRegistry reset.")

    @property
    def initialized(self) -> bool:
        return self.__initialized

    @property
    def source(self) -> Optional[str]:
        return self.__source

    @property
    def document(self) -> DocumentProtocol:
        return self.__document

    @property
    def errors(self) -> Tuple[ConfigRegistrationError, ...]:
        with self.__lock:
            return tuple(self.__errors)

    # validity
    def is_config_valid(self) -> bool:
        with self.__lock:
            return self.__valid

    def ensure_valid(self) -> None:
        """Raise ConfigValidationError listing every registration error so far."""
        with self.__lock:
            if self.__valid:
                return
            errors: Dict[str, str] = {}
            for err in self.__errors:
                if err.key in errors:
                    errors[err.key] = f"{errors[err.key]}; {err.message}"
                else:
                    errors[err.key] = err.message
        raise ConfigValidationError(errors)

    def _record(self, error: ConfigRegistrationError) -> None:
        self.__errors.append(error)
        if self.__valid:
            logger.error("Registration error (config now invalid): %s", error)
        else:
            logger.error("Registration error: %s", error)
        self.__valid = False

    # registration table
    def check_type(self, group: str, item: str, value_type: ConfigValueType) -> bool:
        with self.__lock:
            return self.__validator.check_type(
                self.__document, normalize_group(group), item, value_type
            )

    def is_registered(self, group: str, item: str) -> bool:
        with self.__lock:
            return self.__table.has(normalize_group(group), item)

    def get_registered_type(self, group: str, item: str) -> ConfigValueType:
        with self.__lock:
            return self.__table.registered_type(normalize_group(group), item)

    def get_item_spec(self, group: str, item: str) -> Optional[ItemSpec]:
        with self.__lock:
            return self.__table.get(normalize_group(group), item)

    def registered_items(self) -> Tuple[Tuple[str, str], ...]:
        with self.__lock:
            return tuple((spec.group, spec.item) for spec in self.__table)

    def register(
        self,
        group: str,
        item: str,
        value_type: ConfigValueType,
        default: Any = None,
        required: bool = False,
        description: Optional[str] = None,
    ) -> bool:
        """
        Register ``item`` of ``group`` with a declared type.

        Returns True when the item is now tracked. A required item without a
        usable value is still tracked (True) but invalidates the config.
        """
        if value_type is ConfigValueType.UNDEFINED:
            raise ValueError("Cannot register an item with value_type UNDEFINED")
        group = normalize_group(group)
        spec = ItemSpec(
            group=group,
            item=item,
            value_type=value_type,
            default=default,
            required=required,
            description=description,
        )

        with self.__lock:
            if not self.__validator.check_type(self.__document, group, item, value_type):
                current = self.__document.get(group, item)
                self._record(
                    ConfigTypeMismatchError(
                        group,
                        item,
                        f"Declared {value_type.name} but the file holds "
                        f"{kind_of(current).name} value {redact_for_log(item, current)}.",
                    )
                )
                return False

            if self.__table.has(group, item):
                self._record(ConfigDuplicateError(group, item, "Item already registered."))
                return False

            try:
                default_value = self.__validator.coerce_default(spec)
            except ConfigTypeMismatchError as exc:
                self._record(exc)
                return False
            if default is not None:
                spec = dataclasses.replace(spec, default=default_value)
            self.__table.register(spec)

            file_value = self.__document.get(group, item)
            if file_value is None:
                self.__document.set(group, item, default_value)
                logger.debug(
                    "Default applied for [%s] %s = %s",
                    group,
                    item,
                    redact_for_log(item, default_value),
                )

            if required and self.__validator.is_missing(spec, file_value):
                self._record(ConfigRequiredError(group, item, "Required item has no value."))

            logger.debug("Registered [%s] %s as %s", group, item, value_type.name)
            return True

    def register_string(
        self, group: str, item: str, default: Optional[str] = None, required: bool = False
    ) -> bool:
        return self.register(group, item, ConfigValueType.STRING, default, required)

    def register_integer(
        self, group: str, item: str, default: Optional[int] = None, required: bool = False
    ) -> bool:
        return self.register(group, item, ConfigValueType.INTEGER, default, required)

    def register_float(
        self, group: str, item: str, default: Optional[float] = None, required: bool = False
    ) -> bool:
        return self.register(group, item, ConfigValueType.FLOAT, default, required)

    def register_boolean(
        self, group: str, item: str, default: Optional[bool] = None, required: bool = False
    ) -> bool:
        return self.register(group, item, ConfigValueType.BOOLEAN, default, required)

    def register_string_array(
        self,
        group: str,
        item: str,
        default: Optional[Sequence[str]] = None,
        required: bool = False,
    ) -> bool:
        return self.register(group, item, ConfigValueType.STRING_ARRAY, default, required)

    # typed access
    @staticmethod
    def _zero(value_type: ConfigValueType) -> Any:
        if value_type is ConfigValueType.STRING_ARRAY:
            return []
        return value_type.zero_value()

    @staticmethod
    def _convert(value: Any, value_type: ConfigValueType) -> Any:
        if value_type is ConfigValueType.STRING:
            return str(value)
        if value_type is ConfigValueType.INTEGER:
            return int(value)
        if value_type is ConfigValueType.FLOAT:
            return float(value)
        if value_type is ConfigValueType.BOOLEAN:
            return bool(value)
        if value_type is ConfigValueType.STRING_ARRAY:
            return [to_text(v) for v in value]
        raise ValueError(f"Cannot convert to {value_type.name}")

    def get(self, group: str, item: str, value_type: ConfigValueType) -> Tuple[Any, bool]:
        """
        Return ``(value, True)`` for a registered item read with its own type,
        ``(zero value, False)`` otherwise.
        """
        group = normalize_group(group)
        with self.__lock:
            registered = self.__table.registered_type(group, item)
            if registered is ConfigValueType.UNDEFINED:
                logger.debug("Get [%s] %s: not registered", group, item)
                return self._zero(value_type), False
            if registered is not value_type:
                logger.warning(
                    "Get [%s] %s as %s but it is registered as %s",
                    group,
                    item,
                    value_type.name,
                    registered.name,
                )
                return self._zero(value_type), False

            value = self.__document.get(group, item)
            if value is None or not matches_kind(value, value_type):
                logger.warning(
                    "Get [%s] %s: document value %r no longer matches %s",
                    group,
                    item,
                    value,
                    value_type.name,
                )
                return self._zero(value_type), False
            return self._convert(value, value_type), True

    def get_string(self, group: str, item: str) -> Tuple[str, bool]:
        return self.get(group, item, ConfigValueType.STRING)

    def get_integer(self, group: str, item: str) -> Tuple[int, bool]:
        return self.get(group, item, ConfigValueType.INTEGER)

    def get_float(self, group: str, item: str) -> Tuple[float, bool]:
        return self.get(group, item, ConfigValueType.FLOAT)

    def get_boolean(self, group: str, item: str) -> Tuple[bool, bool]:
        return self.get(group, item, ConfigValueType.BOOLEAN)

    def get_string_array(self, group: str, item: str) -> Tuple[List[str], bool]:
        return self.get(group, item, ConfigValueType.STRING_ARRAY)

    def snapshot(self) -> MappingProxyType:
        """
        Return group -> item -> value for every registered item, read-only.
        """
        with self.__lock:
            out: Dict[str, Dict[str, Any]] = {}
            for spec in self.__table:
                out.setdefault(spec.group, {})[spec.item] = self.__document.get(
                    spec.group, spec.item
                )
            return MappingProxyType({g: MappingProxyType(items) for g, items in out.items()})

    def __contains__(self, key: object) -> bool:
        """
        Allow ``(group, item) in registry`` to check registration.
        """
        if not (isinstance(key, tuple) and len(key) == 2):
            return False
        group, item = key
        return self.is_registered(group, item)

    def __len__(self) -> int:
        with self.__lock:
            return len(self.__table)

    def __repr__(self) -> str:
        with self.__lock:
            return (
                f"<ConfigRegistry source={self.__source!r} "
                f"registered={len(self.__table)} valid={self.__valid}>"
            )

    def __enter__(self) -> "ConfigRegistry":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        """
        Exit context manager, resetting the registry.
        """
        self.reset()
