from __future__ import annotations

from os import PathLike
from typing import Dict, Optional, Union


class ConfigError(Exception):
    """Base config exception."""


class ConfigFileReadError(ConfigError):
    """Raised when the configuration file cannot be read."""

    def __init__(self, path: Union[str, "PathLike[str]"], reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read config file {self.path!r}: {reason}")


class ConfigParseError(ConfigError):
    """Raised when the configuration text is not valid INI."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot parse config {source!r}: {reason}")


class ConfigAlreadyInitializedError(ConfigError):
    """Raised when the global config is initialized a second time."""


class ConfigNotInitializedError(ConfigError):
    """Raised when the global config is used before init_config()."""


class ConfigRegistrationError(ConfigError):
    """Base for registration failures. Recorded by the registry, not raised."""

    def __init__(self, group: str, item: str, message: str) -> None:
        self.group = group
        self.item = item
        self.message = message
        super().__init__(f"[{group}] {item}: {message}")

    @property
    def key(self) -> str:
        return f"{self.group}.{self.item}"


class ConfigTypeMismatchError(ConfigRegistrationError):
    """Declared type disagrees with the existing document value or the default."""


class ConfigDuplicateError(ConfigRegistrationError):
    """Raised when attempting to register a duplicate configuration item."""


class ConfigRequiredError(ConfigRegistrationError):
    """A required item has no value after defaulting."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for one or more items."""

    def __init__(
        self, errors: Dict[str, str], key: Optional[str] = None, value: object | None = None
    ) -> None:
        self.errors = errors
        self.key = key
        self.value = value
        msg = f"Validation errors: {errors}"
        if key is not None and value is not None:
            msg += f" (key: {key}, value: {value})"
        super().__init__(msg)
