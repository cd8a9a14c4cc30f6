"""
ini_guard: typed registration and access for INI configuration files.

- Register every option with a group, item, value type, default and required flag.
- Values found in the file are checked against the declared type at registration.
- Defaults fill in whatever the file leaves out.
- Typed getters return ``(value, success)`` and never raise for a registered item.
- Registration problems are collected and reported through is_config_valid().
"""

from __future__ import annotations

from ini_guard.config import ConfigRegistry
from ini_guard.document import DocumentProtocol, TypedDocument, load_file, parse_ini
from ini_guard.exceptions import (
    ConfigAlreadyInitializedError,
    ConfigDuplicateError,
    ConfigError,
    ConfigFileReadError,
    ConfigNotInitializedError,
    ConfigParseError,
    ConfigRegistrationError,
    ConfigRequiredError,
    ConfigTypeMismatchError,
    ConfigValidationError,
)
from ini_guard.params import ConfigValueType, ItemSpec
from ini_guard.singleton import (
    get_boolean,
    get_config,
    get_float,
    get_integer,
    get_string,
    get_string_array,
    init_config,
    is_config_valid,
    register_boolean,
    register_float,
    register_integer,
    register_string,
    register_string_array,
    reset_config,
)

__all__ = [
    "ConfigRegistry",
    "ConfigValueType",
    "ItemSpec",
    "TypedDocument",
    "DocumentProtocol",
    "load_file",
    "parse_ini",
    "ConfigError",
    "ConfigFileReadError",
    "ConfigParseError",
    "ConfigAlreadyInitializedError",
    "ConfigNotInitializedError",
    "ConfigRegistrationError",
    "ConfigTypeMismatchError",
    "ConfigDuplicateError",
    "ConfigRequiredError",
    "ConfigValidationError",
    "init_config",
    "reset_config",
    "get_config",
    "is_config_valid",
    "register_string",
    "register_integer",
    "register_float",
    "register_boolean",
    "register_string_array",
    "get_string",
    "get_integer",
    "get_float",
    "get_boolean",
    "get_string_array",
]
