"""
Process-wide convenience layer over a single ConfigRegistry.

Programs that only ever load one configuration file can call init_config()
once at start-up and use the free functions below. Everything else should
create and pass around its own ConfigRegistry.
"""

from __future__ import annotations

import logging
import threading
from typing import List, Optional, Sequence, Tuple

from ini_guard.exceptions import ConfigAlreadyInitializedError, ConfigNotInitializedError

from .config import ConfigRegistry
from .document.ini import PathType

logger = logging.getLogger("ini_guard.singleton")
logger.addHandler(logging.NullHandler())

_global_lock = threading.RLock()
_config: Optional[ConfigRegistry] = None


def init_config(path: PathType) -> None:
    global _config
    with _global_lock:
        if _config is not None:
            logger.error("init_config(%s) called but config is already initialized", path)
            raise ConfigAlreadyInitializedError(
                f"Config already initialized from {_config.source!r}"
            )
        # assign only after a successful load so a failed init can be retried
        _config = ConfigRegistry.from_file(path)


def reset_config() -> None:
    """Drop the global registry. Intended for test suites."""
    global _config
    with _global_lock:
        if _config is not None:
            _config.reset()
        _config = None


def is_initialized() -> bool:
    with _global_lock:
        return _config is not None


def get_config() -> ConfigRegistry:
    """Return the global registry, raising ConfigNotInitializedError before init_config()."""
    with _global_lock:
        config = _config
    if config is None:
        logger.error("Attempted to use the global config before init_config().")
        raise ConfigNotInitializedError("Config has not been initialized")
    return config


def is_config_valid() -> bool:
    return get_config().is_config_valid()


def register_string(
    group: str, item: str, default: Optional[str] = None, required: bool = False
) -> bool:
    return get_config().register_string(group, item, default, required)


def register_integer(
    group: str, item: str, default: Optional[int] = None, required: bool = False
) -> bool:
    return get_config().register_integer(group, item, default, required)


def register_float(
    group: str, item: str, default: Optional[float] = None, required: bool = False
) -> bool:
    return get_config().register_float(group, item, default, required)


def register_boolean(
    group: str, item: str, default: Optional[bool] = None, required: bool = False
) -> bool:
    return get_config().register_boolean(group, item, default, required)


def register_string_array(
    group: str, item: str, default: Optional[Sequence[str]] = None, required: bool = False
) -> bool:
    return get_config().register_string_array(group, item, default, required)


def get_string(group: str, item: str) -> Tuple[str, bool]:
    return get_config().get_string(group, item)


def get_integer(group: str, item: str) -> Tuple[int, bool]:
    return get_config().get_integer(group, item)


def get_float(group: str, item: str) -> Tuple[float, bool]:
    return get_config().get_float(group, item)


def get_boolean(group: str, item: str) -> Tuple[bool, bool]:
    return get_config().get_boolean(group, item)


def get_string_array(group: str, item: str) -> Tuple[List[str], bool]:
    return get_config().get_string_array(group, item)
