"""
Reading and parsing INI text into a TypedDocument.

Groups and keys keep their case and ``[DEFAULT]`` is an ordinary group:
configparser's own defaults section is moved out of the way so nothing
propagates between groups.
"""

from __future__ import annotations

import configparser
import logging
from os import PathLike
from pathlib import Path
from typing import Union

from ini_guard.exceptions import ConfigFileReadError, ConfigParseError

from .document import TypedDocument
from .values import infer_value

logger = logging.getLogger("ini_guard.document")
logger.addHandler(logging.NullHandler())

_PARSER_DEFAULT_SECTION = "\x00ini_guard_unused\x00"

PathType = Union[str, "PathLike[str]"]


def _make_parser() -> configparser.RawConfigParser:
    parser = configparser.RawConfigParser(
        default_section=_PARSER_DEFAULT_SECTION,
        strict=True,
        empty_lines_in_values=False,
        interpolation=None,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def read_file(path: PathType, encoding: str = "utf-8") -> str:
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read config file %s: %s", path, exc)
        raise ConfigFileReadError(path, str(exc)) from exc


def parse_ini(text: str, source: str = "<string>") -> TypedDocument:
    parser = _make_parser()
    try:
        parser.read_string(text, source=source)
    except configparser.Error as exc:
        logger.error("Failed to parse config %s: %s", source, exc)
        raise ConfigParseError(source, str(exc)) from exc

    document = TypedDocument()
    for section in parser.sections():
        document.add_group(section)
        for key, raw in parser.items(section):
            document.set(section, key, infer_value(raw or ""))
    logger.debug("Parsed %s: groups=%d items=%d", source, len(document.groups()), len(document))
    return document


def load_file(path: PathType, encoding: str = "utf-8") -> TypedDocument:
    return parse_ini(read_file(path, encoding=encoding), source=str(path))
