from __future__ import annotations

from .document import TypedDocument
from .ini import load_file, parse_ini, read_file
from .protocol import DocumentProtocol
from .values import ValueKind, infer_value, kind_of, render_value, to_text

__all__ = [
    "DocumentProtocol",
    "TypedDocument",
    "ValueKind",
    "infer_value",
    "kind_of",
    "load_file",
    "parse_ini",
    "read_file",
    "render_value",
    "to_text",
]
