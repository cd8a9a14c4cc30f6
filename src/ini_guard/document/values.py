from __future__ import annotations

import re
from enum import Enum
from typing import Any, List, Tuple, Union

Scalar = Union[str, int, float, bool]
Value = Union[Scalar, Tuple[Scalar, ...]]

_INT_RE = re.compile(r"[-+]?\d+")
_FLOAT_RE = re.compile(r"[-+]?(?:\d+\.\d*|\.\d+)(?:[eE][-+]?\d+)?|[-+]?\d+[eE][-+]?\d+")
_BOOL_WORDS = {"true": True, "false": False}


class ValueKind(Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ARRAY = "array"


def kind_of(value: Any) -> ValueKind:
    # bool is a subclass of int, so it has to be matched first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    raise TypeError(f"Unsupported document value type {type(value)}")


def freeze_value(value: Any) -> Value:
    """Validate a document value and return its stored (immutable) form."""
    kind = kind_of(value)
    if kind is not ValueKind.ARRAY:
        return value
    frozen = tuple(value)
    for element in frozen:
        if kind_of(element) is ValueKind.ARRAY:
            raise TypeError("Nested arrays are not supported")
    return frozen


def _unquote(text: str) -> Tuple[str, bool]:
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1], True
    return text, False


def infer_scalar(text: str) -> Scalar:
    text = text.strip()
    text, quoted = _unquote(text)
    if quoted:
        return text
    lowered = text.lower()
    if lowered in _BOOL_WORDS:
        return _BOOL_WORDS[lowered]
    if _INT_RE.fullmatch(text):
        return int(text)
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    return text


def split_list(text: str) -> List[str]:
    """Split on commas and newlines that are outside double quotes."""
    parts: List[str] = []
    current: List[str] = []
    in_quotes = False
    for ch in text:
        if ch == '"':
            in_quotes = not in_quotes
        if ch in ",\n" and not in_quotes:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    parts.append("".join(current))
    return parts


def strip_inline_comment(line: str) -> str:
    """Cut a ``#`` or ``;`` comment that starts a line or follows whitespace, outside quotes."""
    in_quotes = False
    for i, ch in enumerate(line):
        if ch == '"':
            in_quotes = not in_quotes
        elif ch in "#;" and not in_quotes and (i == 0 or line[i - 1].isspace()):
            return line[:i]
    return line


def infer_value(raw: str) -> Value:
    """Turn the raw text of an INI value into a typed document value."""
    text = "\n".join(strip_inline_comment(line) for line in raw.split("\n"))
    parts = split_list(text.strip())
    if len(parts) == 1:
        return infer_scalar(parts[0])
    return tuple(infer_scalar(p) for p in parts if p.strip())


def to_text(value: Scalar) -> str:
    kind = kind_of(value)
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.FLOAT:
        return repr(value)
    if kind is ValueKind.INTEGER or kind is ValueKind.STRING:
        return str(value)
    raise TypeError("Arrays have no scalar text form")


def _render_scalar(value: Scalar) -> str:
    text = to_text(value)
    if isinstance(value, str):
        needs_quotes = (
            infer_scalar(text) != value
            or any(ch in text for ch in ',"\n')
            or text != text.strip()
            or strip_inline_comment(text) != text
        )
        if needs_quotes:
            return f'"{text}"'
    return text


def render_value(value: Value) -> str:
    """Inverse of infer_value for everything infer_value can produce."""
    if kind_of(value) is ValueKind.ARRAY:
        elements = [_render_scalar(v) for v in value]  # type: ignore[union-attr]
        if not elements:
            return ","
        if len(elements) == 1:
            return elements[0] + ","
        return ",".join(elements)
    return _render_scalar(value)  # type: ignore[arg-type]
