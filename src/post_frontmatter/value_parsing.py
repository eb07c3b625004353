"""Decoding and formatting of front matter values."""

from __future__ import annotations

import logging
import math
import re
import tomllib
from datetime import date
from typing import Any

from post_frontmatter.models.post import MetadataValue


logger = logging.getLogger(__name__)

# Tokens that look like a date but that TOML rejects, e.g. 2019-02-30 or a time without seconds.
DATE_SHAPE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[Tt ][0-9:.+\-Zz]*)?$")

_REVERSE_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r"}


class UnsupportedValueError(ValueError):
    """The assignment is valid TOML but its value is outside the post metadata types."""


def coerce_value(value: Any) -> MetadataValue:
    if isinstance(value, (str, bool, int, float, date)):
        return value
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return tuple(value)
    if isinstance(value, list):
        raise UnsupportedValueError("lists may only hold strings")
    raise UnsupportedValueError(f"unsupported {type(value).__name__} value")


def decode_assignment(chunk: str, key: str) -> MetadataValue:
    """
    Decode one `key = value` statement (possibly a multi-line array) with tomllib.
    Date-shaped tokens that TOML rejects are kept as strings.
    Raises tomllib.TOMLDecodeError for invalid TOML and UnsupportedValueError
    for values outside the metadata types.
    """
    try:
        document = tomllib.loads(chunk)
    except tomllib.TOMLDecodeError:
        raw = chunk.split("=", 1)[1].split("#", 1)[0].strip()
        if "\n" not in chunk and DATE_SHAPE_RE.match(raw):
            logger.warning("Keeping invalid date %r as a string", raw)
            return raw
        raise
    return coerce_value(document[key])


def quote_string(value: str) -> str:
    chars: list[str] = []
    for ch in value:
        if ch in _REVERSE_ESCAPES:
            chars.append(_REVERSE_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            chars.append(f"\\u{ord(ch):04X}")
        else:
            chars.append(ch)
    return "\"" + "".join(chars) + "\""


def format_value(value: MetadataValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "nan"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        return repr(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        return quote_string(value)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(quote_string(item) for item in value) + "]"
    raise TypeError(f"Cannot format metadata value of type {type(value).__name__}.")
