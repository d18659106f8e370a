# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Built-in value parsers and parser resolution for Argwalk.

A value parser is any callable taking the raw token string and returning the
typed value. It signals failure by raising `ValueError` (or `TypeError`); the
exception message becomes the reason shown in the match-time error.

Built-ins:
- parse_integer: "42" → 42
- parse_float: "3.5" → 3.5
- parse_string: returned unchanged
- parse_boolean: "yes" / "off" / "1" ... → bool
- parse_datetime: any format understood by `dateutil`

`resolve_parser()` turns the declarative `parser` attribute of an argument or
option (a name, a builtin type, a callable or None) into a callable.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Callable

from dateutil import parser as date_parser

from argwalk.exceptions import SpecError

ValueParser = Callable[[str], Any]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_integer(value: str) -> int:
    """Parse a base-10 integer of ASCII digits, allowing a leading sign."""
    value = value.strip()
    if not _INTEGER_RE.fullmatch(value):
        raise ValueError("expected an integer")
    return int(value, 10)


def parse_float(value: str) -> float:
    """Parse a plain decimal number; "nan", "inf" and digit separators are rejected."""
    value = value.strip()
    if not _FLOAT_RE.fullmatch(value):
        raise ValueError("expected a float")
    return float(value)


def parse_string(value: str) -> str:
    return value


def parse_boolean(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts 'true', 'yes', '1', 'on' and 'false', 'no', '0', 'off' in any case.
    Anything else is rejected rather than guessed.
    """
    normalized = value.strip().lower()
    if normalized in {"true", "t", "1", "yes", "y", "on"}:
        return True
    elif normalized in {"false", "f", "0", "no", "n", "off"}:
        return False
    raise ValueError("expected a boolean (true/false, yes/no, on/off, 1/0)")


def parse_datetime(value: str) -> datetime:
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError("expected a date/time") from error


BUILTIN_PARSERS: dict[str, ValueParser] = {
    "integer": parse_integer,
    "float": parse_float,
    "string": parse_string,
    "boolean": parse_boolean,
    "datetime": parse_datetime,
}

_ALIASES: dict[str, str] = {
    "int": "integer",
    "str": "string",
    "bool": "boolean",
    "date": "datetime",
}

_TYPE_PARSERS: dict[type, str] = {
    int: "integer",
    float: "float",
    str: "string",
    bool: "boolean",
    datetime: "datetime",
}


def resolve_parser(parser: str | type | ValueParser | None) -> ValueParser:
    """
    Resolve a declarative parser reference into a value parser callable.

    Args:
        parser: A built-in name ("integer", "float", "string", ...), one of the
            builtin types `int`, `float`, `str`, `bool`, `datetime`, any other
            callable, or None for the string parser.

    Returns:
        ValueParser: The callable used to convert raw tokens.

    Raises:
        SpecError: If the reference names no known parser and is not callable.
    """
    if parser is None:
        return parse_string
    if isinstance(parser, str):
        normalized = parser.strip().lower()
        name = _ALIASES.get(normalized, normalized)
        if name not in BUILTIN_PARSERS:
            valid = ", ".join(BUILTIN_PARSERS)
            raise SpecError(f"Unknown parser '{parser}'. Must be one of: {valid}")
        return BUILTIN_PARSERS[name]
    if isinstance(parser, type) and parser in _TYPE_PARSERS:
        return BUILTIN_PARSERS[_TYPE_PARSERS[parser]]
    if callable(parser):
        return parser
    raise SpecError(f"parser must be a name or a callable, got {type(parser).__name__}")
