# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseResult` and the read-only accessors that project a `ParseState`
onto final values.

Accessor rules:
- `get_argument`: the parsed value, or None when the argument was not given.
- `get_flag`: the occurrence count for `multiple` flags (0 when absent),
  otherwise True/False.
- `get_option`: every value in encounter order for `multiple` options
  (empty list when absent), otherwise the most recently matched value or None.

These are pure functions of the state and the definition; the result
assembler uses the same functions, so a `ParseResult` can always be
reproduced from the state it was built from. Code holding only a
`ParseResult` reads values with `result[name]` or `result.as_dict()`.
"""
from dataclasses import dataclass, field
from typing import Any

from argwalk.argument_kind import ArgumentKind
from argwalk.definitions import Arg, Flag, Option
from argwalk.parse_state import ParseState


def get_argument(state: ParseState, arg: Arg) -> Any:
    return state.get((ArgumentKind.ARG, arg.name))


def get_flag(state: ParseState, flag: Flag) -> bool | int:
    count = state.get((ArgumentKind.FLAG, flag.name), 0)
    if flag.multiple:
        return count
    return count > 0


def get_option(state: ParseState, option: Option) -> Any:
    values = state.get((ArgumentKind.OPTION, option.name), [])
    if option.multiple:
        return list(values)
    return values[-1] if values else None


@dataclass
class ParseResult:
    """
    Structured outcome of a successful parse.

    Attributes:
        args (dict[str, Any]): Positional argument values by name.
        flags (dict[str, bool | int]): Flag values by name.
        options (dict[str, Any]): Option values by name.
        unknown (list[str]): Tokens that matched nothing, in original order.
    """

    args: dict[str, Any] = field(default_factory=dict)
    flags: dict[str, bool | int] = field(default_factory=dict)
    options: dict[str, Any] = field(default_factory=dict)
    unknown: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        """Merge args, flags and options into one name -> value mapping."""
        return {**self.args, **self.flags, **self.options}

    def __getitem__(self, name: str) -> Any:
        for section in (self.args, self.flags, self.options):
            if name in section:
                return section[name]
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(name in section for section in (self.args, self.flags, self.options))
