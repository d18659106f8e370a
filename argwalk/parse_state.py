# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parse state and matcher outcome types used while walking a command line.

Contents:
- `ParseState`: call-local mapping from `(ArgumentKind, name)` to the value
  accumulated so far for that definition.
- `Matched` / `MatchedWithError`: the two "claimed" outcomes a matcher can
  report to the dispatch loop. A matcher that does not apply returns None.

A `ParseState` is created fresh for every parse call and never outlives it.
"""
from dataclasses import dataclass
from typing import Any

from argwalk.argument_kind import ArgumentKind


class ParseState(dict):
    """
    Accumulated values keyed by `(kind, name)`.

    - Argument keys hold the single parsed value.
    - Flag keys hold the number of times the flag was matched.
    - Option keys hold the parsed values in the order they were matched.
    """

    def set_arg(self, name: str, value: Any) -> None:
        key = (ArgumentKind.ARG, name)
        assert key not in self, f"argument '{name}' is already set"
        self[key] = value

    def increment_flag(self, name: str) -> int:
        key = (ArgumentKind.FLAG, name)
        self[key] = self.get(key, 0) + 1
        return self[key]

    def append_option(self, name: str, value: Any) -> None:
        self.setdefault((ArgumentKind.OPTION, name), []).append(value)

    def has(self, kind: ArgumentKind, name: str) -> bool:
        return (kind, name) in self


@dataclass(frozen=True)
class Matched:
    """The matcher consumed tokens up to `next_index` and updated the state."""

    next_index: int


@dataclass(frozen=True)
class MatchedWithError:
    """The matcher consumed tokens up to `next_index` but reported an error."""

    error: str
    next_index: int


MatchOutcome = Matched | MatchedWithError | None
