# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token matchers used by the dispatch loop, one per definition kind.

Each matcher looks at the token stream from a given index and either claims
the token(s) there or declines:

- `OptionMatcher`: `--long VALUE`, `--long=VALUE`, `-s VALUE`, `-sVALUE`,
  `-s=VALUE`. The value is always the next token when it is not attached,
  even if that token starts with a dash.
- `FlagMatcher`: `--long`, `-s`, and POSIX clusters such as `-abc` where every
  letter is a declared flag.
- `ArgMatcher`: converts exactly one token for one positional argument.

Option and flag matchers return `Matched`, `MatchedWithError` or None. They
never consume tokens or touch the state when they return None, and they only
update the state on `Matched`.
"""
from abc import ABC, abstractmethod
from typing import Sequence

from argwalk.definitions import Arg, Flag, Option
from argwalk.parse_state import Matched, MatchedWithError, MatchOutcome, ParseState


def _reason(error: Exception) -> str:
    return str(error) or type(error).__name__


def _is_switch_like(token: str) -> bool:
    return token.startswith("-") and token not in ("-", "--")


class Matcher(ABC):
    """Common interface of the option and flag matchers."""

    @abstractmethod
    def try_match(
        self,
        definitions: Sequence,
        state: ParseState,
        tokens: Sequence[str],
        index: int,
    ) -> MatchOutcome:
        """Try to consume `tokens[index:]` for one of `definitions`."""


class OptionMatcher(Matcher):
    """Matches value-bearing options."""

    def _split(
        self, token: str, by_form: dict[str, Option]
    ) -> tuple[Option | None, str | None]:
        """Return the option named by `token` and its attached value, if any."""
        if token.startswith("--"):
            form, sep, attached = token.partition("=")
            return by_form.get(form), attached if sep else None
        option = by_form.get(token[:2])
        rest = token[2:]
        if not rest:
            return option, None
        return option, rest[1:] if rest.startswith("=") else rest

    def try_match(
        self,
        definitions: Sequence[Option],
        state: ParseState,
        tokens: Sequence[str],
        index: int,
    ) -> MatchOutcome:
        token = tokens[index]
        if not _is_switch_like(token):
            return None
        by_form = {form: option for option in definitions for form in option.forms}
        option, raw_value = self._split(token, by_form)
        if option is None:
            return None

        next_index = index + 1
        if raw_value is None:
            if next_index >= len(tokens):
                return MatchedWithError(
                    f"missing value for option {option.human_name}", next_index
                )
            raw_value = tokens[next_index]
            next_index += 1

        try:
            value = option.parser(raw_value)
        except (ValueError, TypeError) as error:
            return MatchedWithError(
                f"invalid value {raw_value!r} for option {option.human_name}: "
                f"{_reason(error)}",
                next_index,
            )
        state.append_option(option.name, value)
        return Matched(next_index)


class FlagMatcher(Matcher):
    """Matches flags, including clusters of short flags."""

    def try_match(
        self,
        definitions: Sequence[Flag],
        state: ParseState,
        tokens: Sequence[str],
        index: int,
    ) -> MatchOutcome:
        token = tokens[index]
        if not _is_switch_like(token):
            return None
        by_form = {form: flag for flag in definitions for form in flag.forms}

        if token.startswith("--"):
            form, sep, _ = token.partition("=")
            flag = by_form.get(form)
            if flag is None:
                return None
            if sep:
                return MatchedWithError(
                    f"flag {flag.human_name} does not take a value", index + 1
                )
            state.increment_flag(flag.name)
            return Matched(index + 1)

        # POSIX cluster: -abc -> -a -b -c, all letters must be flags
        cluster = [by_form.get(f"-{char}") for char in token[1:]]
        if not cluster or any(flag is None for flag in cluster):
            return None
        for flag in cluster:
            assert flag is not None
            state.increment_flag(flag.name)
        return Matched(index + 1)


class ArgMatcher:
    """Matches exactly one token against one positional argument."""

    def parse(
        self,
        arg: Arg,
        state: ParseState,
        tokens: Sequence[str],
        index: int,
    ) -> tuple[str | None, int]:
        """
        Convert `tokens[index]` for `arg`.

        The token is consumed whether or not it converts.

        Returns:
            tuple[str | None, int]: The error message (None on success) and the
            index of the next unconsumed token.
        """
        raw_value = tokens[index]
        try:
            value = arg.parser(raw_value)
        except (ValueError, TypeError) as error:
            return (
                f"invalid value {raw_value!r} for argument {arg.human_name}: "
                f"{_reason(error)}",
                index + 1,
            )
        state.set_arg(arg.name, value)
        return None, index + 1
