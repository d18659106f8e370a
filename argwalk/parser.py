# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the Argwalk parsing pipeline: a greedy, priority-ordered
walk over the command line followed by two validation passes and assembly of
the typed result.

Pipeline:
    command line
      → input check (list of strings)
      → dispatch()            accumulate state, match errors, unknown tokens
      → validate_unknown()    reject unknown tokens unless allowed
      → validate_required()   report missing required args / options
      → assemble()            ParseResult, or ParseError with every error

Dispatch order for each token:
1. `--` (when `parse_double_dash` is enabled) switches the rest of the command
   line to positional-only interpretation.
2. The option matcher.
3. The flag matcher.
4. The next unfilled positional argument, which consumes the token whether or
   not its value converts.
5. Otherwise the token is unknown.

Options and flags are recognised anywhere, so they can be interleaved freely
with positionals. Matcher errors never stop the walk; everything wrong with a
command line is reported in one `ParseError`.

Example Usage:
    builder = SpecBuilder(name="report")
    builder.add_flag("verbose", short="-v", long="--verbose")
    builder.add_option("count", short="-n", long="--count", parser="integer", multiple=True)
    builder.add_arg("file")
    spec = builder.build()
    result = parse(spec, ["-v", "--count", "3", "--count", "5", "report.txt"])
    # result.as_dict() == {"file": "report.txt", "verbose": True, "count": [3, 5]}
"""
from __future__ import annotations

import sys
from typing import Any, NoReturn, Sequence

from rich.console import Console
from rich.markup import escape

from argwalk.console import console as default_console
from argwalk.console import error_console
from argwalk.definitions import Arg
from argwalk.exceptions import CommandLineTypeError, ParseError
from argwalk.help import render_help, render_version
from argwalk.logger import logger
from argwalk.matchers import ArgMatcher, FlagMatcher, OptionMatcher
from argwalk.parse_state import Matched, MatchedWithError, ParseState
from argwalk.result import ParseResult, get_argument, get_flag, get_option
from argwalk.spec import CommandSpec

TERMINATOR = "--"

_option_matcher = OptionMatcher()
_flag_matcher = FlagMatcher()
_arg_matcher = ArgMatcher()


def _dispatch_positional_only(
    remaining_args: list[Arg],
    state: ParseState,
    tokens: Sequence[str],
    index: int,
    errors: list[str],
    unknown: list[str],
) -> None:
    for position in range(index, len(tokens)):
        if not remaining_args:
            unknown.append(tokens[position])
            continue
        error, _ = _arg_matcher.parse(remaining_args.pop(0), state, tokens, position)
        if error:
            errors.append(error)


def dispatch(
    spec: CommandSpec, tokens: Sequence[str]
) -> tuple[ParseState, list[str], list[str]]:
    """
    Walk `tokens` once, routing each token to the matcher that claims it.

    Args:
        spec (CommandSpec): The command line definition.
        tokens (Sequence[str]): Raw command line tokens.

    Returns:
        tuple: `(state, errors, unknown)`, with errors and unknown tokens in the
        order they were encountered.
    """
    state = ParseState()
    errors: list[str] = []
    unknown: list[str] = []
    remaining_args = list(spec.args)

    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token == TERMINATOR and spec.parse_double_dash:
            logger.debug("Terminator at position %d, positional-only from here", index)
            _dispatch_positional_only(
                remaining_args, state, tokens, index + 1, errors, unknown
            )
            break

        outcome = _option_matcher.try_match(spec.options, state, tokens, index)
        if outcome is None:
            outcome = _flag_matcher.try_match(spec.flags, state, tokens, index)

        if isinstance(outcome, MatchedWithError):
            logger.debug("Match error at position %d: %s", index, outcome.error)
            errors.append(outcome.error)
            index = outcome.next_index
        elif isinstance(outcome, Matched):
            index = outcome.next_index
        elif remaining_args:
            error, index = _arg_matcher.parse(
                remaining_args.pop(0), state, tokens, index
            )
            if error:
                errors.append(error)
        else:
            logger.debug("Unknown token at position %d: %r", index, token)
            unknown.append(token)
            index += 1

    return state, errors, unknown


def validate_unknown(
    spec: CommandSpec, unknown: list[str], errors: list[str]
) -> list[str]:
    """Prepend one aggregate error for unknown tokens unless they are allowed."""
    if not unknown or spec.allow_unknown_args:
        return errors
    listed = ", ".join(repr(token) for token in unknown)
    return [f"unrecognized arguments: {listed}", *errors]


def validate_required(
    spec: CommandSpec, state: ParseState, errors: list[str]
) -> list[str]:
    """
    Prepend errors for required arguments and options that were never matched.

    The missing-arguments error comes first, then the missing-options error,
    then every error already collected.
    """
    missing_args = [
        arg.human_name
        for arg in spec.args
        if arg.required and not state.has(arg.kind, arg.name)
    ]
    missing_options = [
        option.human_name
        for option in spec.options
        if option.required and not state.has(option.kind, option.name)
    ]

    required_errors = []
    if missing_args:
        required_errors.append(f"missing required arguments: {', '.join(missing_args)}")
    if missing_options:
        required_errors.append(
            f"missing required options: {', '.join(missing_options)}"
        )
    return required_errors + errors


def assemble(
    spec: CommandSpec, state: ParseState, unknown: list[str], errors: list[str]
) -> ParseResult:
    """
    Build the typed result, or raise every error at once.

    Raises:
        ParseError: If `errors` is not empty. No partial result is returned.
    """
    if errors:
        raise ParseError(errors)

    return ParseResult(
        args={arg.name: get_argument(state, arg) for arg in spec.args},
        flags={flag.name: get_flag(state, flag) for flag in spec.flags},
        options={option.name: get_option(state, option) for option in spec.options},
        unknown=list(unknown),
    )


def _validate_command_line(command_line: Any) -> None:
    if not isinstance(command_line, (list, tuple)):
        raise CommandLineTypeError()
    if not all(isinstance(token, str) for token in command_line):
        raise CommandLineTypeError()


def parse(spec: CommandSpec, command_line: Sequence[str]) -> ParseResult:
    """
    Parse `command_line` against `spec`.

    Args:
        spec (CommandSpec): The command line definition.
        command_line (Sequence[str]): Raw tokens, without the program name.

    Returns:
        ParseResult: Values for every declared argument, flag and option.

    Raises:
        CommandLineTypeError: If `command_line` is not a list of strings.
        ParseError: With every error found, if the command line is invalid.
    """
    _validate_command_line(command_line)
    logger.debug("Parsing %d token(s) for '%s'", len(command_line), spec.name)
    state, errors, unknown = dispatch(spec, command_line)
    errors = validate_unknown(spec, unknown, errors)
    errors = validate_required(spec, state, errors)
    return assemble(spec, state, unknown, errors)


def _owns_form(spec: CommandSpec, form: str) -> bool:
    return any(form in definition.forms for definition in (*spec.flags, *spec.options))


def _is_lone(command_line: Any, token: str) -> bool:
    return isinstance(command_line, (list, tuple)) and list(command_line) == [token]


def parse_or_exit(
    spec: CommandSpec,
    command_line: Sequence[str] | None = None,
    console: Console | None = None,
) -> ParseResult:
    """
    Parse `command_line` (default `sys.argv[1:]`) for use in a program's main.

    A lone `--help` or `--version` prints help or the version banner and exits
    with status 0, unless the spec defines that form itself. Parse errors are
    printed and the process exits with status 1.
    """
    if command_line is None:
        command_line = sys.argv[1:]
    console = console or default_console

    if _is_lone(command_line, "--help") and not _owns_form(spec, "--help"):
        render_help(spec, console=console)
        sys.exit(0)
    if _is_lone(command_line, "--version") and not _owns_form(spec, "--version"):
        render_version(spec, console=console)
        sys.exit(0)

    try:
        return parse(spec, command_line)
    except ParseError as error:
        _exit_with_errors(error.errors)


def _exit_with_errors(errors: list[str]) -> NoReturn:
    for message in errors:
        error_console.print(f"[bold red]error:[/] {escape(message)}")
    error_console.print("[dim]Use --help to see available options.[/dim]")
    sys.exit(1)
