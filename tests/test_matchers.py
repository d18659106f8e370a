import pytest

from argwalk.argument_kind import ArgumentKind
from argwalk.definitions import Arg, Flag, Option
from argwalk.matchers import ArgMatcher, FlagMatcher, OptionMatcher
from argwalk.parse_state import Matched, MatchedWithError, ParseState
from argwalk.value_parsers import parse_integer

COUNT = Option(name="count", short="-n", long="--count", parser=parse_integer)
NAME = Option(name="name", long="--name")
VERBOSE = Flag(name="verbose", short="-v", long="--verbose")
ALL = Flag(name="all", short="-a")
DEBUG = Flag(name="debug", short="-d", multiple=True)
PORT = Arg(name="port", value_name="PORT", parser=parse_integer)


@pytest.mark.parametrize(
    "tokens, next_index",
    [
        (["--count", "3"], 2),
        (["--count=3"], 1),
        (["-n", "3"], 2),
        (["-n3"], 1),
        (["-n=3"], 1),
    ],
)
def test_option_syntaxes(tokens, next_index):
    state = ParseState()
    outcome = OptionMatcher().try_match((COUNT,), state, tokens, 0)
    assert outcome == Matched(next_index)
    assert state[(ArgumentKind.OPTION, "count")] == [3]


def test_option_value_may_look_like_a_switch():
    state = ParseState()
    outcome = OptionMatcher().try_match((NAME,), state, ["--name", "--verbose"], 0)
    assert outcome == Matched(2)
    assert state[(ArgumentKind.OPTION, "name")] == ["--verbose"]


def test_option_appends_in_encounter_order():
    state = ParseState()
    matcher = OptionMatcher()
    tokens = ["-n", "1", "--count=2"]
    assert matcher.try_match((COUNT,), state, tokens, 0) == Matched(2)
    assert matcher.try_match((COUNT,), state, tokens, 2) == Matched(3)
    assert state[(ArgumentKind.OPTION, "count")] == [1, 2]


def test_option_missing_value():
    state = ParseState()
    outcome = OptionMatcher().try_match((COUNT,), state, ["file", "--count"], 1)
    assert outcome == MatchedWithError("missing value for option --count", 2)
    assert state == {}


def test_option_invalid_value_consumes_tokens():
    state = ParseState()
    outcome = OptionMatcher().try_match((COUNT,), state, ["--count", "x", "y"], 0)
    assert outcome == MatchedWithError(
        "invalid value 'x' for option --count: expected an integer", 2
    )
    assert state == {}


@pytest.mark.parametrize("token", ["file", "-", "--", "--other", "-x", "-vn"])
def test_option_not_applicable(token):
    state = ParseState()
    assert OptionMatcher().try_match((COUNT, NAME), state, [token, "1"], 0) is None
    assert state == {}


def test_flag_short_and_long():
    state = ParseState()
    matcher = FlagMatcher()
    assert matcher.try_match((VERBOSE,), state, ["-v", "--verbose"], 0) == Matched(1)
    assert matcher.try_match((VERBOSE,), state, ["-v", "--verbose"], 1) == Matched(2)
    assert state[(ArgumentKind.FLAG, "verbose")] == 2


def test_flag_cluster():
    state = ParseState()
    outcome = FlagMatcher().try_match((VERBOSE, ALL, DEBUG), state, ["-vadd"], 0)
    assert outcome == Matched(1)
    assert state[(ArgumentKind.FLAG, "verbose")] == 1
    assert state[(ArgumentKind.FLAG, "all")] == 1
    assert state[(ArgumentKind.FLAG, "debug")] == 2


def test_flag_cluster_with_unknown_letter_is_not_applicable():
    state = ParseState()
    assert FlagMatcher().try_match((VERBOSE, ALL), state, ["-vax"], 0) is None
    assert state == {}


def test_flag_with_value_is_an_error():
    state = ParseState()
    outcome = FlagMatcher().try_match((VERBOSE,), state, ["--verbose=yes"], 0)
    assert outcome == MatchedWithError("flag --verbose does not take a value", 1)
    assert state == {}


@pytest.mark.parametrize("token", ["plain", "-", "--", "--quiet", "-5"])
def test_flag_not_applicable(token):
    assert FlagMatcher().try_match((VERBOSE, ALL), ParseState(), [token], 0) is None


def test_arg_matcher_success():
    state = ParseState()
    error, next_index = ArgMatcher().parse(PORT, state, ["-v", "8080"], 1)
    assert error is None
    assert next_index == 2
    assert state[(ArgumentKind.ARG, "port")] == 8080


def test_arg_matcher_failure_still_consumes():
    state = ParseState()
    error, next_index = ArgMatcher().parse(PORT, state, ["http"], 0)
    assert error == "invalid value 'http' for argument PORT: expected an integer"
    assert next_index == 1
    assert state == {}


def test_custom_parser_error_message():
    def even(value: str) -> int:
        number = int(value)
        if number % 2:
            raise ValueError("must be even")
        return number

    option = Option(name="size", long="--size", parser=even)
    outcome = OptionMatcher().try_match((option,), ParseState(), ["--size", "3"], 0)
    assert outcome == MatchedWithError("invalid value '3' for option --size: must be even", 2)


def test_parser_error_without_message_uses_exception_name():
    def broken(value: str) -> str:
        raise TypeError()

    arg = Arg(name="thing", value_name="THING", parser=broken)
    error, _ = ArgMatcher().parse(arg, ParseState(), ["x"], 0)
    assert error == "invalid value 'x' for argument THING: TypeError"
