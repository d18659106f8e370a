# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Arg`, `Flag` and `Option` dataclasses that make up a `CommandSpec`.

Each definition has a unique `name`, used as the key of the parsed result,
plus kind-specific attributes:

- `Arg`: a positional value, matched by its place among the positional tokens.
- `Flag`: a switch without a value, counted each time it appears.
- `Option`: a named switch with a value; the union of `Arg` and `Flag`.

Definitions are immutable. They are normally created through `SpecBuilder`,
which validates and normalises them, but can be constructed directly.
"""
from dataclasses import dataclass

from argwalk.argument_kind import ArgumentKind
from argwalk.value_parsers import ValueParser, parse_string


@dataclass(frozen=True)
class Arg:
    """
    Represents a positional argument.

    Attributes:
        name (str): Result key for the argument.
        value_name (str): Display label used in usage and error messages.
        help (str): Help text for the argument.
        required (bool): True if the argument must be supplied.
        parser (ValueParser): Converts the raw token into the stored value.
    """

    name: str
    value_name: str = ""
    help: str = ""
    required: bool = True
    parser: ValueParser = parse_string

    kind = ArgumentKind.ARG

    @property
    def human_name(self) -> str:
        return self.value_name or self.name.upper()


@dataclass(frozen=True)
class Flag:
    """
    Represents a boolean or counting flag.

    Attributes:
        name (str): Result key for the flag.
        short (str | None): Short form, e.g. "-v".
        long (str | None): Long form, e.g. "--verbose".
        help (str): Help text for the flag.
        multiple (bool): If True the flag may repeat and yields a count.
    """

    name: str
    short: str | None = None
    long: str | None = None
    help: str = ""
    multiple: bool = False

    kind = ArgumentKind.FLAG

    @property
    def human_name(self) -> str:
        """The long form if present, else the short form."""
        return self.long or self.short or self.name

    @property
    def forms(self) -> tuple[str, ...]:
        return tuple(form for form in (self.short, self.long) if form)


@dataclass(frozen=True)
class Option:
    """
    Represents a value-bearing option.

    Attributes:
        name (str): Result key for the option.
        value_name (str): Display label for the value.
        short (str | None): Short form, e.g. "-n".
        long (str | None): Long form, e.g. "--count".
        help (str): Help text for the option.
        multiple (bool): If True every occurrence is kept, in order.
        required (bool): True if the option must be supplied at least once.
        parser (ValueParser): Converts the raw value into the stored value.
    """

    name: str
    value_name: str = ""
    short: str | None = None
    long: str | None = None
    help: str = ""
    multiple: bool = False
    required: bool = False
    parser: ValueParser = parse_string

    kind = ArgumentKind.OPTION

    @property
    def human_name(self) -> str:
        """The long form if present, else the short form."""
        return self.long or self.short or self.name

    @property
    def forms(self) -> tuple[str, ...]:
        return tuple(form for form in (self.short, self.long) if form)

    @property
    def display_value_name(self) -> str:
        return self.value_name or self.name.upper()
