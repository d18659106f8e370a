# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandSpec`, the immutable description of everything a command line
may contain.

A spec is built once, usually via `SpecBuilder` or `build_spec()`, and is then
read-only: it can be shared freely between any number of `parse()` calls.
"""
from dataclasses import dataclass

from argwalk.definitions import Arg, Flag, Option


@dataclass(frozen=True)
class CommandSpec:
    """
    Declarative definition of a program's command line.

    Attributes:
        name (str): Program name, used in usage text.
        description (str): One-line description shown in help.
        version (str): Version string for the version banner.
        author (str): Author shown in help.
        about (str): Longer text shown in help.
        allow_unknown_args (bool): If True unknown tokens are tolerated and
            returned in `ParseResult.unknown` instead of failing the parse.
        parse_double_dash (bool): If True `--` switches the rest of the
            command line to positional-only interpretation.
        args (tuple[Arg, ...]): Positional arguments in declaration order.
        flags (tuple[Flag, ...]): Flag definitions.
        options (tuple[Option, ...]): Option definitions.
    """

    name: str = ""
    description: str = ""
    version: str = ""
    author: str = ""
    about: str = ""
    allow_unknown_args: bool = False
    parse_double_dash: bool = True
    args: tuple[Arg, ...] = ()
    flags: tuple[Flag, ...] = ()
    options: tuple[Option, ...] = ()

    def __str__(self) -> str:
        required = sum(arg.required for arg in self.args) + sum(
            option.required for option in self.options
        )
        return (
            f"CommandSpec(name={self.name!r}, args={len(self.args)}, "
            f"flags={len(self.flags)}, options={len(self.options)}, "
            f"required={required})"
        )
