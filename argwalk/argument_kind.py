# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentKind`, the enum naming the three token kinds Argwalk understands.

The kind is half of the composite `(kind, name)` key used by `ParseState`, so
an argument and an option never collide in the accumulated state even before
build-time name checks have run.
"""
from enum import Enum


class ArgumentKind(Enum):
    """
    The kind of a definition in a `CommandSpec`.

    Members:
        ARG: A positional argument, matched by position.
        FLAG: A boolean or counting switch without a value.
        OPTION: A named switch carrying a value.
    """

    ARG = "arg"
    FLAG = "flag"
    OPTION = "option"

    def __str__(self) -> str:
        return self.value
