# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argwalk.

Exception Hierarchy:
- ArgwalkError
    ├── SpecError
    └── ParseError
        └── CommandLineTypeError

`SpecError` is raised once, while a `CommandSpec` is being built or loaded.
`ParseError` is raised by `parse()` and carries every problem found in a
single command line, so callers can report them all at once.
"""


class ArgwalkError(Exception):
    """Base exception for Argwalk."""


class SpecError(ArgwalkError):
    """Exception raised when a spec definition is malformed or conflicting."""


class ParseError(ArgwalkError):
    """Exception raised when a command line could not be parsed.

    Attributes:
        errors (list[str]): Every error found, in reporting order.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors: list[str] = list(errors)
        super().__init__("; ".join(self.errors))


class CommandLineTypeError(ParseError):
    """Exception raised when the command line is not a sequence of strings."""

    def __init__(self, message: str = "list of strings expected") -> None:
        super().__init__([message])
