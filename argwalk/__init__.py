"""
Argwalk CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_kind import ArgumentKind
from .builder import SpecBuilder, build_spec
from .definitions import Arg, Flag, Option
from .exceptions import ArgwalkError, CommandLineTypeError, ParseError, SpecError
from .logger import logger
from .parse_state import ParseState
from .parser import parse, parse_or_exit
from .result import ParseResult, get_argument, get_flag, get_option
from .spec import CommandSpec

__all__ = [
    "Arg",
    "ArgumentKind",
    "ArgwalkError",
    "CommandLineTypeError",
    "CommandSpec",
    "Flag",
    "Option",
    "ParseError",
    "ParseResult",
    "ParseState",
    "SpecBuilder",
    "SpecError",
    "build_spec",
    "get_argument",
    "get_flag",
    "get_option",
    "logger",
    "parse",
    "parse_or_exit",
]
