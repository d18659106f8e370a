# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds and validates `CommandSpec` instances.

`SpecBuilder` is the programmatic interface; `build_spec()` accepts the same
description as plain data (as produced by the config loader). All checks run
once, at build time, so a built spec is always well-formed:

- names are identifiers and unique across arguments, flags and options
- flags and options have a short (`-v`) and/or long (`--verbose`) form
- no short or long form is shared by two definitions
- required positional arguments come before optional ones
- every `parser` reference resolves to a callable

Example Usage:
    builder = SpecBuilder(name="report", version="1.0.0")
    builder.add_flag("verbose", short="-v", long="--verbose")
    builder.add_option("count", short="n", long="count", parser="integer", multiple=True)
    builder.add_arg("file", help="Report to render")
    spec = builder.build()
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from argwalk.definitions import Arg, Flag, Option
from argwalk.exceptions import SpecError
from argwalk.logger import logger
from argwalk.spec import CommandSpec
from argwalk.value_parsers import ValueParser, resolve_parser


class SpecBuilder:
    """
    Collects argument, flag and option definitions and builds a `CommandSpec`.

    Definitions are validated as they are added; `build()` freezes them in
    declaration order.
    """

    def __init__(
        self,
        name: str = "",
        description: str = "",
        version: str = "",
        author: str = "",
        about: str = "",
        allow_unknown_args: bool = False,
        parse_double_dash: bool = True,
    ) -> None:
        self.name: str = name
        self.description: str = description
        self.version: str = version
        self.author: str = author
        self.about: str = about
        self.allow_unknown_args: bool = allow_unknown_args
        self.parse_double_dash: bool = parse_double_dash
        self._args: list[Arg] = []
        self._flags: list[Flag] = []
        self._options: list[Option] = []
        self._names: set[str] = set()
        self._form_map: dict[str, str] = {}

    def _validate_name(self, name: str) -> str:
        if not isinstance(name, str) or not name:
            raise SpecError("name must be a non-empty string")
        if not name.replace("_", "").isalnum():
            raise SpecError(
                f"name '{name}' must be a valid identifier "
                "(letters, digits, and underscores only)"
            )
        if name[0].isdigit():
            raise SpecError(f"name '{name}' must not start with a digit")
        if name in self._names:
            raise SpecError(f"name '{name}' is already defined")
        return name

    def _normalize_short(self, short: str | None) -> str | None:
        if short is None:
            return None
        if not isinstance(short, str):
            raise SpecError(f"short form must be a string, got {type(short).__name__}")
        letter = short[1:] if short.startswith("-") else short
        if len(letter) != 1 or letter in "-=":
            raise SpecError(f"short form '{short}' must be a single character")
        if letter.isdigit():
            raise SpecError(f"short form '{short}' must not be a digit")
        return f"-{letter}"

    def _normalize_long(self, long: str | None) -> str | None:
        if long is None:
            return None
        if not isinstance(long, str):
            raise SpecError(f"long form must be a string, got {type(long).__name__}")
        word = long[2:] if long.startswith("--") else long
        if not word or word.startswith("-") or "=" in word or " " in word:
            raise SpecError(f"long form '{long}' must look like '--name'")
        return f"--{word}"

    def _validate_forms(self, name: str, short: str | None, long: str | None) -> None:
        if short is None and long is None:
            raise SpecError(f"'{name}' needs a short or a long form")
        for form in (short, long):
            if form and form in self._form_map:
                raise SpecError(
                    f"'{form}' is already used by '{self._form_map[form]}'"
                )

    def _resolve_parser(self, name: str, parser: Any) -> ValueParser:
        try:
            return resolve_parser(parser)
        except SpecError as error:
            raise SpecError(f"'{name}': {error}") from error

    def _register_forms(self, name: str, forms: Iterable[str]) -> None:
        self._names.add(name)
        for form in forms:
            self._form_map[form] = name

    def add_arg(
        self,
        name: str,
        value_name: str | None = None,
        help: str = "",
        required: bool = True,
        parser: Any = None,
    ) -> None:
        """
        Define a positional argument.

        Args:
            name (str): Result key.
            value_name (str | None): Display label, defaults to `name.upper()`.
            help (str): Help text.
            required (bool): Whether the argument must be supplied.
            parser: Built-in parser name, builtin type, or callable.
        """
        name = self._validate_name(name)
        if required:
            optional = next((arg for arg in self._args if not arg.required), None)
            if optional is not None:
                raise SpecError(
                    f"required argument '{name}' cannot follow "
                    f"optional argument '{optional.name}'"
                )
        arg = Arg(
            name=name,
            value_name=value_name or name.upper(),
            help=help,
            required=bool(required),
            parser=self._resolve_parser(name, parser),
        )
        self._register_forms(name, ())
        self._args.append(arg)

    def add_flag(
        self,
        name: str,
        short: str | None = None,
        long: str | None = None,
        help: str = "",
        multiple: bool = False,
    ) -> None:
        """
        Define a flag.

        Args:
            name (str): Result key.
            short (str | None): Short form, "-v" or "v".
            long (str | None): Long form, "--verbose" or "verbose".
            help (str): Help text.
            multiple (bool): Count repeated occurrences instead of a bool.
        """
        name = self._validate_name(name)
        short = self._normalize_short(short)
        long = self._normalize_long(long)
        self._validate_forms(name, short, long)
        flag = Flag(name=name, short=short, long=long, help=help, multiple=bool(multiple))
        self._register_forms(name, flag.forms)
        self._flags.append(flag)

    def add_option(
        self,
        name: str,
        value_name: str | None = None,
        short: str | None = None,
        long: str | None = None,
        help: str = "",
        multiple: bool = False,
        required: bool = False,
        parser: Any = None,
    ) -> None:
        """
        Define a value-bearing option.

        Args:
            name (str): Result key.
            value_name (str | None): Display label, defaults to `name.upper()`.
            short (str | None): Short form, "-n" or "n".
            long (str | None): Long form, "--count" or "count".
            help (str): Help text.
            multiple (bool): Keep every value instead of the most recent one.
            required (bool): Whether the option must be supplied.
            parser: Built-in parser name, builtin type, or callable.
        """
        name = self._validate_name(name)
        short = self._normalize_short(short)
        long = self._normalize_long(long)
        self._validate_forms(name, short, long)
        option = Option(
            name=name,
            value_name=value_name or name.upper(),
            short=short,
            long=long,
            help=help,
            multiple=bool(multiple),
            required=bool(required),
            parser=self._resolve_parser(name, parser),
        )
        self._register_forms(name, option.forms)
        self._options.append(option)

    def build(self) -> CommandSpec:
        spec = CommandSpec(
            name=self.name,
            description=self.description,
            version=self.version,
            author=self.author,
            about=self.about,
            allow_unknown_args=bool(self.allow_unknown_args),
            parse_double_dash=bool(self.parse_double_dash),
            args=tuple(self._args),
            flags=tuple(self._flags),
            options=tuple(self._options),
        )
        logger.debug("Built %s", spec)
        return spec


_SPEC_KEYS = {
    "name",
    "description",
    "version",
    "author",
    "about",
    "allow_unknown_args",
    "parse_double_dash",
}


def _normalize_entries(kind: str, entries: Any) -> list[dict[str, Any]]:
    """Accept either a list of dicts with 'name' or a name -> attrs mapping."""
    if entries is None:
        return []
    if isinstance(entries, Mapping):
        normalized = []
        for name, attrs in entries.items():
            if attrs is None:
                attrs = {}
            if not isinstance(attrs, Mapping):
                raise SpecError(f"{kind} '{name}' must be a mapping of attributes")
            normalized.append({"name": name, **attrs})
        return normalized
    if isinstance(entries, (list, tuple)):
        for entry in entries:
            if not isinstance(entry, Mapping) or "name" not in entry:
                raise SpecError(f"each entry in {kind} must be a mapping with a 'name'")
        return [dict(entry) for entry in entries]
    raise SpecError(f"{kind} must be a list or a mapping")


def build_spec(**props: Any) -> CommandSpec:
    """
    Build a `CommandSpec` from a plain declarative description.

    Args:
        **props: Global attributes (`name`, `version`, `allow_unknown_args`,
            ...) plus `args`, `flags` and `options`, each either a list of
            attribute dicts with a `name` key or a `name -> attributes` mapping.

    Returns:
        CommandSpec: The validated spec.

    Raises:
        SpecError: If any attribute is unknown or any definition is invalid.
    """
    args = _normalize_entries("args", props.pop("args", None))
    flags = _normalize_entries("flags", props.pop("flags", None))
    options = _normalize_entries("options", props.pop("options", None))
    unknown_keys = set(props) - _SPEC_KEYS
    if unknown_keys:
        raise SpecError(f"Unknown spec attribute(s): {', '.join(sorted(unknown_keys))}")

    builder = SpecBuilder(**props)
    for adder, entries in (
        (builder.add_arg, args),
        (builder.add_flag, flags),
        (builder.add_option, options),
    ):
        for entry in entries:
            try:
                adder(**entry)
            except TypeError as error:
                raise SpecError(f"Invalid attributes for '{entry['name']}': {error}") from error
    return builder.build()
