# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argwalk command specs.

A spec file is YAML or TOML:

    name: report
    version: 1.0.0
    allow_unknown_args: false
    flags:
      verbose: {short: -v, long: --verbose, help: Print more}
    options:
      count: {short: -n, long: --count, parser: integer, multiple: true}
      port: {long: --port, parser: mypkg.parsers.port}
    args:
      file: {help: Report to render}

`args`, `flags` and `options` may also be lists of mappings with a `name` key.
A `parser` is a built-in name or a dotted import path to a callable.
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from argwalk.builder import build_spec
from argwalk.exceptions import SpecError
from argwalk.logger import logger
from argwalk.spec import CommandSpec
from argwalk.value_parsers import resolve_parser


def import_parser(dotted_path: str) -> Callable[[str], Any]:
    """Dynamically imports a value parser from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise SpecError(f"Invalid parser path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise SpecError(f"Could not import '{dotted_path}': {error}") from error
    try:
        parser = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise SpecError(f"Module '{module_path}' has no attribute '{attr}'") from error
    if not callable(parser):
        raise SpecError(f"Parser '{dotted_path}' is not callable")
    return parser


def resolve_parser_reference(reference: str | None) -> Callable[[str], Any]:
    if reference is None or "." not in reference:
        return resolve_parser(reference)
    return import_parser(reference)


class RawArg(BaseModel):
    """Raw positional argument model for spec configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    value_name: str | None = None
    help: str = ""
    required: bool = True
    parser: str | None = None


class RawFlag(BaseModel):
    """Raw flag model for spec configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    short: str | None = None
    long: str | None = None
    help: str = ""
    multiple: bool = False


class RawOption(BaseModel):
    """Raw option model for spec configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    value_name: str | None = None
    short: str | None = None
    long: str | None = None
    help: str = ""
    multiple: bool = False
    required: bool = False
    parser: str | None = None


class RawSpec(BaseModel):
    """Argwalk spec configuration model."""

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    description: str = ""
    version: str = ""
    author: str = ""
    about: str = ""
    allow_unknown_args: bool = False
    parse_double_dash: bool = True
    args: list[RawArg] = []
    flags: list[RawFlag] = []
    options: list[RawOption] = []

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, value: Any) -> str:
        # YAML reads `version: 1.0` as a float
        return "" if value is None else str(value)

    @field_validator("args", "flags", "options", mode="before")
    @classmethod
    def validate_entries(cls, value: Any) -> list[dict[str, Any]]:
        if value is None:
            return []
        if isinstance(value, dict):
            entries = []
            for name, attrs in value.items():
                if attrs is not None and not isinstance(attrs, dict):
                    raise ValueError(f"'{name}' must be a mapping of attributes")
                entries.append({"name": name, **(attrs or {})})
            return entries
        return value

    def to_spec(self) -> CommandSpec:
        props = self.model_dump(exclude={"args", "flags", "options"})
        return build_spec(
            **props,
            args=[
                {**arg.model_dump(), "parser": resolve_parser_reference(arg.parser)}
                for arg in self.args
            ],
            flags=[flag.model_dump() for flag in self.flags],
            options=[
                {**option.model_dump(), "parser": resolve_parser_reference(option.parser)}
                for option in self.options
            ],
        )


def loader(file_path: Path | str) -> CommandSpec:
    """
    Load an Argwalk spec from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the spec file.

    Returns:
        CommandSpec: The validated spec.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or not a mapping.
        SpecError: If the spec content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such spec file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as spec_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(spec_file)
        elif suffix == ".toml":
            raw_config = toml.load(spec_file)
        else:
            raise ValueError(f"Unsupported spec format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Spec file must contain a mapping.\n"
            "Example:\n"
            "name: 'report'\n"
            "args:\n"
            "  file:\n"
            "    help: 'Report to render'"
        )

    try:
        raw_spec = RawSpec(**raw_config)
    except ValidationError as error:
        raise SpecError(f"Invalid spec file {path}: {error}") from error
    logger.debug("Loaded spec '%s' from %s", raw_spec.name, path)
    return raw_spec.to_spec()

