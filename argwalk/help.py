# Argwalk CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich-rendered usage, help and version output for a `CommandSpec`.

Public Interface:
- `get_usage(spec, plain_text=False)`: one-line usage string.
- `render_help(spec, console=None)`: full help with argument, flag and option
  sections.
- `render_version(spec, console=None)`: "<name> <version>" banner.
"""
from rich.console import Console
from rich.markup import escape

from argwalk.console import console as default_console
from argwalk.definitions import Arg, Flag, Option
from argwalk.spec import CommandSpec


def _flag_usage(flag: Flag) -> str:
    text = f"[{flag.short or flag.long}]"
    return f"{text}..." if flag.multiple else text


def _option_usage(option: Option) -> str:
    text = f"{option.short or option.long} {option.display_value_name}"
    text = text if option.required else f"[{text}]"
    return f"{text}..." if option.multiple else text


def _arg_usage(arg: Arg) -> str:
    return arg.human_name if arg.required else f"[{arg.human_name}]"


def get_usage(spec: CommandSpec, plain_text: bool = False) -> str:
    """
    Render the usage line for this spec.

    Returns:
        str: e.g. "report [-v] [-n COUNT]... FILE".
    """
    parts = [spec.name or "command"]
    parts.extend(_flag_usage(flag) for flag in spec.flags)
    parts.extend(_option_usage(option) for option in spec.options)
    parts.extend(_arg_usage(arg) for arg in spec.args)
    usage = " ".join(parts)
    return usage if plain_text else escape(usage)


def _print_entry(console: Console, label: str, help_text: str) -> None:
    arg_line = f"  {escape(label):<30} "
    help_text = escape(help_text)
    if help_text and len(label) > 30:
        help_text = f"\n{'':<33}{help_text}"
    console.print(f"{arg_line}{help_text}")


def render_help(spec: CommandSpec, console: Console | None = None) -> None:
    """
    Print formatted help text for this spec using Rich output.

    Includes usage, description, about text and one section per definition
    kind that has entries.
    """
    console = console or default_console
    title = " ".join(part for part in (spec.name, spec.version) if part)
    if title:
        console.print(f"[bold]{escape(title)}[/bold]")
    if spec.author:
        console.print(escape(spec.author))
    if spec.description:
        console.print(escape(spec.description))
    if title or spec.author or spec.description:
        console.print()

    console.print(f"[bold]usage: {get_usage(spec)}[/bold]\n")

    if spec.about:
        console.print(escape(spec.about) + "\n")

    if spec.args:
        console.print("[bold]arguments:[/bold]")
        for arg in spec.args:
            _print_entry(console, arg.human_name, arg.help)
    if spec.flags:
        console.print("[bold]flags:[/bold]")
        for flag in spec.flags:
            _print_entry(console, ", ".join(flag.forms), flag.help)
    if spec.options:
        console.print("[bold]options:[/bold]")
        for option in spec.options:
            label = f"{', '.join(option.forms)} {option.display_value_name}"
            _print_entry(console, label, option.help)


def render_version(spec: CommandSpec, console: Console | None = None) -> None:
    console = console or default_console
    console.print(escape(f"{spec.name} {spec.version}".strip()), highlight=False)
