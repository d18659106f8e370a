from io import StringIO

from rich.console import Console

from argwalk.builder import SpecBuilder
from argwalk.help import get_usage, render_help, render_version


def make_spec():
    builder = SpecBuilder(
        name="report",
        version="2.1.0",
        author="Ops Team",
        description="Render reports",
        about="Reads a report and renders it.",
    )
    builder.add_flag("verbose", short="-v", long="--verbose", help="Print more")
    builder.add_flag("debug", short="-d", multiple=True)
    builder.add_option("count", short="-n", long="--count", multiple=True, help="Copies")
    builder.add_option("id", long="--id", required=True)
    builder.add_arg("file", help="Report to render")
    builder.add_arg("dest", required=False)
    return builder.build()


def make_console() -> Console:
    return Console(file=StringIO(), color_system=None, width=120)


def test_usage():
    assert get_usage(make_spec(), plain_text=True) == (
        "report [-v] [-d]... [-n COUNT]... --id ID FILE [DEST]"
    )


def test_usage_without_name():
    assert get_usage(SpecBuilder().build(), plain_text=True) == "command"


def test_render_help():
    console = make_console()
    render_help(make_spec(), console=console)
    output = console.file.getvalue()
    assert "report 2.1.0" in output
    assert "Ops Team" in output
    assert "usage: report [-v] [-d]... [-n COUNT]... --id ID FILE [DEST]" in output
    assert "Reads a report and renders it." in output
    assert "arguments:" in output
    assert "Report to render" in output
    assert "flags:" in output
    assert "-v, --verbose" in output
    assert "options:" in output
    assert "-n, --count COUNT" in output


def test_render_help_skips_empty_sections():
    builder = SpecBuilder(name="bare")
    builder.add_arg("file")
    console = make_console()
    render_help(builder.build(), console=console)
    output = console.file.getvalue()
    assert "arguments:" in output
    assert "flags:" not in output
    assert "options:" not in output


def test_render_version():
    console = make_console()
    render_version(make_spec(), console=console)
    assert console.file.getvalue().strip() == "report 2.1.0"


def test_render_help_keeps_brackets_in_help_text():
    builder = SpecBuilder(name="sync")
    builder.add_flag("verbose", short="-v", help="verbosity [bold]")
    builder.add_arg("path", help="Directory, e.g. [/tmp]")
    console = make_console()
    render_help(builder.build(), console=console)
    output = console.file.getvalue()
    assert "Directory, e.g. [/tmp]" in output
    assert "verbosity [bold]" in output
