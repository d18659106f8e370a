from pathlib import Path

import pytest

from argwalk.config import RawSpec, import_parser, loader
from argwalk.exceptions import SpecError
from argwalk.parser import parse
from argwalk.value_parsers import parse_float, parse_integer

YAML_SPEC = """\
name: report
version: 1.0
description: Render reports
flags:
  verbose: {short: -v, long: --verbose}
options:
  count: {short: -n, long: --count, parser: integer, multiple: true}
  scale: {long: --scale, parser: float}
args:
  file: {help: Report to render}
"""

TOML_SPEC = """\
name = "report"
allow_unknown_args = true

[[flags]]
name = "verbose"
short = "-v"

[[args]]
name = "file"
parser = "os.path.basename"
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


def test_load_yaml(tmp_path):
    spec = loader(write(tmp_path, "report.yaml", YAML_SPEC))
    assert spec.name == "report"
    assert spec.version == "1.0"
    assert spec.options[0].parser is parse_integer
    assert spec.options[1].parser is parse_float
    assert [arg.name for arg in spec.args] == ["file"]

    result = parse(spec, ["-v", "-n", "2", "--scale=1.5", "out.pdf"])
    assert result.as_dict() == {
        "file": "out.pdf",
        "verbose": True,
        "count": [2],
        "scale": 1.5,
    }


def test_load_toml_with_dotted_parser(tmp_path):
    spec = loader(str(write(tmp_path, "report.toml", TOML_SPEC)))
    assert spec.allow_unknown_args is True
    result = parse(spec, ["/tmp/data/report.txt", "extra"])
    assert result["file"] == "report.txt"
    assert result.unknown == ["extra"]


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "nope.yaml")


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError, match="Unsupported spec format: .json"):
        loader(write(tmp_path, "spec.json", "{}"))


def test_not_a_mapping(tmp_path):
    with pytest.raises(ValueError, match="must contain a mapping"):
        loader(write(tmp_path, "spec.yaml", "- just\n- a list\n"))


def test_invalid_path_type():
    with pytest.raises(TypeError):
        loader(42)


def test_unknown_keys_are_rejected(tmp_path):
    content = "name: x\nflags:\n  verbose: {short: -v, shortcut: -w}\n"
    with pytest.raises(SpecError, match="Invalid spec file"):
        loader(write(tmp_path, "spec.yaml", content))


def test_builder_errors_surface(tmp_path):
    content = "flags:\n  a: {short: -v}\n  b: {short: -v}\n"
    with pytest.raises(SpecError, match="already used by 'a'"):
        loader(write(tmp_path, "spec.yaml", content))


def test_raw_spec_accepts_lists():
    raw = RawSpec(args=[{"name": "file"}], flags=None)
    assert raw.args[0].name == "file"
    assert raw.flags == []


def test_import_parser_errors():
    assert import_parser("os.path.basename")("/a/b") == "b"
    with pytest.raises(SpecError, match="Invalid parser path"):
        import_parser("basename")
    with pytest.raises(SpecError, match="Could not import"):
        import_parser("no_such_module_xyz.parse")
    with pytest.raises(SpecError, match="has no attribute"):
        import_parser("os.path.no_such_function")
    with pytest.raises(SpecError, match="is not callable"):
        import_parser("os.path.sep")
