from pathlib import Path
from types import SimpleNamespace

import pytest

from flagbind.config import ArgsConfig, ParameterConfig, loader
from flagbind.exceptions import ConfigError, DuplicateKeyError
from flagbind.parser.parameter import MISSING

YAML_SCHEMA = """\
program: foo
remainder: output path
remainder_field: outfile
parameters:
  - key: i
    name: input
    field: infile
    help: Specify the input file
    default: ./in.foo
  - key: r
    name: rate
    type: Float
    help: Rate of entropy
    default: 0.75
  - key: d
    name: debug
    type: bool
    help: Start in daemon mode
  - key: w
    name: work-dir
    type: path
"""

TOML_SCHEMA = """\
program = "foo"

[[parameters]]
key = "n"
name = "count"
type = "int"
default = 3

[[parameters]]
key = "v"
name = "verbose"
type = "bool"
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


def test_load_yaml(tmp_path):
    config = loader(write(tmp_path, "args.yaml", YAML_SCHEMA))
    assert config.program == "foo"
    assert [p.key for p in config.parameters] == ["i", "r", "d", "w"]
    assert config.parameters[1].type == "float"
    assert config.parameters[0].target_field == "infile"
    assert config.parameters[3].target_field == "work_dir"
    assert config.parameters[2].resolved_default() is MISSING


def test_yaml_schema_to_args(tmp_path):
    config = loader(str(write(tmp_path, "args.yml", YAML_SCHEMA)))
    store = {}
    args = config.to_args(store, ["foo", "-d", "--rate=0.9", "-w", "/srv", "out"])
    assert store == {
        "infile": "./in.foo",
        "rate": 0.75,
        "debug": False,
        "outfile": [],
    }

    assert args.parse()
    assert store["rate"] == 0.9
    assert store["debug"] is True
    assert store["work_dir"] == Path("/srv")
    assert store["outfile"] == ["out"]
    assert args.usage() == "Usage: foo -irdw <output path>"


def test_load_toml(tmp_path):
    config = loader(write(tmp_path, "args.toml", TOML_SCHEMA))
    options = SimpleNamespace()
    args = config.to_args(options, ["foo", "-vn", "7"])
    assert options.count == 3
    assert args.parse()
    assert options.count == 7
    assert options.verbose is True
    assert args.remainder_name is None


def test_empty_yaml_file(tmp_path):
    config = loader(write(tmp_path, "empty.yaml", ""))
    assert config == ArgsConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "nope.yaml")


def test_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)


def test_unsupported_format(tmp_path):
    with pytest.raises(ConfigError, match="Unsupported config format"):
        loader(write(tmp_path, "args.json", "{}"))


def test_malformed_yaml(tmp_path):
    with pytest.raises(ConfigError, match="Could not parse"):
        loader(write(tmp_path, "bad.yaml", "parameters: [key: i\n"))


def test_malformed_toml(tmp_path):
    with pytest.raises(ConfigError, match="Could not parse"):
        loader(write(tmp_path, "bad.toml", "parameters = [\n"))


def test_non_mapping_document(tmp_path):
    with pytest.raises(ConfigError, match="must contain a mapping"):
        loader(write(tmp_path, "list.yaml", "- a\n- b\n"))


@pytest.mark.parametrize(
    "parameter",
    [
        "{key: ab, name: rate}",
        "{key: '-', name: rate}",
        "{key: r, name: '--rate'}",
        "{key: r, name: 'my rate'}",
        "{key: r, name: rate, type: complex}",
    ],
)
def test_invalid_parameter(tmp_path, parameter):
    path = write(tmp_path, "args.yaml", f"parameters:\n  - {parameter}\n")
    with pytest.raises(ConfigError, match="Invalid config"):
        loader(path)


def test_duplicate_keys_fail_at_registration():
    config = ArgsConfig(
        parameters=[
            ParameterConfig(key="d", name="debug", type="bool"),
            ParameterConfig(key="d", name="daemon", type="bool"),
        ]
    )
    with pytest.raises(DuplicateKeyError):
        config.to_args({}, ["foo"])


def test_explicit_null_default_is_kept():
    parameter = ParameterConfig(key="i", name="input", default=None)
    assert parameter.resolved_default() is None
    assert ParameterConfig(key="i", name="input").resolved_default() is MISSING
