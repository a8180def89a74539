import pytest

from flagbind.exceptions import ConversionError
from flagbind.parser import MISSING, Parameter
from flagbind.parser.codecs import codec_for
from flagbind.parser.storage import ItemRef


def make_parameter(store, key, name, value_type, help="", default=MISSING):
    return Parameter(
        key=key,
        name=name,
        ref=ItemRef(store, name),
        codec=codec_for(value_type),
        help_text=help,
        default=default,
    )


def test_help_line_with_default():
    parameter = make_parameter(
        {}, "i", "input", str, "Specify the input file", "./in.foo"
    )
    assert (
        parameter.help()
        == " -i    --input     [default: ./in.foo]     Specify the input file\n"
    )


def test_help_line_without_default():
    parameter = make_parameter({}, "d", "debug", bool, "Start in daemon mode")
    assert parameter.help() == " -d    --debug     " + " " * 24 + "Start in daemon mode\n"


def test_usage_and_default_str():
    parameter = make_parameter({}, "r", "rate", float, default=0.75)
    assert parameter.usage() == "r"
    assert parameter.default_str() == "0.75"
    assert make_parameter({}, "d", "debug", bool).default_str() == ""


def test_none_is_a_real_default():
    parameter = make_parameter({}, "t", "temp", str, default=None)
    assert parameter.has_default
    assert not make_parameter({}, "x", "extra", str).has_default


def test_parse_value_sets_storage():
    store = {}
    parameter = make_parameter(store, "r", "rate", float)
    parameter.parse_value("0.9")
    assert store["rate"] == 0.9
    assert parameter.is_set


def test_parse_value_failure_leaves_storage_alone():
    store = {"rate": 0.75}
    parameter = make_parameter(store, "r", "rate", float)
    with pytest.raises(ConversionError):
        parameter.parse_value("fast")
    assert store["rate"] == 0.75
    assert not parameter.is_set


def test_reset_restores_default():
    store = {}
    parameter = make_parameter(store, "r", "rate", float, default=0.75)
    parameter.apply_default()
    parameter.parse_value("0.9")
    parameter.reset()
    assert store["rate"] == 0.75
    assert not parameter.is_set


def test_reset_without_default_keeps_value():
    store = {"name": "x"}
    parameter = make_parameter(store, "n", "name", str)
    parameter.parse_value("y")
    parameter.reset()
    assert store["name"] == "y"
    assert not parameter.is_set


def test_is_flag():
    assert make_parameter({}, "d", "debug", bool).is_flag
    assert not make_parameter({}, "r", "rate", float).is_flag


def test_missing_repr():
    assert repr(MISSING) == "MISSING"
    assert not MISSING


def test_flag_without_default_resets_to_false():
    store = {}
    parameter = make_parameter(store, "d", "debug", bool)
    parameter.apply_default()
    assert store["debug"] is False
    assert parameter.default_str() == ""

    parameter.parse_value("")
    assert store["debug"] is True
    parameter.reset()
    assert store["debug"] is False
    assert not parameter.is_set
