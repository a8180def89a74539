import pytest

from flagbind.parser import Args, ParseErrorKind


@pytest.fixture
def store():
    return {}


@pytest.fixture
def args(store):
    args = Args(["prog"])
    args.arg(store, "alpha", "a", "alpha", "Alpha option", type=bool)
    args.arg(store, "beta", "b", "beta", "Beta option", type=bool)
    args.arg(store, "charlie", "c", "charlie", "Charlie option", 0)
    args.arg(store, "input", "i", "input", "Input file", "")
    return args


def test_cluster_with_trailing_value(args, store):
    assert args.parse(["prog", "-abc", "7"])
    assert store["alpha"] is True
    assert store["beta"] is True
    assert store["charlie"] == 7
    assert args.outcome.set_keys == ["a", "b", "c"]


def test_cluster_with_equals_value(args, store):
    assert args.parse(["prog", "-abc=7", "rest"])
    assert store["alpha"] is True
    assert store["beta"] is True
    assert store["charlie"] == 7
    assert args.remainder_values == ["rest"]


def test_cluster_of_flags_only(args, store):
    assert args.parse(["prog", "-ba", "rest"])
    assert store["alpha"] is True
    assert store["beta"] is True
    assert args.remainder_values == ["rest"]


def test_cluster_equals_on_last_flag_is_ignored(args, store):
    assert args.parse(["prog", "-ab=x"])
    assert store["alpha"] is True
    assert store["beta"] is True


def test_valued_key_not_last_is_an_error(args, store):
    assert not args.parse(["prog", "-cab", "7"])
    error = args.outcome.errors[0]
    assert error.kind is ParseErrorKind.MISSING_VALUE
    assert error.source == "-cab"
    assert "must be last" in error.details
    assert store["alpha"] is False
    assert store["charlie"] == 0
    # the cluster aborted without lookahead, so "7" starts the remainder
    assert args.remainder_values == ["7"]


def test_unknown_key_aborts_cluster_only(args, store):
    assert not args.parse(["prog", "-axb", "-c", "3"])
    error = args.outcome.errors[0]
    assert error.kind is ParseErrorKind.UNKNOWN_KEY
    assert error.description == "Unknown key '-x'"
    assert error.details == "in cluster '-axb'"
    # flags before the unknown key stay set; the rest of the cluster is skipped
    assert store["alpha"] is True
    assert store["beta"] is False
    assert store["charlie"] == 3


def test_error_isolation(store):
    args = Args(["prog"])
    args.arg(store, "input", "i", "input", "Input file", "./in.foo")
    args.arg(store, "debug", "d", "debug", "Debug", type=bool)
    assert not args.parse(["prog", "-i", "in.txt", "-bad", "out.txt"])
    assert args.outcome.errors[0].kind is ParseErrorKind.UNKNOWN_KEY
    assert store["input"] == "in.txt"
    assert args.get_parameter("i").is_set
    assert args.remainder_values == ["out.txt"]


def test_missing_value_at_end_of_cluster(args, store):
    assert not args.parse(["prog", "-abi"])
    assert args.outcome.errors[0].kind is ParseErrorKind.MISSING_VALUE
    assert store["alpha"] is True
    assert store["beta"] is True
    assert store["input"] == ""


def test_invalid_value_for_cluster(args, store):
    assert not args.parse(["prog", "-ac", "seven"])
    error = args.outcome.errors[0]
    assert error.kind is ParseErrorKind.INVALID_ARGUMENT
    assert error.source == "seven"
    assert store["alpha"] is True
    assert store["charlie"] == 0
