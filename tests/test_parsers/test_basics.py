import pytest

from flagwork import Arguments, ParseStatus
from flagwork.exceptions import (
    ConfigurationError,
    InvalidBoundsError,
    UnknownArgumentError,
)


def test_str():
    """Test the string representation of Arguments."""
    arguments = Arguments(program="tool")
    assert str(arguments) == "Arguments(flags=0, aliases=0, positional=0, obligatory=0)"

    arguments.add_switch("verbose", "Verbose output", alias="v")
    assert str(arguments) == "Arguments(flags=1, aliases=1, positional=0, obligatory=0)"

    arguments.add_obligatory("name", "Name", alias="n")
    assert str(arguments) == "Arguments(flags=2, aliases=2, positional=0, obligatory=1)"

    arguments.add_positional("input", "Input file")
    assert str(arguments) == "Arguments(flags=3, aliases=2, positional=1, obligatory=2)"
    assert repr(arguments) == str(arguments)


def test_switch_set_by_long_alias_and_repeat():
    arguments = Arguments(program="tool")
    arguments.add_switch("verbose", alias="v")

    assert arguments.parse(["--verbose"]).status == ParseStatus.OK
    assert arguments.is_set("verbose")

    arguments.reset()
    arguments.parse(["-v", "-v", "--verbose"])
    assert arguments.is_set("verbose")
    assert arguments.get_value("verbose") == ""


def test_switch_unset_uses_fallback():
    arguments = Arguments(program="tool")
    arguments.add_switch("verbose", alias="v")
    arguments.parse([])
    assert not arguments.is_set("verbose")
    assert arguments.get_value("verbose") is None
    assert arguments.get_value("verbose", "off") == "off"
    assert arguments.get_iterable("verbose") == []


def test_regular_flag_forms_are_equivalent():
    for tokens in (
        ["--output", "out.txt"],
        ["--output=out.txt"],
        ["-o", "out.txt"],
        ["-o=out.txt"],
    ):
        arguments = Arguments(program="tool")
        arguments.add_argument("output", alias="o")
        assert arguments.parse(tokens).ok
        assert arguments.get_value("output") == "out.txt"
        assert arguments.get_iterable("output") == ["out.txt"]


def test_regular_flag_replaces_without_separator():
    arguments = Arguments(program="tool")
    arguments.add_argument("output", alias="o")
    arguments.parse(["-o", "a.txt", "-o", "b.txt"])
    assert arguments.get_value("output") == "b.txt"


def test_regular_default_and_fallback():
    arguments = Arguments(program="tool")
    arguments.add_argument("mode", default="fast")
    arguments.add_argument("level")
    arguments.parse([])

    assert not arguments.is_set("mode")
    assert arguments.get_value("mode") == "fast"
    assert arguments.get_value("mode", "slow") == "fast"
    assert arguments.get_value("level") is None
    assert arguments.get_value("level", "3") == "3"
    assert arguments.get_iterable("level") == []


def test_append_separator():
    arguments = Arguments(program="tool")
    arguments.add_argument("tag", alias="t", append_sep=",")
    arguments.parse(["--tag", "a", "--tag", "b"])

    assert arguments.get_value("tag") == "a,b"
    assert arguments.get_iterable("tag") == ["a", "b"]


def test_enable_and_disable_append():
    arguments = Arguments(program="tool")
    arguments.add_argument("path")
    arguments.enable_append("path", ":")
    arguments.parse(["--path", "/usr", "--path", "/opt"])
    assert arguments.get_value("path") == "/usr:/opt"
    assert arguments.get_iterable("path") == ["/usr", "/opt"]

    arguments.disable_append("path")
    arguments.parse(["--path", "/bin"])
    assert arguments.get_value("path") == "/bin"


def test_enable_append_rejects_other_kinds():
    arguments = Arguments(program="tool")
    arguments.add_switch("verbose")
    arguments.add_multi("include")
    with pytest.raises(ConfigurationError):
        arguments.enable_append("verbose", ",")
    with pytest.raises(ConfigurationError):
        arguments.disable_append("include")
    with pytest.raises(UnknownArgumentError):
        arguments.enable_append("missing", ",")


def test_set_bounds_only_for_bounded_flags():
    arguments = Arguments(program="tool")
    arguments.add_argument("output")
    arguments.add_multi("include", lowest=0, saturation=2)

    with pytest.raises(ConfigurationError):
        arguments.set_lowest("output", 1)
    with pytest.raises(ConfigurationError):
        arguments.set_saturation("output", 1)
    with pytest.raises(InvalidBoundsError):
        arguments.set_lowest("include", 3)

    arguments.set_saturation("include", 5)
    arguments.set_lowest("include", 3)
    flag = arguments.get_flag("include")
    assert (flag.lowest, flag.saturation) == (3, 5)


def test_values_accumulate_until_reset():
    arguments = Arguments(program="tool")
    arguments.add_multi("include", alias="I")
    arguments.parse(["-I", "a"])
    arguments.parse(["-I", "b"])
    assert arguments.get_iterable("include") == ["a", "b"]

    arguments.reset()
    assert not arguments.is_set("include")
    assert arguments.last_outcome is None
    assert arguments.get_positional() == []


def test_query_unknown_name_raises():
    arguments = Arguments(program="tool")
    with pytest.raises(UnknownArgumentError):
        arguments.is_set("nope")
    with pytest.raises(UnknownArgumentError):
        arguments.get_value("nope")


def test_describe():
    arguments = Arguments(program="tool")
    arguments.add_switch("verbose", alias="v")
    arguments.add_argument("output", alias="o")
    arguments.add_positional("input")
    arguments.parse(["-v", "in.txt"])

    assert arguments.describe().splitlines() == [
        "Arguments:",
        'Switch: verbose/v Value: "__Set__"',
        'Regular: output/o Value: "__Empty__"',
        '@1 Positional: input Value: "in.txt"',
    ]


def test_container_protocol():
    arguments = Arguments(program="tool")
    arguments.add_switch("verbose")
    arguments.add_argument("output")
    assert "verbose" in arguments
    assert "missing" not in arguments
    assert len(arguments) == 2
    assert [flag.name for flag in arguments] == ["verbose", "output"]


def test_parse_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["tool", "-v"])
    arguments = Arguments(program="tool")
    arguments.add_switch("verbose", alias="v")
    assert arguments.parse().ok
    assert arguments.is_set("verbose")
