import logging

import pytest

from flagwork import Arguments, ParseStatus
from flagwork.exceptions import SaturatedError
from flagwork.parser import FailureKind


def test_positionals_fill_in_declaration_order():
    arguments = Arguments(program="cp")
    arguments.add_positional("source", "Files to copy", lowest=1, saturation=2)
    arguments.add_positional("dest", "Destination")

    outcome = arguments.parse(["a.txt", "b.txt", "dir"])
    assert outcome.status == ParseStatus.OK
    assert arguments.get_iterable("source") == ["a.txt", "b.txt"]
    assert arguments.get_iterable("dest") == ["dir"]
    assert arguments.get_positional() == ["a.txt", "b.txt", "dir"]


def test_positional_draining_is_greedy():
    """Earlier positionals are filled up to saturation before later ones get values."""
    arguments = Arguments(program="cp")
    arguments.add_positional("source", lowest=1, saturation=2)
    arguments.add_positional("dest")

    outcome = arguments.parse(["a.txt", "b.txt"])
    assert arguments.get_iterable("source") == ["a.txt", "b.txt"]
    assert not arguments.is_set("dest")
    assert outcome.status == ParseStatus.VALIDATION_FAILED
    assert [(f.kind, f.name) for f in outcome.failures] == [
        (FailureKind.BELOW_LOWEST, "dest")
    ]


def test_unbounded_positional_takes_the_rest():
    arguments = Arguments(program="cat")
    arguments.add_positional("first")
    arguments.add_positional("rest", lowest=0, saturation=0)

    arguments.parse(["a", "b", "c", "d"])
    assert arguments.get_iterable("first") == ["a"]
    assert arguments.get_iterable("rest") == ["b", "c", "d"]
    assert arguments.get_value("rest") == "b,c,d"


def test_positionals_interleaved_with_flags():
    arguments = Arguments(program="tool")
    arguments.add_switch("verbose", alias="v")
    arguments.add_argument("output", alias="o")
    arguments.add_positional("files", lowest=1, saturation=0)

    arguments.parse(["one", "-v", "two", "-o", "out", "three"])
    assert arguments.get_iterable("files") == ["one", "two", "three"]
    assert arguments.get_value("output") == "out"


def test_overflow_is_omitted_with_warning(caplog):
    arguments = Arguments(program="tool")
    arguments.add_positional("input")

    with caplog.at_level(logging.WARNING, logger="flagwork"):
        outcome = arguments.parse(["in.txt", "extra1", "extra2"])

    assert outcome.status == ParseStatus.OK
    assert outcome.omitted == ("extra1", "extra2")
    assert arguments.get_omitted() == ["extra1", "extra2"]
    assert arguments.get_iterable("input") == ["in.txt"]
    assert "Omitted positional arguments: extra1, extra2" in caplog.text


def test_overflow_without_declared_positionals():
    arguments = Arguments(program="tool")
    outcome = arguments.parse(["stray"])
    assert outcome.ok
    assert outcome.omitted == ("stray",)
    assert arguments.get_positional() == ["stray"]


def test_separator_makes_everything_positional():
    arguments = Arguments(program="tool")
    arguments.add_switch("verbose", alias="v")
    arguments.add_positional("rest", lowest=0, saturation=0)

    arguments.parse(["--", "-v", "--output", "--", "-h"])
    assert not arguments.is_set("verbose")
    assert arguments.get_iterable("rest") == ["-v", "--output", "--", "-h"]


def test_multi_saturation_rejects_extra_value():
    arguments = Arguments(program="tool")
    arguments.add_multi("include", alias="I", lowest=1, saturation=2)

    assert arguments.parse(["-I", "a"]).ok
    arguments.reset()
    assert arguments.parse(["-I", "a", "--include", "b"]).ok
    arguments.reset()

    with pytest.raises(SaturatedError) as excinfo:
        arguments.parse(["-I", "a", "-I", "b", "-I", "c"])
    assert excinfo.value.token == "c"
    assert not arguments.is_set("include")


def test_multi_below_lowest():
    arguments = Arguments(program="tool")
    arguments.add_multi("include", alias="I", lowest=1, saturation=2)
    outcome = arguments.parse([])
    assert outcome.status == ParseStatus.VALIDATION_FAILED
    assert outcome.count == 1
    assert outcome.failures[0].kind == FailureKind.BELOW_LOWEST
