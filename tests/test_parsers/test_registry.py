import pytest

from flagwork.exceptions import (
    ConfigurationError,
    DuplicateAliasError,
    DuplicateNameError,
    InvalidBoundsError,
    InvalidNameError,
    UnknownArgumentError,
    UnknownFlagError,
)
from flagwork.parser import (
    FlagKind,
    FlagRegistry,
    MultiFlag,
    PositionalFlag,
    RegularFlag,
    SwitchFlag,
)


def test_register_each_kind():
    registry = FlagRegistry()
    assert isinstance(registry.register(FlagKind.SWITCH, "verbose", alias="v"), SwitchFlag)
    assert isinstance(registry.register(FlagKind.REGULAR, "output", alias="o"), RegularFlag)
    assert isinstance(registry.register(FlagKind.MULTI, "include", alias="I"), MultiFlag)
    assert isinstance(registry.register(FlagKind.POSITIONAL, "input"), PositionalFlag)
    assert len(registry) == 4
    assert registry.alias_count == 3


def test_register_coerces_kind_strings():
    registry = FlagRegistry()
    assert registry.register("store_true", "verbose").kind == FlagKind.SWITCH
    assert registry.register("append", "include").kind == FlagKind.MULTI
    with pytest.raises(ConfigurationError):
        registry.register("bogus", "other")


def test_lookup_and_alias_resolve_to_same_entity():
    registry = FlagRegistry()
    for kind, name, alias in (
        (FlagKind.SWITCH, "verbose", "v"),
        (FlagKind.REGULAR, "output", "o"),
        (FlagKind.MULTI, "include", "I"),
    ):
        flag = registry.register(kind, name, alias=alias)
        assert registry.lookup(name) is flag
        assert registry.lookup_by_alias(alias) is flag


def test_lookup_unknown():
    registry = FlagRegistry()
    with pytest.raises(UnknownArgumentError) as excinfo:
        registry.lookup("missing")
    assert excinfo.value.token == "--missing"
    with pytest.raises(UnknownFlagError) as excinfo:
        registry.lookup_by_alias("m")
    assert excinfo.value.token == "-m"


@pytest.mark.parametrize("kind", list(FlagKind))
def test_duplicate_name_across_kinds(kind):
    registry = FlagRegistry()
    registry.register(FlagKind.SWITCH, "dup")
    with pytest.raises(DuplicateNameError):
        registry.register(kind, "dup")


def test_duplicate_alias():
    registry = FlagRegistry()
    registry.register(FlagKind.SWITCH, "verbose", alias="v")
    with pytest.raises(DuplicateAliasError):
        registry.register(FlagKind.REGULAR, "version", alias="v")


@pytest.mark.parametrize("name", ["", "-verbose", "--verbose", "two words", "a=b"])
def test_invalid_names(name):
    registry = FlagRegistry()
    with pytest.raises(InvalidNameError):
        registry.register(FlagKind.SWITCH, name)


@pytest.mark.parametrize("alias", ["", "vv", "-", "=", " "])
def test_invalid_aliases(alias):
    registry = FlagRegistry()
    with pytest.raises(InvalidNameError):
        registry.register(FlagKind.SWITCH, "verbose", alias=alias)


def test_invalid_options():
    registry = FlagRegistry()
    with pytest.raises(ConfigurationError):
        registry.register(FlagKind.SWITCH, "verbose", obligatory=True)
    with pytest.raises(ConfigurationError):
        registry.register(FlagKind.POSITIONAL, "input", alias="i")
    with pytest.raises(ConfigurationError):
        registry.register(FlagKind.MULTI, "include", default="x")
    with pytest.raises(ConfigurationError):
        registry.register(FlagKind.SWITCH, "quiet", append_sep=",")
    with pytest.raises(ConfigurationError):
        registry.register(FlagKind.REGULAR, "tag", append_sep="")
    with pytest.raises(ConfigurationError):
        registry.register(FlagKind.REGULAR, "output", saturation=2)


def test_invalid_bounds():
    registry = FlagRegistry()
    with pytest.raises(InvalidBoundsError):
        registry.register(FlagKind.MULTI, "include", lowest=3, saturation=2)
    with pytest.raises(InvalidBoundsError):
        registry.register(FlagKind.POSITIONAL, "input", lowest=-1)
    assert isinstance(InvalidBoundsError("x"), ConfigurationError)


def test_failed_registration_leaves_registry_unchanged():
    registry = FlagRegistry()
    registry.register(FlagKind.SWITCH, "verbose", alias="v")
    with pytest.raises(InvalidBoundsError):
        registry.register(FlagKind.MULTI, "include", alias="I", lowest=2, saturation=1)

    assert len(registry) == 1
    assert "include" not in registry
    assert not registry.alias_bound("I")
    registry.register(FlagKind.MULTI, "include", alias="I")
    assert "include" in registry


def test_positionals_keep_declaration_order():
    registry = FlagRegistry()
    registry.register(FlagKind.POSITIONAL, "first")
    registry.register(FlagKind.SWITCH, "verbose")
    registry.register(FlagKind.POSITIONAL, "second")

    positionals = registry.positionals()
    assert [flag.name for flag in positionals] == ["first", "second"]
    assert [flag.position for flag in positionals] == [1, 2]
    assert [flag.name for flag in registry.of_kind(FlagKind.SWITCH)] == ["verbose"]


def test_reset_clears_values_but_keeps_declarations():
    registry = FlagRegistry()
    switch = registry.register(FlagKind.SWITCH, "verbose")
    regular = registry.register(FlagKind.REGULAR, "output", default="a.txt")
    switch.accept(None)
    regular.accept("b.txt")

    registry.reset()
    assert not switch.is_set()
    assert regular.get_value() == "a.txt"
    assert len(registry) == 2
