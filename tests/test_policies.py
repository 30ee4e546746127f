import sys
import types
import typing as ty

import pytest

import alternating as alt
from alternating import load, policies


class Reversed(alt.AlternatingAll):
    """Exhaustive alternation, with the second side taking the first
    turn.
    """

    policy = "reversed"

    def __init__(self, side_a: ty.Iterable[ty.Any], side_b: ty.Iterable[ty.Any]):
        super().__init__(side_b, side_a)


@pytest.fixture
def plugin_module() -> ty.Iterator[str]:
    """Installs a throwaway plugin module registering ``Reversed``."""
    name = "_alternating_test_plugin"
    module = types.ModuleType(name)
    module.initialise = lambda: policies.register(  # type: ignore
        Reversed.policy, Reversed
    )
    sys.modules[name] = module
    try:
        yield name
    finally:
        del sys.modules[name]
        policies.unregister(Reversed.policy)


def test_builtin_policies() -> None:
    """Tests that the three alternators are registered by name."""
    assert policies.names() == ["all", "blind", "no-remainder"]
    assert isinstance(policies.create("blind", [], []), alt.Alternating)
    assert isinstance(policies.create("all", [], []), alt.AlternatingAll)
    assert isinstance(
        policies.create("no-remainder", [], []), alt.AlternatingNoRemainder
    )


@pytest.mark.parametrize(
    "name, expected",
    [
        ("blind", [1, 3, 2, 4]),
        ("all", [1, 3, 2, 4, 5]),
        ("no-remainder", [1, 3, 2, 4]),
    ],
)
def test_create(name: str, expected: ty.List[int]) -> None:
    assert list(policies.create(name, [1, 2], [3, 4, 5])) == expected


def test_unknown_policy() -> None:
    with pytest.raises(ValueError, match="Unknown alternation policy 'zip'"):
        policies.create("zip", [], [])


def test_register_unregister() -> None:
    """Tests adding and removing a policy."""
    policies.register("reversed", Reversed)
    try:
        assert "reversed" in policies.names()
        created = policies.create("reversed", [1, 2], [3, 4, 5])
        assert list(created) == [3, 1, 4, 2, 5]
    finally:
        policies.unregister("reversed")
    assert "reversed" not in policies.names()
    policies.unregister("reversed")


def test_load_plugins(plugin_module: str) -> None:
    """Tests that loading a plugin module registers its policies."""
    load.load_plugins([plugin_module])
    assert list(policies.create("reversed", [1], [2])) == [2, 1]


def test_load_missing_plugin() -> None:
    with pytest.raises(ModuleNotFoundError):
        load.load_plugins(["_alternating_no_such_plugin"])


def test_load_plugins_once(plugin_module: str) -> None:
    """Tests that repeated plugin names are only initialised once."""
    assert load.load_plugins([plugin_module, plugin_module]) == [plugin_module]


def test_load_plugin_without_initialise(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    name = "_alternating_bad_plugin"
    monkeypatch.setitem(sys.modules, name, types.ModuleType(name))
    with pytest.raises(ValueError, match="has no initialise"):
        load.load_plugins([name])
