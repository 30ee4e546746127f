"""A simple plugin loader, for registering extra alternation policies."""

from typing import Iterable, List
import importlib


class PluginInterface:
    """A plugin module has a single function called initialise, which
    registers its policies with ``alternating.policies.register()``.
    """

    @staticmethod
    def initialise() -> None:
        """Register the plugin's policies."""


def import_plugin(name: str) -> PluginInterface:
    module = importlib.import_module(name)
    if not callable(getattr(module, "initialise", None)):
        raise ValueError(f"Plugin {name!r} has no initialise() function.")
    return module  # type: ignore


def load_plugins(plugins: Iterable[str]) -> List[str]:
    """Imports and initialises each named plugin module once, in order.
    Returns the names of the plugins initialised.
    """
    loaded: List[str] = []
    for plugin_name in plugins:
        if plugin_name in loaded:
            continue
        import_plugin(plugin_name).initialise()
        loaded.append(plugin_name)
    return loaded
