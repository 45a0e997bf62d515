from __future__ import annotations

import importlib
import inspect
import pkgutil
from typing import Callable, Dict, Tuple

from integration_actions.core.exceptions import ToolNotFoundError

WRAPPERS_PACKAGE = "integration_actions.actions.wrappers"


def discover_providers() -> Tuple[str, ...]:
    """
    Discover provider wrapper modules under integration_actions.actions.wrappers.

    Skips private/helper modules prefixed with an underscore.
    """
    from . import wrappers as wrappers_pkg

    names = []
    for module in pkgutil.iter_modules(wrappers_pkg.__path__):
        if module.name.startswith("_"):
            continue
        names.append(module.name)
    return tuple(sorted(names))


def load_action_map(providers: Tuple[str, ...]) -> Dict[str, Tuple[Callable[..., object], ...]]:
    """
    Import wrapper modules for the given providers and collect their actions.

    An action is a public function defined in the provider module itself that
    carries an ``__action_spec__``.
    """
    result: Dict[str, Tuple[Callable[..., object], ...]] = {}
    for provider in providers:
        module = importlib.import_module(f"{WRAPPERS_PACKAGE}.{provider}")
        funcs = []
        for name, obj in inspect.getmembers(module, inspect.isfunction):
            if (
                not name.startswith("_")
                and obj.__module__ == module.__name__
                and hasattr(obj, "__action_spec__")
            ):
                funcs.append(obj)
        if funcs:
            result[provider] = tuple(funcs)
    return result


def find_action(provider: str, tool: str) -> Callable[..., object]:
    """Return the action function for ``provider.tool`` or raise ToolNotFoundError."""
    action_map = load_action_map(discover_providers())
    if provider not in action_map:
        raise ToolNotFoundError(
            provider,
            tool,
            details={"available_providers": sorted(action_map.keys())},
        )
    for func in action_map[provider]:
        if func.__name__ == tool:
            return func
    raise ToolNotFoundError(
        provider,
        tool,
        details={"available_tools": [f.__name__ for f in action_map[provider]]},
    )
