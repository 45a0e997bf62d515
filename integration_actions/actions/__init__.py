"""Actions layer - provider wrappers, field forms and dispatching."""

from typing import Any, Dict

from .fields import describe_specs
from .provider_loader import discover_providers, load_action_map

# Discover providers dynamically based on wrapper modules
SUPPORTED_PROVIDERS: tuple[str, ...] = discover_providers()


def get_provider_action_map():
    """Get mapping of provider -> action functions."""
    return load_action_map(SUPPORTED_PROVIDERS)


def describe_provider_actions() -> Dict[str, Dict[str, Any]]:
    """Return provider -> {provider, actions} with each action's field form."""
    catalog: Dict[str, Dict[str, Any]] = {}
    for provider, funcs in get_provider_action_map().items():
        catalog[provider] = {"provider": provider, "actions": describe_specs(funcs)}
    return catalog


from .dispatcher import dispatch_tool
from .options import PropOption, ensure_selectable, list_prop_options
from .wrappers import (
    sendgrid_send_email,
    webflow_get_order,
    webflow_list_orders,
    webflow_list_sites,
)

__all__ = [
    "PropOption",
    "SUPPORTED_PROVIDERS",
    "describe_provider_actions",
    "dispatch_tool",
    "ensure_selectable",
    "get_provider_action_map",
    "list_prop_options",
    "sendgrid_send_email",
    "webflow_get_order",
    "webflow_list_orders",
    "webflow_list_sites",
]
