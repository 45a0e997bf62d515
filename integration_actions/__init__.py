"""Integration actions - declared field forms mapped onto single SaaS API calls."""

from .actions import describe_provider_actions, dispatch_tool
from .core.context import ActionContext
from .core.exceptions import IntegrationActionError

__all__ = [
    "ActionContext",
    "IntegrationActionError",
    "describe_provider_actions",
    "dispatch_tool",
]
