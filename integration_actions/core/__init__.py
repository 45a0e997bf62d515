"""Core module: shared context and exceptions for integration actions."""

from .context import ActionContext
from .exceptions import (
    ActionValidationError,
    AppRequestError,
    IntegrationActionError,
    InvalidSelectionError,
    ProviderNotFoundError,
    ToolNotFoundError,
)

__all__ = [
    "ActionContext",
    "ActionValidationError",
    "AppRequestError",
    "IntegrationActionError",
    "InvalidSelectionError",
    "ProviderNotFoundError",
    "ToolNotFoundError",
]
