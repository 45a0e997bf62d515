"""Standardized exception hierarchy for integration actions."""

from __future__ import annotations

from typing import Iterable


class IntegrationActionError(Exception):
    """Base exception for all integration action errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ActionValidationError(IntegrationActionError, ValueError):
    """Raised before any provider call when the declared fields are unusable."""

    def __init__(
        self,
        message: str,
        missing: Iterable[str] | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.missing = list(missing or [])


class InvalidSelectionError(ActionValidationError):
    """Raised when an identifier is not among the options listed for its field."""

    def __init__(self, prop: str, value: object, allowed: Iterable[str], details: dict | None = None):
        allowed_ids = sorted(allowed)
        message = f"Value {value!r} is not a selectable option for '{prop}'."
        merged = {"allowed": allowed_ids, **(details or {})}
        super().__init__(message, details=merged)
        self.prop = prop
        self.value = value


class ProviderNotFoundError(IntegrationActionError):
    """Raised when a requested provider is not configured."""

    def __init__(self, provider: str, details: dict | None = None):
        message = f"Provider '{provider}' is not configured or not available."
        super().__init__(message, details)
        self.provider = provider


class ToolNotFoundError(IntegrationActionError):
    """Raised when a requested action does not exist."""

    def __init__(self, provider: str, tool: str, details: dict | None = None):
        message = f"Tool '{tool}' not found for provider '{provider}'."
        super().__init__(message, details)
        self.provider = provider
        self.tool = tool


class AppRequestError(IntegrationActionError):
    """Raised by an app client when the provider answers with an HTTP error."""

    def __init__(self, provider: str, status_code: int, detail: str, details: dict | None = None):
        message = f"{provider} request failed with status {status_code}: {detail}"
        super().__init__(message, details)
        self.provider = provider
        self.status_code = status_code
        self.detail = detail
