from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict

from integration_actions.core.exceptions import ProviderNotFoundError
from integration_actions.registry import get_app_client
from integration_actions.streaming import emit_event
from integration_actions.types import ActionEvent

if TYPE_CHECKING:
    from integration_actions.core.context import ActionContext

logger = logging.getLogger(__name__)


def ensure_authorized(context: "ActionContext", provider: str) -> Any:
    """Return the provider's app client, raising if none is configured for the user."""
    client = get_app_client(context, provider)
    if client is None:
        raise ProviderNotFoundError(provider, details={"user_id": context.user_id})
    return client


def _clean_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Remove None values to avoid sending unset optional params."""
    return {k: v for k, v in payload.items() if v is not None}


def _event(context: "ActionContext", provider: str, tool: str, **extra: Any) -> ActionEvent:
    event: ActionEvent = {
        "provider": provider,
        "tool": tool,
        "user_id": context.user_id,
        "request_id": context.request_id,
    }
    event.update(extra)  # type: ignore[typeddict-item]
    return event


def _invoke_app(
    context: "ActionContext",
    provider: str,
    tool: str,
    call: Callable[..., Any],
    *args: Any,
    payload_keys: list[str] | None = None,
    **kwargs: Any,
) -> Any:
    """
    Make the single collaborator call for an action and return its result unchanged.

    Failures are reported as telemetry and re-raised as-is.
    """
    keys = sorted(payload_keys if payload_keys is not None else kwargs.keys())
    emit_event("action.started", _event(context, provider, tool, payload_keys=keys))
    logger.info("action start provider=%s tool=%s request_id=%s", provider, tool, context.request_id)

    try:
        result = call(*args, **kwargs)
    except Exception as exc:
        emit_event("action.failed", _event(context, provider, tool, error=str(exc)))
        logger.warning(
            "action failed provider=%s tool=%s request_id=%s error=%s",
            provider,
            tool,
            context.request_id,
            exc,
        )
        raise

    emit_event("action.completed", _event(context, provider, tool))
    logger.info("action done provider=%s tool=%s request_id=%s", provider, tool, context.request_id)
    return result


__all__ = [
    "_clean_payload",
    "_invoke_app",
    "ensure_authorized",
]
