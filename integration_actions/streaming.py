from __future__ import annotations

import contextvars
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class StreamEmitter:
    """Callable wrapper that delivers action events to a subscriber."""

    def __init__(self, publish: Callable[[str, Any], None]) -> None:
        self._publish = publish

    def emit(self, event: str, data: Any) -> None:
        try:
            self._publish(event, data)
        except Exception:  # pragma: no cover - best-effort telemetry
            logger.exception("Failed to publish stream event %s", event)


_CURRENT_EMITTER: contextvars.ContextVar[Optional[StreamEmitter]] = contextvars.ContextVar(
    "integration_actions_stream_emitter",
    default=None,
)
_EMITTER_WARNING_EMITTED: bool = False


def set_current_emitter(emitter: Optional[StreamEmitter]) -> contextvars.Token:
    """Set the active emitter for the current context, returning a token to reset."""
    return _CURRENT_EMITTER.set(emitter)


def reset_current_emitter(token: contextvars.Token) -> None:
    _CURRENT_EMITTER.reset(token)


def get_current_emitter() -> Optional[StreamEmitter]:
    return _CURRENT_EMITTER.get()


def emit_event(event: str, data: Any) -> None:
    """Emit an event if an emitter is active."""
    global _EMITTER_WARNING_EMITTED
    emitter = get_current_emitter()
    if emitter is None:
        if not _EMITTER_WARNING_EMITTED:
            logger.debug("Dropping stream event '%s' because no emitter is active.", event)
            _EMITTER_WARNING_EMITTED = True
        return
    _EMITTER_WARNING_EMITTED = False
    logger.debug(
        "Emitting stream event '%s' payload_keys=%s",
        event,
        list(data.keys()) if isinstance(data, dict) else type(data).__name__,
    )
    emitter.emit(event, data)
