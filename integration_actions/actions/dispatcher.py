"""Central dispatcher for action calls.

Routes (provider, tool) pairs to the appropriate wrapper function.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

from .fields import bind_payload, spec_of
from .options import validate_selections
from .provider_loader import find_action

if TYPE_CHECKING:
    from integration_actions.core.context import ActionContext


def dispatch_tool(
    context: ActionContext,
    provider: str,
    tool: str,
    payload: Dict[str, Any],
    *,
    validate_options: bool = False,
) -> Any:
    """
    Dispatch an action call to the appropriate wrapper function.

    Args:
        context: Action context with user_id
        provider: Provider name ("sendgrid", "webflow")
        tool: Action name ("sendgrid_send_email", etc.)
        payload: Field values keyed by prop name (``fromEmail``) or parameter
            name (``from_email``)
        validate_options: Check option-backed identifiers against their
            listings before the call (costs one listing call per field)

    Returns:
        The action's result, unchanged

    Raises:
        ToolNotFoundError: If provider/tool combination not found
        ActionValidationError: If the payload names unknown fields
    """
    wrapper_func = find_action(provider, tool)
    spec = spec_of(wrapper_func)
    kwargs = bind_payload(spec, payload) if spec is not None else dict(payload)

    if validate_options:
        validate_selections(context, provider, tool, kwargs)

    return wrapper_func(context, **kwargs)
