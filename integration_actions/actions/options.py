"""
Selectable identifier support.

Fields such as a Webflow site or order ID are filled from a listing action
that returns `{id, label}` pairs. This module resolves those listings for a
field and checks that a supplied identifier is one of them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from integration_actions.core.exceptions import (
    ActionValidationError,
    InvalidSelectionError,
    ToolNotFoundError,
)

from .fields import bind_payload, is_set, spec_of

if TYPE_CHECKING:
    from integration_actions.core.context import ActionContext


class PropOption(BaseModel):
    """One selectable value for an option-backed field."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str


def ensure_selectable(prop: str, value: Any, options: Iterable[PropOption]) -> None:
    """Raise InvalidSelectionError unless ``value`` matches one of the option ids."""
    allowed = {opt.id for opt in options}
    if str(value) not in allowed:
        raise InvalidSelectionError(prop, value, allowed)


def _lookup(provider: str, tool: str):
    from .provider_loader import find_action

    return find_action(provider, tool)


def list_prop_options(
    context: "ActionContext",
    provider: str,
    tool: str,
    prop: str,
    depends: Optional[Mapping[str, Any]] = None,
) -> List[PropOption]:
    """
    Return the selectable options for ``prop`` of ``provider.tool``.

    ``depends`` carries the dependent values (e.g. ``siteId`` for an order
    field), keyed by prop or param name.
    """
    func = _lookup(provider, tool)
    spec = spec_of(func)
    field = spec.field_for(prop) if spec else None
    if field is None:
        raise ActionValidationError(f"Field '{prop}' is not declared by {provider}.{tool}.")
    if not field.options:
        raise ActionValidationError(f"Field '{field.prop}' has no selectable options.")

    bound = bind_payload(spec, depends) if depends else {}
    missing = [
        spec.field_for(name).prop for name in field.options_depends_on if not is_set(bound.get(name))
    ]
    if missing:
        raise ActionValidationError(
            f"Options for '{field.prop}' require: {', '.join(missing)}.",
            missing=missing,
        )
    lister = _lookup(provider, field.options)
    return lister(context, **{name: bound[name] for name in field.options_depends_on})


def validate_selections(
    context: "ActionContext",
    provider: str,
    tool: str,
    kwargs: Dict[str, Any],
) -> None:
    """Check every supplied option-backed argument of an action against its listing."""
    func = _lookup(provider, tool)
    spec = spec_of(func)
    if spec is None:
        raise ToolNotFoundError(provider, tool)
    for field in spec.fields:
        if not field.options or not is_set(kwargs.get(field.param)):
            continue
        depends = {name: kwargs.get(name) for name in field.options_depends_on}
        options = list_prop_options(context, provider, tool, field.param, depends)
        ensure_selectable(field.prop, kwargs[field.param], options)


__all__ = [
    "PropOption",
    "ensure_selectable",
    "list_prop_options",
    "validate_selections",
]
