"""
Declarative field forms for actions.

Every action publishes an `ActionSpec` describing its fields: the caller-facing
prop name (e.g. ``fromEmail``), the Python parameter it binds to
(``from_email``), how the value is encoded, whether it is required, and the
provider field it lands on (``from.email``). Request assembly walks this table
instead of building provider bodies by hand, so the caller/provider boundary
can be inspected and tested on its own.
"""

from __future__ import annotations

import inspect
import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from integration_actions.core.exceptions import ActionValidationError

KIND_STRING = "string"
KIND_JSON = "json"
KIND_INTEGER = "integer"
KIND_OBJECT = "object"


@dataclass(frozen=True)
class FieldSpec:
    prop: str
    param: str
    label: str
    kind: str = KIND_STRING
    required: bool = False
    description: str = ""
    # Dotted provider path; None keeps the value out of the request body.
    target: Optional[str] = None
    # Gates emission of the enclosing provider object.
    anchor: bool = False
    # Name of the listing action that supplies selectable values.
    options: Optional[str] = None
    options_depends_on: tuple[str, ...] = ()

    def describe(self) -> Dict[str, Any]:
        info: Dict[str, Any] = {
            "prop": self.prop,
            "param": self.param,
            "label": self.label,
            "type": self.kind,
            "optional": not self.required,
            "description": self.description,
        }
        if self.target:
            info["target"] = self.target
        if self.options:
            info["options"] = self.options
            info["options_depends_on"] = list(self.options_depends_on)
        return info


@dataclass(frozen=True)
class ActionSpec:
    key: str
    name: str
    description: str
    version: str
    provider: str
    tool: str
    fields: tuple[FieldSpec, ...] = ()
    # Provider objects sent as explicit null when their anchor is absent.
    null_when_absent: tuple[str, ...] = ()
    required_message: str = ""

    def field_for(self, name: str) -> Optional[FieldSpec]:
        for spec in self.fields:
            if name in (spec.prop, spec.param):
                return spec
        return None

    @property
    def required_fields(self) -> tuple[FieldSpec, ...]:
        return tuple(spec for spec in self.fields if spec.required)

    def describe(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "version": self.version,
            "provider": self.provider,
            "tool": self.tool,
            "props": [spec.describe() for spec in self.fields],
        }


def is_set(value: object) -> bool:
    return value is not None and value != ""


def check_required(spec: ActionSpec, values: Mapping[str, Any]) -> None:
    """Raise ActionValidationError when any required field is absent."""
    missing = [f.prop for f in spec.required_fields if not is_set(values.get(f.param))]
    if not missing:
        return
    names = [f.prop for f in spec.required_fields]
    message = spec.required_message or _default_required_message(names)
    raise ActionValidationError(
        f"{message} Missing: {', '.join(missing)}.",
        missing=missing,
        details={"required": names},
    )


def _default_required_message(names: list[str]) -> str:
    if len(names) == 1:
        listed = names[0]
    elif len(names) == 2:
        listed = f"{names[0]} and {names[1]}"
    else:
        listed = ", ".join(names[:-1]) + f", and {names[-1]}"
    return f"Must provide {listed} parameters."


def decode_fields(spec: ActionSpec, values: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of ``values`` with structured-data-encoded fields parsed.

    Empty json fields become None. json.JSONDecodeError propagates unchanged.
    """
    decoded = dict(values)
    for f in spec.fields:
        if f.kind != KIND_JSON:
            continue
        raw = values.get(f.param)
        if not is_set(raw):
            decoded[f.param] = None
        elif isinstance(raw, (str, bytes, bytearray)):
            decoded[f.param] = json.loads(raw)
    return decoded


def build_request(spec: ActionSpec, values: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Assemble the provider body from decoded parameter values.

    Unsupplied fields are left out; nested objects are emitted only when their
    anchor field is set, and appear as None when listed in null_when_absent.
    """
    body: Dict[str, Any] = {}
    groups: Dict[str, Dict[str, Any]] = {}
    anchored: Dict[str, bool] = {}

    for f in spec.fields:
        if not f.target:
            continue
        value = values.get(f.param)
        head, _, leaf = f.target.partition(".")
        if not leaf:
            if value is not None:
                body[head] = value
            continue
        group = groups.setdefault(head, {})
        if f.anchor:
            anchored[head] = is_set(value)
        if value is not None:
            group[leaf] = value

    for head, group in groups.items():
        emit = anchored.get(head, bool(group))
        if emit:
            body[head] = group
        elif head in spec.null_when_absent:
            body[head] = None
    return _order_like(spec, body)


def _order_like(spec: ActionSpec, body: Dict[str, Any]) -> Dict[str, Any]:
    """Keep body keys in field-table order for stable logging and comparison."""
    ordered: Dict[str, Any] = {}
    for f in spec.fields:
        if not f.target:
            continue
        head = f.target.split(".", 1)[0]
        if head in body and head not in ordered:
            ordered[head] = body[head]
    return ordered


def bind_payload(spec: ActionSpec, payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Translate a payload keyed by prop names or params into keyword arguments."""
    kwargs: Dict[str, Any] = {}
    unknown: list[str] = []
    for key, value in payload.items():
        f = spec.field_for(key)
        if f is None:
            unknown.append(key)
            continue
        if f.param in kwargs:
            raise ActionValidationError(
                f"Field '{f.prop}' was supplied more than once.",
                details={"field": f.prop},
            )
        kwargs[f.param] = value
    if unknown:
        raise ActionValidationError(
            f"Unknown fields for {spec.key}: {', '.join(sorted(unknown))}.",
            details={"unknown": sorted(unknown), "allowed": [f.prop for f in spec.fields]},
        )
    return kwargs


def spec_of(func: Callable[..., Any]) -> Optional[ActionSpec]:
    return getattr(func, "__action_spec__", None)


def describe_specs(funcs: Iterable[Callable[..., Any]]) -> list[Dict[str, Any]]:
    entries = []
    for func in funcs:
        spec = spec_of(func)
        if spec is not None:
            doc = inspect.getdoc(func) or ""
            entries.append({"function": func.__name__, "doc": doc.strip(), **spec.describe()})
    return entries


__all__ = [
    "ActionSpec",
    "FieldSpec",
    "KIND_INTEGER",
    "KIND_JSON",
    "KIND_OBJECT",
    "KIND_STRING",
    "bind_payload",
    "build_request",
    "check_required",
    "decode_fields",
    "describe_specs",
    "is_set",
    "spec_of",
]
