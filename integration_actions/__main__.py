#!/usr/bin/env python3
"""
Command-line entry point for running integration actions.

Examples:
  python -m integration_actions list

  python -m integration_actions describe sendgrid

  python -m integration_actions run webflow webflow_get_order \
    --args '{"siteId": "580e63e98c9a982ac9b8b741", "orderId": "1585-7F5"}'

  python -m integration_actions options webflow webflow_get_order orderId \
    --args '{"siteId": "580e63e98c9a982ac9b8b741"}'
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict

from pydantic import BaseModel

from integration_actions.actions import (
    describe_provider_actions,
    dispatch_tool,
    get_provider_action_map,
    list_prop_options,
)
from integration_actions.core.context import ActionContext
from integration_actions.core.exceptions import IntegrationActionError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="integration_actions", description="Run SaaS integration actions.")
    parser.add_argument("--user-id", default=None, help="Tenant whose app clients are used.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List providers and their actions.")

    describe = sub.add_parser("describe", help="Show action field forms.")
    describe.add_argument("provider", nargs="?", help="Limit output to one provider.")

    run = sub.add_parser("run", help="Run one action.")
    run.add_argument("provider")
    run.add_argument("tool")
    run.add_argument("--args", default="{}", help="JSON object of field values.")
    run.add_argument(
        "--validate-options",
        action="store_true",
        help="Check option-backed identifiers against their listings first.",
    )

    options = sub.add_parser("options", help="List selectable values for a field.")
    options.add_argument("provider")
    options.add_argument("tool")
    options.add_argument("prop")
    options.add_argument("--args", default="{}", help="JSON object of dependent field values.")
    return parser.parse_args(argv)


def _load_args(raw: str) -> Dict[str, Any]:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid --args JSON: {exc}")
    if not isinstance(payload, dict):
        raise SystemExit("Invalid --args JSON: expected an object")
    return payload


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


def _print(value: Any) -> None:
    print(json.dumps(_to_jsonable(value), indent=2, default=str))


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    if args.command == "list":
        _print({provider: [f.__name__ for f in funcs] for provider, funcs in get_provider_action_map().items()})
        return 0

    if args.command == "describe":
        catalog = describe_provider_actions()
        if args.provider:
            if args.provider not in catalog:
                print(f"Unknown provider: {args.provider}", file=sys.stderr)
                return 2
            catalog = {args.provider: catalog[args.provider]}
        _print(catalog)
        return 0

    context = ActionContext.create(args.user_id)
    try:
        if args.command == "run":
            result = dispatch_tool(
                context,
                args.provider,
                args.tool,
                _load_args(args.args),
                validate_options=args.validate_options,
            )
        else:
            result = list_prop_options(context, args.provider, args.tool, args.prop, _load_args(args.args))
    except IntegrationActionError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    _print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
