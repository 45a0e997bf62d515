from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

from integration_actions.actions.fields import KIND_INTEGER, ActionSpec, FieldSpec, check_required
from integration_actions.actions.options import PropOption

from ._common import _clean_payload, _invoke_app, ensure_authorized

if TYPE_CHECKING:
    from integration_actions.core.context import ActionContext


LIST_SITES_SPEC = ActionSpec(
    key="webflow-list-sites",
    name="List Sites",
    description="List the sites available to the Webflow token as selectable options.",
    version="0.0.1",
    provider="webflow",
    tool="webflow_list_sites",
)

LIST_ORDERS_SPEC = ActionSpec(
    key="webflow-list-orders",
    name="List Orders",
    description="List a site's orders as selectable options.",
    version="0.0.1",
    provider="webflow",
    tool="webflow_list_orders",
    fields=(
        FieldSpec(
            "siteId",
            "site_id",
            "Site",
            required=True,
            description="The site whose orders are listed.",
            options="webflow_list_sites",
        ),
        FieldSpec(
            "limit",
            "limit",
            "Limit",
            kind=KIND_INTEGER,
            description="Maximum number of orders to return.",
        ),
    ),
)

GET_ORDER_SPEC = ActionSpec(
    key="webflow-get-order",
    name="Get Order",
    description="Get a order. [See the docs here](https://developers.webflow.com/#get-order)",
    version="0.0.1",
    provider="webflow",
    tool="webflow_get_order",
    fields=(
        FieldSpec(
            "siteId",
            "site_id",
            "Site",
            required=True,
            description="The site that owns the order.",
            options="webflow_list_sites",
        ),
        FieldSpec(
            "orderId",
            "order_id",
            "Order",
            required=True,
            description="The order to retrieve.",
            options="webflow_list_orders",
            options_depends_on=("site_id",),
        ),
    ),
)


def _site_option(site: Dict[str, Any]) -> PropOption:
    site_id = str(site.get("_id") or site.get("id") or "")
    return PropOption(id=site_id, label=str(site.get("name") or site_id))


def _order_option(order: Dict[str, Any]) -> PropOption:
    order_id = str(order.get("orderId") or order.get("id") or "")
    return PropOption(id=order_id, label=order_id)


def webflow_list_sites(context: "ActionContext") -> List[PropOption]:
    """
    List Webflow sites as `{id, label}` options for site identifier fields.
    """
    provider = "webflow"
    tool_name = "webflow_list_sites"
    app = ensure_authorized(context, provider)
    sites = _invoke_app(context, provider, tool_name, app.list_sites)
    return [_site_option(site) for site in sites]


webflow_list_sites.__action_spec__ = LIST_SITES_SPEC


def webflow_list_orders(
    context: "ActionContext",
    site_id: str | None = None,
    limit: int | None = None,
) -> List[PropOption]:
    """
    List a site's orders as `{id, label}` options for order identifier fields.

    Args:
        site_id: Webflow site ID.
        limit: Optional maximum number of orders.
    """
    provider = "webflow"
    tool_name = "webflow_list_orders"
    check_required(LIST_ORDERS_SPEC, {"site_id": site_id})
    app = ensure_authorized(context, provider)
    payload = _clean_payload({"site_id": site_id, "limit": limit})
    orders = _invoke_app(context, provider, tool_name, app.list_orders, **payload)
    return [_order_option(order) for order in orders]


webflow_list_orders.__action_spec__ = LIST_ORDERS_SPEC


def webflow_get_order(
    context: "ActionContext",
    site_id: str | None = None,
    order_id: str | None = None,
) -> Dict[str, Any]:
    """
    Retrieve a single Webflow e-commerce order.

    Args:
        site_id: Webflow site ID (see webflow_list_sites).
        order_id: Order ID within the site (see webflow_list_orders).

    Returns:
        The Webflow app client's order representation, unchanged.
    """
    provider = "webflow"
    tool_name = "webflow_get_order"
    check_required(GET_ORDER_SPEC, {"site_id": site_id, "order_id": order_id})
    app = ensure_authorized(context, provider)
    return _invoke_app(context, provider, tool_name, app.get_order, site_id=site_id, order_id=order_id)


webflow_get_order.__action_spec__ = GET_ORDER_SPEC
