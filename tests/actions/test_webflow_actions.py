from __future__ import annotations

import pytest

from integration_actions.actions import (
    PropOption,
    webflow_get_order,
    webflow_list_orders,
    webflow_list_sites,
)
from integration_actions.core.exceptions import ActionValidationError, AppRequestError


def test_get_order_forwards_identifiers_and_returns_result_unchanged(context, webflow_app):
    sentinel = {"orderId": "O1", "custom": object()}

    def get_order(site_id, order_id):
        webflow_app.calls.append(("get_order", {"site_id": site_id, "order_id": order_id}))
        return sentinel

    webflow_app.get_order = get_order

    result = webflow_get_order(context, site_id="S1", order_id="O1")

    assert result is sentinel
    assert webflow_app.calls == [("get_order", {"site_id": "S1", "order_id": "O1"})]


@pytest.mark.parametrize(
    ("site_id", "order_id", "missing"),
    [
        (None, "O1", ["siteId"]),
        ("S1", "", ["orderId"]),
        (None, None, ["siteId", "orderId"]),
    ],
)
def test_get_order_requires_both_identifiers(context, webflow_app, site_id, order_id, missing):
    with pytest.raises(ActionValidationError) as excinfo:
        webflow_get_order(context, site_id=site_id, order_id=order_id)

    assert excinfo.value.missing == missing
    assert "siteId and orderId" in str(excinfo.value)
    assert webflow_app.calls == []


def test_get_order_twice_calls_twice(context, webflow_app):
    webflow_get_order(context, site_id="S1", order_id="O1")
    webflow_get_order(context, site_id="S1", order_id="O1")

    assert webflow_app.calls == [
        ("get_order", {"site_id": "S1", "order_id": "O1"}),
        ("get_order", {"site_id": "S1", "order_id": "O1"}),
    ]


def test_get_order_propagates_provider_error(context, webflow_app):
    def failing(site_id, order_id):
        raise AppRequestError("webflow", 404, "Order not found")

    webflow_app.get_order = failing

    with pytest.raises(AppRequestError) as excinfo:
        webflow_get_order(context, site_id="S1", order_id="missing")

    assert excinfo.value.status_code == 404


def test_list_sites_returns_id_label_pairs(context, webflow_app):
    options = webflow_list_sites(context)

    assert options == [PropOption(id="S1", label="Main Store"), PropOption(id="S2", label="Outlet")]


def test_list_orders_uses_order_id_for_label(context, webflow_app):
    options = webflow_list_orders(context, site_id="S1", limit=1)

    assert options == [PropOption(id="O1", label="O1")]
    assert webflow_app.calls == [("list_orders", {"site_id": "S1", "limit": 1})]


def test_list_orders_requires_site(context, webflow_app):
    with pytest.raises(ActionValidationError) as excinfo:
        webflow_list_orders(context)

    assert excinfo.value.missing == ["siteId"]
    assert webflow_app.calls == []
