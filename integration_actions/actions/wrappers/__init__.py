"""Action wrappers for individual providers."""

from .sendgrid import sendgrid_send_email
from .webflow import webflow_get_order, webflow_list_orders, webflow_list_sites

__all__ = [
    "sendgrid_send_email",
    "webflow_get_order",
    "webflow_list_orders",
    "webflow_list_sites",
]
