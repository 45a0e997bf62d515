from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from integration_actions.settings import DEFAULT_HTTP_TIMEOUT, WEBFLOW_DEFAULT_BASE_URL

from ._http import HTTPAppClient

WEBFLOW_API_VERSION = "1.0.0"


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class WebflowApp(HTTPAppClient):
    """Webflow Data API (v1) client used by the webflow actions."""

    provider = "webflow"

    def __init__(
        self,
        api_token: str,
        base_url: str = WEBFLOW_DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        headers = {
            "Authorization": f"Bearer {api_token}",
            "accept-version": WEBFLOW_API_VERSION,
            "Accept": "application/json",
        }
        super().__init__(base_url, headers=headers, timeout=timeout, session=session)

    def list_sites(self) -> List[Dict[str, Any]]:
        return self._request_json("GET", "/sites") or []

    def list_orders(self, site_id: str, limit: int | None = None) -> List[Dict[str, Any]]:
        params = {"limit": limit} if limit is not None else None
        return self._request_json("GET", f"/sites/{_segment(site_id)}/orders", params=params) or []

    def get_order(self, site_id: str, order_id: str) -> Dict[str, Any]:
        return self._request_json("GET", f"/sites/{_segment(site_id)}/order/{_segment(order_id)}")
