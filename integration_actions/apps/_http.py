"""
Shared HTTP plumbing for the provider app clients.

Each app client owns a single `requests.Session`, adds its provider's auth
headers, performs exactly one request per call and raises `AppRequestError`
for HTTP failures. Transport errors from `requests` propagate untouched.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from integration_actions.core.exceptions import AppRequestError
from integration_actions.settings import DEFAULT_HTTP_TIMEOUT

logger = logging.getLogger(__name__)


def redact_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Mask credentials so headers can be logged."""
    red: Dict[str, str] = {}
    for key, value in headers.items():
        if key.lower() == "authorization" and isinstance(value, str):
            red[key] = value.split(" ")[0] + " *****"
        else:
            red[key] = value
    return red


class HTTPAppClient:
    provider: str = "http"

    def __init__(
        self,
        base_url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.headers = dict(headers or {})
        self.timeout = timeout
        self._session = session or requests.Session()
        logger.info(
            "%s client init url=%s headers=%s",
            self.provider,
            self.base_url,
            redact_headers(self.headers),
        )

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Any = None,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s %s", self.provider, method, path)
        resp = self._session.request(
            method,
            url,
            headers=self.headers,
            params=params,
            json=json_body,
            timeout=self.timeout,
        )
        if resp.status_code >= 400:
            raise AppRequestError(self.provider, resp.status_code, resp.text)
        return resp

    @staticmethod
    def _decode_body(resp: requests.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    def _request_json(self, method: str, path: str, **kwargs: Any) -> Any:
        return self._decode_body(self._request(method, path, **kwargs))

    def close(self) -> None:
        self._session.close()
