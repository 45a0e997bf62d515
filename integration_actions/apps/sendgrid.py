from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from integration_actions.settings import DEFAULT_HTTP_TIMEOUT, SENDGRID_DEFAULT_BASE_URL
from integration_actions.types import SendResult

from ._http import HTTPAppClient


class SendGridApp(HTTPAppClient):
    """Twilio SendGrid v3 client used by the sendgrid actions."""

    provider = "sendgrid"

    def __init__(
        self,
        api_key: str,
        base_url: str = SENDGRID_DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        super().__init__(base_url, headers=headers, timeout=timeout, session=session)

    def send_email(self, config: Dict[str, Any]) -> SendResult:
        # A successful send answers 202 with an empty body.
        resp = self._request("POST", "/v3/mail/send", json_body=config)
        return {
            "status_code": resp.status_code,
            "headers": dict(resp.headers),
            "body": self._decode_body(resp),
        }
