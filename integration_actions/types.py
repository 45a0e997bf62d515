from __future__ import annotations

from typing import Any, Optional, TypedDict


class SendResult(TypedDict, total=False):
    """
    Raw outcome of a SendGrid mail send as returned by the app client.

    Fields:
      - status_code: HTTP status from the provider (202 on accepted sends).
      - headers: Response headers (includes X-Message-Id when present).
      - body: Decoded JSON body, raw text, or None for empty responses.
    """

    status_code: int
    headers: dict[str, str]
    body: Any


class ActionEvent(TypedDict, total=False):
    provider: str
    tool: str
    payload_keys: list[str]
    user_id: str
    request_id: str
    error: Optional[str]
