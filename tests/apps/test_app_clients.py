from __future__ import annotations

import logging
from typing import Any, Dict, List

import pytest
import requests

from integration_actions.apps import SendGridApp, WebflowApp
from integration_actions.apps._http import redact_headers
from integration_actions.core.exceptions import AppRequestError


class FakeResponse:
    def __init__(self, status_code: int, payload: Any = None, text: str = "", headers: Dict[str, str] | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self.headers = headers or {}
        if payload is not None:
            self.content = b"json"
        else:
            self.content = text.encode()

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, *responses: FakeResponse):
        self.responses = list(responses)
        self.requests: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.requests.append({"method": method, "url": url, **kwargs})
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


def test_sendgrid_send_email_posts_body_with_bearer_auth():
    session = FakeSession(FakeResponse(202, headers={"X-Message-Id": "abc"}))
    app = SendGridApp("SG.key", "https://sg.test/", timeout=5, session=session)
    body = {"personalizations": [], "from": {"email": "a@b.com"}, "subject": "s", "content": []}

    result = app.send_email(body)

    assert result == {"status_code": 202, "headers": {"X-Message-Id": "abc"}, "body": None}
    sent = session.requests[0]
    assert sent["method"] == "POST"
    assert sent["url"] == "https://sg.test/v3/mail/send"
    assert sent["json"] == body
    assert sent["timeout"] == 5
    assert sent["headers"]["Authorization"] == "Bearer SG.key"


def test_sendgrid_error_status_raises_app_request_error():
    session = FakeSession(FakeResponse(400, text='{"errors":[{"message":"bad from"}]}'))
    app = SendGridApp("SG.key", session=session)

    with pytest.raises(AppRequestError) as excinfo:
        app.send_email({})

    assert excinfo.value.provider == "sendgrid"
    assert excinfo.value.status_code == 400
    assert "bad from" in excinfo.value.detail


def test_transport_errors_propagate():
    class BrokenSession(FakeSession):
        def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
            raise requests.ConnectionError("unreachable")

    app = SendGridApp("SG.key", session=BrokenSession())

    with pytest.raises(requests.ConnectionError):
        app.send_email({})


def test_webflow_get_order_builds_path_and_version_header():
    order = {"orderId": "1585-7F5", "status": "pending"}
    session = FakeSession(FakeResponse(200, payload=order))
    app = WebflowApp("wf-token", "https://wf.test", session=session)

    assert app.get_order(site_id="S1", order_id="1585-7F5") == order
    sent = session.requests[0]
    assert sent["method"] == "GET"
    assert sent["url"] == "https://wf.test/sites/S1/order/1585-7F5"
    assert sent["headers"]["accept-version"] == "1.0.0"
    assert sent["headers"]["Authorization"] == "Bearer wf-token"


def test_webflow_listings():
    session = FakeSession(
        FakeResponse(200, payload=[{"_id": "S1", "name": "Main"}]),
        FakeResponse(200, payload=[{"orderId": "O1"}]),
    )
    app = WebflowApp("wf-token", "https://wf.test", session=session)

    assert app.list_sites() == [{"_id": "S1", "name": "Main"}]
    assert app.list_orders("S1", limit=10) == [{"orderId": "O1"}]
    assert session.requests[1]["url"] == "https://wf.test/sites/S1/orders"
    assert session.requests[1]["params"] == {"limit": 10}


def test_webflow_escapes_identifiers():
    session = FakeSession(FakeResponse(200, payload={}))
    app = WebflowApp("wf-token", "https://wf.test", session=session)

    app.get_order("S 1", "a/b")

    assert session.requests[0]["url"] == "https://wf.test/sites/S%201/order/a%2Fb"


def test_client_init_log_redacts_token(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="integration_actions.apps._http")

    WebflowApp("very-secret", session=FakeSession())

    assert "very-secret" not in caplog.text
    assert "Bearer *****" in caplog.text


def test_redact_headers_keeps_other_values():
    assert redact_headers({"Authorization": "Bearer x", "accept-version": "1.0.0"}) == {
        "Authorization": "Bearer *****",
        "accept-version": "1.0.0",
    }


def test_close_closes_session():
    session = FakeSession()
    app = SendGridApp("SG.key", session=session)

    app.close()

    assert session.closed is True
