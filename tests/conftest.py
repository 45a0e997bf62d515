from __future__ import annotations

import pytest

from integration_actions import registry
from integration_actions.core.context import ActionContext

from tests.fakes.fake_apps import StubSendGridApp, StubWebflowApp

TEST_USER = "test-user"

_PROVIDER_ENV = (
    "SENDGRID_API_KEY",
    "SENDGRID_BASE_URL",
    "WEBFLOW_API_TOKEN",
    "WEBFLOW_BASE_URL",
    "ACTIONS_FAKE_CLIENT_FACTORY",
    "ACTIONS_HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _isolated_registry(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ACTIONS_USER_ID", TEST_USER)
    for name in _PROVIDER_ENV:
        monkeypatch.delenv(name, raising=False)
    registry.clear_registry()
    yield
    registry.clear_registry()


@pytest.fixture
def context() -> ActionContext:
    return ActionContext.create(TEST_USER, request_id="req-1")


@pytest.fixture
def sendgrid_app() -> StubSendGridApp:
    app = StubSendGridApp()
    registry.register_client("sendgrid", app, TEST_USER)
    return app


@pytest.fixture
def webflow_app() -> StubWebflowApp:
    app = StubWebflowApp()
    registry.register_client("webflow", app, TEST_USER)
    return app
