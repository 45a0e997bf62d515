"""Environment-driven configuration for the app clients and registry."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

SENDGRID_DEFAULT_BASE_URL = "https://api.sendgrid.com"
WEBFLOW_DEFAULT_BASE_URL = "https://api.webflow.com"
DEFAULT_HTTP_TIMEOUT = 30.0

FAKE_CLIENT_FACTORY_ENV = "ACTIONS_FAKE_CLIENT_FACTORY"


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    sendgrid_api_key: str = ""
    sendgrid_base_url: str = SENDGRID_DEFAULT_BASE_URL
    webflow_api_token: str = ""
    webflow_base_url: str = WEBFLOW_DEFAULT_BASE_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    fake_client_factory: str = ""

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the process environment (after loading `.env`)."""
        load_dotenv(override=False)
        return cls(
            sendgrid_api_key=(os.getenv("SENDGRID_API_KEY") or "").strip(),
            sendgrid_base_url=(os.getenv("SENDGRID_BASE_URL") or SENDGRID_DEFAULT_BASE_URL).rstrip("/"),
            webflow_api_token=(os.getenv("WEBFLOW_API_TOKEN") or "").strip(),
            webflow_base_url=(os.getenv("WEBFLOW_BASE_URL") or WEBFLOW_DEFAULT_BASE_URL).rstrip("/"),
            http_timeout=_env_float("ACTIONS_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            fake_client_factory=(os.getenv(FAKE_CLIENT_FACTORY_ENV) or "").strip(),
        )


def get_settings() -> Settings:
    return Settings.from_env()
