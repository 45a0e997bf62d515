from __future__ import annotations

import inspect
import logging
from importlib import import_module
from threading import RLock
from typing import TYPE_CHECKING, Any, Dict

from integration_actions.apps import SendGridApp, WebflowApp
from integration_actions.settings import Settings, get_settings
from integration_actions.user_identity import ensure_user_id, normalize_user_id

if TYPE_CHECKING:
    from integration_actions.core.context import ActionContext

logger = logging.getLogger(__name__)

KNOWN_PROVIDERS: tuple[str, ...] = ("sendgrid", "webflow")

CLIENTS_BY_USER: Dict[str, Dict[str, Any]] = {}
_INITIALIZED_USERS: set[str] = set()
_REGISTRY_LOCK = RLock()


def _get_bucket_unlocked(uid: str) -> Dict[str, Any]:
    return CLIENTS_BY_USER.setdefault(uid, {})


def _install_fake_clients(uid: str, factory_path: str) -> bool:
    if not factory_path:
        return False
    try:
        module_name, func_name = factory_path.rsplit(":", 1)
        module = import_module(module_name)
        factory = getattr(module, func_name)
    except (ValueError, ImportError, AttributeError) as exc:
        raise RuntimeError(f"Invalid fake client factory '{factory_path}': {exc}") from exc

    # Factories may or may not accept a user_id kwarg.
    params = inspect.signature(factory).parameters.values()
    if any(p.name == "user_id" or p.kind is p.VAR_KEYWORD for p in params):
        clients = factory(user_id=uid)
    else:
        clients = factory()
    if not isinstance(clients, dict):
        raise RuntimeError("Fake client factory must return a dict of provider -> client instances.")
    with _REGISTRY_LOCK:
        bucket = _get_bucket_unlocked(uid)
        bucket.clear()
        bucket.update(clients)
    logger.info("Installed fake clients for user=%s providers=%s", uid, sorted(clients))
    return True


def _build_clients(settings: Settings) -> Dict[str, Any]:
    clients: Dict[str, Any] = {}
    if settings.sendgrid_api_key:
        clients["sendgrid"] = SendGridApp(
            settings.sendgrid_api_key,
            settings.sendgrid_base_url,
            timeout=settings.http_timeout,
        )
    if settings.webflow_api_token:
        clients["webflow"] = WebflowApp(
            settings.webflow_api_token,
            settings.webflow_base_url,
            timeout=settings.http_timeout,
        )
    return clients


def init_registry(user_id: str | None = None, settings: Settings | None = None) -> None:
    """(Re)build the app clients for a user from settings or the fake factory."""
    uid = normalize_user_id(ensure_user_id(user_id))
    settings = settings or get_settings()

    if _install_fake_clients(uid, settings.fake_client_factory):
        with _REGISTRY_LOCK:
            _INITIALIZED_USERS.add(uid)
        return

    clients = _build_clients(settings)
    with _REGISTRY_LOCK:
        bucket = _get_bucket_unlocked(uid)
        for provider in KNOWN_PROVIDERS:
            bucket.pop(provider, None)
        bucket.update(clients)
        _INITIALIZED_USERS.add(uid)
    logger.debug("Registry initialized for user=%s providers=%s", uid, sorted(clients))


def _ensure_initialized(uid: str) -> None:
    with _REGISTRY_LOCK:
        if uid in _INITIALIZED_USERS:
            return
    init_registry(uid)


def register_client(provider: str, client: Any, user_id: str | None = None) -> None:
    """Install an explicit client for a provider, overriding configuration."""
    uid = normalize_user_id(user_id)
    with _REGISTRY_LOCK:
        _get_bucket_unlocked(uid)[provider] = client
        _INITIALIZED_USERS.add(uid)


def get_configured_providers(user_id: str | None = None) -> set[str]:
    uid = normalize_user_id(user_id)
    _ensure_initialized(uid)
    with _REGISTRY_LOCK:
        return set(_get_bucket_unlocked(uid).keys())


def get_client(provider: str, user_id: str | None = None) -> Any | None:
    """Return the app client for a provider/user, if registered."""
    uid = normalize_user_id(user_id)
    _ensure_initialized(uid)
    with _REGISTRY_LOCK:
        return _get_bucket_unlocked(uid).get(provider)


def get_app_client(context: "ActionContext", provider: str) -> Any | None:
    return get_client(provider, context.user_id)


def is_registered(provider: str, user_id: str | None = None) -> bool:
    return get_client(provider, user_id) is not None


def clear_registry() -> None:
    with _REGISTRY_LOCK:
        CLIENTS_BY_USER.clear()
        _INITIALIZED_USERS.clear()
