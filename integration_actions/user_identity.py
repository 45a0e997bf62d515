"""User identity normalization utilities."""

from __future__ import annotations

import os
from typing import Optional

_DEFAULT_USER_ID = "dev-local"
DEV_DEFAULT_USER_ID = _DEFAULT_USER_ID
DEV_USER_ENV_VAR = "ACTIONS_USER_ID"


def normalize_user_id(user_id: Optional[str] = None) -> str:
    """
    Normalize a user ID, stripping whitespace and lowercasing.

    Args:
        user_id: Raw user identifier (may be None or empty)

    Returns:
        Normalized user ID (defaults to 'dev-local' if empty)
    """
    raw = (user_id or os.getenv(DEV_USER_ENV_VAR) or DEV_DEFAULT_USER_ID or "").strip()
    return raw.lower() if raw else DEV_DEFAULT_USER_ID


def ensure_user_id(user_id: Optional[str] = None) -> str:
    """Return a usable user id, falling back to the environment default."""
    return normalize_user_id(user_id)
