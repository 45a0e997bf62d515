"""ActionContext: per-invocation context handed to every action."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from integration_actions.user_identity import normalize_user_id


@dataclass
class ActionContext:
    """
    Context for a single action invocation.

    Fields:
        user_id: Tenant/account identifier (normalized); selects the app clients
        request_id: Unique identifier for this invocation
        extra: Dictionary for additional caller data
    """

    user_id: str
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.user_id = normalize_user_id(self.user_id)

    @classmethod
    def create(cls, user_id: str | None = None, **kwargs) -> ActionContext:
        """
        Factory method to create an ActionContext.

        Args:
            user_id: Tenant/account identifier (falls back to ACTIONS_USER_ID)
            **kwargs: Additional fields (request_id, extra)
        """
        return cls(user_id=normalize_user_id(user_id), **kwargs)
