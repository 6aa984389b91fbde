"""Caller identity passed explicitly into every registry operation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from llm_registry.config.messages import message
from llm_registry.middleware.error_handler import NotAllowedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionIdentity:
    user_id: str | None = None
    is_admin: bool = False


ANONYMOUS = SessionIdentity()


def require_admin(identity: SessionIdentity | None, action: str) -> None:
    """Raise NotAllowedError unless identity carries the administrator flag."""
    if identity is None or not identity.is_admin:
        logger.warning(
            "Denied %s for %s", action, identity.user_id if identity else None
        )
        raise NotAllowedError(message("not_allowed"))
