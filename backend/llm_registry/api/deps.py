import secrets
from collections.abc import Generator

from fastapi import Header
from sqlalchemy.orm import Session

from llm_registry.config.settings import get_settings
from llm_registry.core.identity import ANONYMOUS, SessionIdentity
from llm_registry.db.session import get_sessionmaker


def get_db() -> Generator[Session, None, None]:
    session_factory = get_sessionmaker()
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_identity(authorization: str | None = Header(default=None)) -> SessionIdentity:
    """Resolve the caller's session from an ``Authorization: Bearer`` header."""
    if not authorization:
        return ANONYMOUS
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        return ANONYMOUS
    for idx, admin_token in enumerate(get_settings().admin_tokens):
        if admin_token and secrets.compare_digest(token.encode(), admin_token.encode()):
            return SessionIdentity(user_id=f"admin:{idx}", is_admin=True)
    return ANONYMOUS
