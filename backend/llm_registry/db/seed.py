from __future__ import annotations

import logging

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session

from llm_registry.config.defaults import BUILTIN_PROVIDERS
from llm_registry.config.settings import get_settings
from llm_registry.db.base import Base
from llm_registry.db.models.llm_model import LLMModel
from llm_registry.db.models.llm_provider import LLMProvider

logger = logging.getLogger(__name__)


def _ensure_schema(db: Session) -> None:
    """Create the registry tables on a fresh database that Alembic has not touched."""
    bind = db.get_bind()
    existing = set(inspect(bind).get_table_names())
    if {LLMProvider.__tablename__, LLMModel.__tablename__} <= existing:
        return
    # Importing models ensures all declarative mappings are registered.
    import llm_registry.db.models  # noqa: F401

    Base.metadata.create_all(bind=bind, checkfirst=True)
    logger.info("Created missing database tables during startup seed")


def seed_builtin_providers(db: Session) -> None:
    """Insert built-in providers and models that are missing; never overwrite."""
    existing_providers = set(db.scalars(select(LLMProvider.provider)).all())
    existing_models = set(db.scalars(select(LLMModel.name)).all())
    added = 0
    for p_idx, entry in enumerate(BUILTIN_PROVIDERS, start=1):
        if entry["provider"] not in existing_providers:
            db.add(
                LLMProvider(
                    provider=entry["provider"],
                    provider_name=entry["provider_name"],
                    api_style=entry["api_style"],
                    logo=entry.get("logo"),
                    is_active=0,
                    order=p_idx,
                    type="default",
                )
            )
            added += 1
    # providers must exist before their models reference them
    db.flush()
    for entry in BUILTIN_PROVIDERS:
        for m_idx, model in enumerate(entry["models"], start=1):
            if model["name"] in existing_models:
                continue
            db.add(
                LLMModel(
                    name=model["name"],
                    provider_id=entry["provider"],
                    display_name=model["display_name"],
                    max_tokens=model.get("max_tokens"),
                    support_vision=1 if model.get("support_vision") else 0,
                    selected=1,
                    order=m_idx,
                    type="default",
                )
            )
    db.flush()
    if added:
        logger.info("Seeded %d built-in providers", added)


def seed_app_data(db: Session) -> None:
    _ensure_schema(db)
    if get_settings().seed_builtin_providers:
        seed_builtin_providers(db)
