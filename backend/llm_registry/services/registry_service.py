"""Provider/model registry: the data-access facade behind the settings UI."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from llm_registry.config.defaults import DEFAULT_PROVIDER_NAME
from llm_registry.config.messages import message
from llm_registry.core.identity import SessionIdentity, require_admin
from llm_registry.db.models.llm_model import LLMModel
from llm_registry.db.repositories.model_repo import ModelRepository
from llm_registry.db.repositories.provider_repo import ProviderRepository
from llm_registry.db.session import get_sessionmaker
from llm_registry.schemas.registry import (
    AvailableModelOut,
    CustomModelIn,
    CustomProviderIn,
    ModelOrderItem,
    ModelOut,
    OperationResult,
    ProviderOrderItem,
    ProviderSettingsOut,
    ProviderSettingsUpdate,
    ProviderSummary,
)
from llm_registry.utils.encryption import decrypt, encrypt

logger = logging.getLogger(__name__)

# request field -> column attribute
_PROVIDER_FIELDS = {
    "isActive": "is_active",
    "apikey": "apikey",
    "providerName": "provider_name",
    "endpoint": "endpoint",
    "apiStyle": "api_style",
    "logo": "logo",
    "order": "order",
}
_NOT_NULL_PROVIDER_COLUMNS = {"is_active", "provider_name", "api_style"}


def _provider_columns(fields: dict[str, Any]) -> dict[str, Any]:
    columns: dict[str, Any] = {}
    for key, value in fields.items():
        column = _PROVIDER_FIELDS[key]
        if value is None and column in _NOT_NULL_PROVIDER_COLUMNS:
            continue
        if column == "is_active":
            value = 1 if value else 0
        elif column == "apikey":
            value = encrypt(value)
        columns[column] = value
    return columns


def _model_columns(model_in: CustomModelIn) -> dict[str, Any]:
    return {
        "name": model_in.name,
        "provider_id": model_in.providerId,
        "display_name": model_in.displayName,
        "max_tokens": model_in.maxTokens,
        "support_vision": 1 if model_in.supportVision else 0,
        "selected": 1 if model_in.selected else 0,
        "type": "custom",
    }


def _summary_out(row: Any) -> ProviderSummary:
    return ProviderSummary(
        provider=row.provider,
        providerName=row.provider_name,
        isActive=bool(row.is_active),
        apiStyle=row.api_style,
        logo=row.logo,
    )


def _model_out(m: LLMModel) -> ModelOut:
    return ModelOut(
        name=m.name,
        providerId=m.provider_id,
        displayName=m.display_name,
        maxTokens=m.max_tokens,
        supportVision=bool(m.support_vision),
        selected=bool(m.selected),
        order=m.order,
        type=m.type,
    )


class ProviderRegistryService:
    """Every operation takes the caller's identity; admin-only ones check it first."""

    def __init__(
        self, db: Session, session_factory: sessionmaker[Session] | None = None
    ) -> None:
        self.providers = ProviderRepository(db)
        self.models = ModelRepository(db)
        self._session_factory = session_factory

    @property
    def session_factory(self) -> sessionmaker[Session]:
        return self._session_factory or get_sessionmaker()

    # Providers

    def upsert_provider_settings(
        self,
        identity: SessionIdentity,
        provider_id: str,
        values: ProviderSettingsUpdate,
    ) -> None:
        """Update the supplied fields of a provider, inserting it when missing."""
        require_admin(identity, "upsert_provider_settings")
        columns = _provider_columns(values.model_dump(exclude_unset=True))
        if self.providers.get_provider(provider_id) is not None:
            self.providers.update_provider(provider_id, columns)
            logger.info("Updated provider %s fields %s", provider_id, sorted(columns))
            return
        provider_name = columns.pop("provider_name", None) or DEFAULT_PROVIDER_NAME
        self.providers.insert_provider(
            provider=provider_id, provider_name=provider_name, **columns
        )
        logger.info("Inserted provider %s", provider_id)

    def list_provider_summaries(self, identity: SessionIdentity) -> list[ProviderSummary]:
        return [_summary_out(row) for row in self.providers.list_summaries()]

    def list_provider_settings_full(
        self, identity: SessionIdentity
    ) -> list[ProviderSettingsOut]:
        """All provider columns including credentials, ordered by ``order``."""
        require_admin(identity, "list_provider_settings_full")
        return [
            ProviderSettingsOut(
                provider=p.provider,
                providerName=p.provider_name,
                isActive=bool(p.is_active),
                apiStyle=p.api_style,
                logo=p.logo,
                endpoint=p.endpoint,
                apikey=decrypt(p.apikey),
                order=p.order,
                type=p.type,
            )
            for p in self.providers.list_providers()
        ]

    def list_active_providers(self, identity: SessionIdentity) -> list[ProviderSummary]:
        return [_summary_out(row) for row in self.providers.list_summaries(active_only=True)]

    def add_custom_provider(
        self, identity: SessionIdentity, provider_in: CustomProviderIn
    ) -> OperationResult:
        require_admin(identity, "add_custom_provider")
        if self.providers.get_provider(provider_in.provider) is not None:
            logger.info("Custom provider %s already exists", provider_in.provider)
            return OperationResult(status="fail", message=message("provider_exists"))
        self.providers.insert_provider(
            provider=provider_in.provider,
            provider_name=provider_in.providerName,
            endpoint=provider_in.endpoint,
            api_style=provider_in.apiStyle,
            apikey=encrypt(provider_in.apikey),
            logo=provider_in.logo,
            type="custom",
            is_active=1,
        )
        logger.info("Added custom provider %s", provider_in.provider)
        return OperationResult(status="success")

    def delete_custom_provider(
        self, identity: SessionIdentity, provider_id: str
    ) -> OperationResult:
        require_admin(identity, "delete_custom_provider")
        self.providers.delete_provider(provider_id)
        logger.info("Deleted provider %s", provider_id)
        return OperationResult(status="success")

    # Models

    def list_models(
        self, identity: SessionIdentity, provider_id: str | None = None
    ) -> list[ModelOut]:
        return [_model_out(m) for m in self.models.list_models(provider_id)]

    def list_available_models(self, identity: SessionIdentity) -> list[AvailableModelOut]:
        """Selected models of active providers, tagged with provider name and logo."""
        result = []
        for provider, model in self.models.list_available():
            result.append(
                AvailableModelOut(
                    **_model_out(model).model_dump(),
                    providerName=provider.provider_name,
                    providerLogo=provider.logo or "",
                )
            )
        return result

    def set_model_selected(
        self, identity: SessionIdentity, model_name: str, selected: bool
    ) -> None:
        self.models.set_selected(model_name, selected)

    def delete_model(self, identity: SessionIdentity, model_name: str) -> None:
        require_admin(identity, "delete_model")
        self.models.delete_model(model_name)
        logger.info("Deleted model %s", model_name)

    def add_custom_model(
        self, identity: SessionIdentity, model_in: CustomModelIn
    ) -> OperationResult:
        if self.models.find_models(model_in.providerId, model_in.name):
            logger.info("Custom model %s already exists", model_in.name)
            return OperationResult(status="fail", message=message("model_exists"))
        if self.providers.get_provider(model_in.providerId) is None:
            return OperationResult(status="fail", message=message("provider_missing"))
        # name is the primary key across all providers
        if self.models.get_model(model_in.name) is not None:
            return OperationResult(status="fail", message=message("model_name_taken"))
        self.models.insert_model(**_model_columns(model_in))
        logger.info("Added custom model %s to %s", model_in.name, model_in.providerId)
        return OperationResult(status="success")

    def update_custom_model(
        self, identity: SessionIdentity, old_model_name: str, model_in: CustomModelIn
    ) -> OperationResult:
        if not self.models.find_models(model_in.providerId, old_model_name):
            logger.info("Custom model %s no longer exists", old_model_name)
            return OperationResult(status="fail", message=message("model_missing"))
        if model_in.name != old_model_name and self.models.get_model(model_in.name) is not None:
            return OperationResult(status="fail", message=message("model_name_taken"))
        self.models.update_model(model_in.providerId, old_model_name, _model_columns(model_in))
        logger.info("Updated custom model %s -> %s", old_model_name, model_in.name)
        return OperationResult(status="success")

    # Ordering

    async def reorder_models(
        self,
        identity: SessionIdentity,
        provider_id: str,
        items: list[ModelOrderItem],
    ) -> None:
        """Apply each order as its own transaction, all in flight at once.

        The batch is not atomic: if one update fails the exception propagates and
        updates that already committed are kept.
        """
        require_admin(identity, "reorder_models")
        await asyncio.gather(
            *(
                asyncio.to_thread(self._apply_model_order, provider_id, item.modelId, item.order)
                for item in items
            )
        )
        logger.info("Reordered %d models of %s", len(items), provider_id)

    async def reorder_providers(
        self, identity: SessionIdentity, items: list[ProviderOrderItem]
    ) -> None:
        """Same non-atomic, concurrent semantics as reorder_models."""
        require_admin(identity, "reorder_providers")
        await asyncio.gather(
            *(
                asyncio.to_thread(self._apply_provider_order, item.providerId, item.order)
                for item in items
            )
        )
        logger.info("Reordered %d providers", len(items))

    def _apply_model_order(self, provider_id: str, model_name: str, order: int) -> None:
        with self.session_factory() as session:
            repo = ModelRepository(session)
            try:
                repo.set_order(provider_id, model_name, order)
                repo.commit()
            except Exception:
                repo.rollback()
                raise

    def _apply_provider_order(self, provider_id: str, order: int) -> None:
        with self.session_factory() as session:
            repo = ProviderRepository(session)
            try:
                repo.set_order(provider_id, order)
                repo.commit()
            except Exception:
                repo.rollback()
                raise
