from __future__ import annotations

from typing import Any

from sqlalchemy import Row, delete, select, update

from llm_registry.db.models.llm_provider import LLMProvider
from llm_registry.db.repositories.base_repo import BaseRepository

SUMMARY_COLUMNS = (
    LLMProvider.provider,
    LLMProvider.provider_name,
    LLMProvider.is_active,
    LLMProvider.api_style,
    LLMProvider.logo,
)


class ProviderRepository(BaseRepository):
    def get_provider(self, provider_id: str) -> LLMProvider | None:
        stmt = select(LLMProvider).where(LLMProvider.provider == provider_id).limit(1)
        return self.db.scalars(stmt).first()

    def list_summaries(self, *, active_only: bool = False) -> list[Row[Any]]:
        """Return only the non-sensitive columns, never endpoint or apikey."""
        stmt = select(*SUMMARY_COLUMNS)
        if active_only:
            stmt = stmt.where(LLMProvider.is_active == 1)
        return list(self.db.execute(stmt).all())

    def list_providers(self) -> list[LLMProvider]:
        stmt = select(LLMProvider).order_by(LLMProvider.order.asc())
        return list(self.db.scalars(stmt).all())

    def insert_provider(self, **values: Any) -> LLMProvider:
        provider = LLMProvider(**values)
        self.db.add(provider)
        self.db.flush()
        return provider

    def update_provider(self, provider_id: str, values: dict[str, Any]) -> None:
        if not values:
            return
        self.db.execute(
            update(LLMProvider).where(LLMProvider.provider == provider_id).values(**values)
        )

    def delete_provider(self, provider_id: str) -> None:
        self.db.execute(delete(LLMProvider).where(LLMProvider.provider == provider_id))

    def set_order(self, provider_id: str, order: int) -> None:
        self.db.execute(
            update(LLMProvider).where(LLMProvider.provider == provider_id).values(order=order)
        )
