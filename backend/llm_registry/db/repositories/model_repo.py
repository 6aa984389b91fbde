from __future__ import annotations

from typing import Any

from sqlalchemy import and_, delete, select, update

from llm_registry.db.models.llm_model import LLMModel
from llm_registry.db.models.llm_provider import LLMProvider
from llm_registry.db.repositories.base_repo import BaseRepository


class ModelRepository(BaseRepository):
    def list_models(self, provider_id: str | None = None) -> list[LLMModel]:
        if provider_id:
            stmt = (
                select(LLMModel)
                .where(LLMModel.provider_id == provider_id)
                .order_by(LLMModel.order.asc())
            )
        else:
            stmt = select(LLMModel)
        return list(self.db.scalars(stmt).all())

    def get_model(self, name: str) -> LLMModel | None:
        return self.db.get(LLMModel, name)

    def find_models(self, provider_id: str, name: str) -> list[LLMModel]:
        stmt = select(LLMModel).where(
            and_(LLMModel.provider_id == provider_id, LLMModel.name == name)
        )
        return list(self.db.scalars(stmt).all())

    def list_available(self) -> list[tuple[LLMProvider, LLMModel]]:
        """Selected models of active providers, by provider order then model order."""
        stmt = (
            select(LLMProvider, LLMModel)
            .join(LLMModel, LLMProvider.provider == LLMModel.provider_id)
            .where(and_(LLMProvider.is_active == 1, LLMModel.selected == 1))
            .order_by(LLMProvider.order.asc(), LLMModel.order.asc())
        )
        return [(row[0], row[1]) for row in self.db.execute(stmt).all()]

    def insert_model(self, **values: Any) -> LLMModel:
        model = LLMModel(**values)
        self.db.add(model)
        self.db.flush()
        return model

    def update_model(self, provider_id: str, name: str, values: dict[str, Any]) -> None:
        # values may rename the primary key, so in-session objects are expired
        # rather than synchronized in place
        self.db.execute(
            update(LLMModel)
            .where(and_(LLMModel.provider_id == provider_id, LLMModel.name == name))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        self.db.expire_all()

    def set_selected(self, name: str, selected: bool) -> None:
        self.db.execute(
            update(LLMModel).where(LLMModel.name == name).values(selected=1 if selected else 0)
        )

    def delete_model(self, name: str) -> None:
        self.db.execute(delete(LLMModel).where(LLMModel.name == name))

    def set_order(self, provider_id: str, name: str, order: int) -> None:
        self.db.execute(
            update(LLMModel)
            .where(and_(LLMModel.provider_id == provider_id, LLMModel.name == name))
            .values(order=order)
        )
