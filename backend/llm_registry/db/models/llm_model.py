from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from llm_registry.db.base import Base


class LLMModel(Base):
    __tablename__ = "models"

    name: Mapped[str] = mapped_column(Text, primary_key=True)
    provider_id: Mapped[str] = mapped_column(
        ForeignKey("llm_settings.provider", ondelete="CASCADE"), nullable=False
    )
    display_name: Mapped[str] = mapped_column(Text, nullable=False)
    max_tokens: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    support_vision: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    selected: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    order: Mapped[Optional[int]] = mapped_column("order", Integer, nullable=True)
    type: Mapped[str] = mapped_column(Text, nullable=False, default="default")
