from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from llm_registry.config.defaults import DEFAULT_API_STYLE
from llm_registry.db.base import Base


class LLMProvider(Base):
    __tablename__ = "llm_settings"

    provider: Mapped[str] = mapped_column(Text, primary_key=True)
    provider_name: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    api_style: Mapped[str] = mapped_column(Text, nullable=False, default=DEFAULT_API_STYLE)
    logo: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    endpoint: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # Fernet ciphertext, see utils/encryption.py
    apikey: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    order: Mapped[Optional[int]] = mapped_column("order", Integer, nullable=True)
    type: Mapped[str] = mapped_column(Text, nullable=False, default="default")
