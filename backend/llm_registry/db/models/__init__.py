from llm_registry.db.models.llm_model import LLMModel
from llm_registry.db.models.llm_provider import LLMProvider

__all__ = ["LLMModel", "LLMProvider"]
