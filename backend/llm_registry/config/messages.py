"""User-facing messages returned in structured fail results."""

from llm_registry.config.settings import get_settings

DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "model_exists": "A model with the same name already exists",
        "model_missing": "The model has already been deleted",
        "model_name_taken": "Another model already uses this name",
        "provider_exists": "A provider with the same id already exists",
        "provider_missing": "The provider does not exist",
        "not_allowed": "not allowed",
    },
    "zh": {
        "model_exists": "已存在相同名称的模型",
        "model_missing": "该模型已经被删除",
        "model_name_taken": "该名称已被其他模型使用",
        "provider_exists": "已存在相同名称的服务商",
        "provider_missing": "该服务商不存在",
        "not_allowed": "无权操作",
    },
}


def message(key: str, locale: str | None = None) -> str:
    """Look up a message, falling back to English and then to the key itself."""
    locale = locale or get_settings().message_locale
    catalog = MESSAGES.get(locale) or MESSAGES[DEFAULT_LOCALE]
    return catalog.get(key) or MESSAGES[DEFAULT_LOCALE].get(key, key)
