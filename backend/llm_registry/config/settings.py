from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    app_name: str = "llm-registry-backend"
    database_url: str = "sqlite:///./llm_registry.db"
    # Bearer tokens that resolve to an administrator session
    admin_tokens: list[str] = []
    message_locale: str = "en"
    seed_builtin_providers: bool = True
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:4173",
        "http://127.0.0.1:4173",
    ]


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()
