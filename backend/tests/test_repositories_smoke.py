from llm_registry.db.models.llm_provider import LLMProvider
from llm_registry.db.repositories.model_repo import ModelRepository
from llm_registry.db.repositories.provider_repo import ProviderRepository


def test_provider_repository_smoke(db) -> None:
    repo = ProviderRepository(db)
    providers = repo.list_providers()
    assert [p.provider for p in providers] == ["openai", "claude", "gemini", "deepseek"]
    assert repo.get_provider("openai") is not None
    assert repo.get_provider("missing") is None


def test_summaries_project_only_public_columns(db) -> None:
    row = ProviderRepository(db).list_summaries()[0]
    assert set(row._mapping.keys()) == {"provider", "provider_name", "is_active", "api_style", "logo"}


def test_model_repository_smoke(db) -> None:
    repo = ModelRepository(db)
    openai_models = repo.list_models("openai")
    assert [m.name for m in openai_models] == ["gpt-4o", "gpt-4o-mini", "o3-mini"]
    assert len(repo.list_models()) > len(openai_models)
    assert repo.find_models("openai", "gpt-4o")
    assert repo.find_models("claude", "gpt-4o") == []
    # built-in providers start inactive
    assert repo.list_available() == []


def test_deleting_provider_cascades_to_models(db) -> None:
    ProviderRepository(db).delete_provider("gemini")
    db.commit()
    assert db.get(LLMProvider, "gemini") is None
    assert ModelRepository(db).list_models("gemini") == []


def test_seed_is_idempotent(db) -> None:
    from llm_registry.db.seed import seed_app_data

    before = len(ModelRepository(db).list_models())
    seed_app_data(db)
    db.commit()
    assert len(ModelRepository(db).list_models()) == before
