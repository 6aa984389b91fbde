import os

import pytest
from cryptography.fernet import Fernet
from fastapi.testclient import TestClient

os.environ["DATABASE_URL"] = "sqlite:///./test_llm_registry.db"
os.environ["ENCRYPTION_KEY"] = Fernet.generate_key().decode()
os.environ["ADMIN_TOKENS"] = '["test-admin-token"]'
os.environ["MESSAGE_LOCALE"] = "en"

import llm_registry.db.models  # noqa: E402,F401
from llm_registry.config.settings import get_settings  # noqa: E402
from llm_registry.db.base import Base  # noqa: E402
from llm_registry.db.seed import seed_app_data  # noqa: E402
from llm_registry.db.session import get_engine, get_sessionmaker, reset_engine  # noqa: E402
from llm_registry.main import create_app  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    get_settings.cache_clear()
    reset_engine()


@pytest.fixture(autouse=True)
def fresh_db(test_env) -> None:
    """Every test starts from the seeded built-in providers and models."""
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with get_sessionmaker()() as session:
        seed_app_data(session)
        session.commit()


@pytest.fixture
def db():
    with get_sessionmaker()() as session:
        yield session


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": "Bearer test-admin-token"}
