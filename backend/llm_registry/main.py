import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from llm_registry.api.routes.models import router as models_router
from llm_registry.api.routes.providers import router as providers_router
from llm_registry.config.settings import get_settings
from llm_registry.db.seed import seed_app_data
from llm_registry.db.session import get_sessionmaker
from llm_registry.middleware.error_handler import (
    NotAllowedError,
    ServiceError,
    catch_all_handler,
    not_allowed_handler,
    service_error_handler,
    validation_error_handler,
    value_error_handler,
)

logger = logging.getLogger(__name__)


def _configure_app_logging() -> None:
    """Ensure llm_registry.* logs are visible under the same sink as uvicorn error logs."""
    app_logger = logging.getLogger("llm_registry")
    uvicorn_error_logger = logging.getLogger("uvicorn.error")

    if uvicorn_error_logger.handlers:
        app_logger.handlers = list(uvicorn_error_logger.handlers)
        app_logger.setLevel(uvicorn_error_logger.level or logging.INFO)
        app_logger.propagate = False
        return

    if not app_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(levelname)s:     %(name)s - %(message)s")
        )
        app_logger.addHandler(handler)
    app_logger.setLevel(logging.INFO)
    app_logger.propagate = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    _configure_app_logging()

    # Schema managed by Alembic; seeding only fills in missing built-ins
    session_factory = get_sessionmaker()
    with session_factory() as session:
        seed_app_data(session)
        session.commit()
    logger.info("Provider registry ready")

    yield


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(NotAllowedError, not_allowed_handler)
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, catch_all_handler)

    app.include_router(providers_router)
    app.include_router(models_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
