from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from llm_registry.config.settings import get_settings

_engine: Engine | None = None
_sessionmaker: sessionmaker[Session] | None = None


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    # ON DELETE CASCADE from llm_settings to models depends on this pragma
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_engine() -> Engine:
    global _engine
    if _engine is None:
        url = get_settings().database_url
        is_sqlite = url.startswith("sqlite")
        # reorder batches write from worker threads
        connect_args = {"check_same_thread": False} if is_sqlite else {}
        _engine = create_engine(url, future=True, connect_args=connect_args)
        if is_sqlite:
            _enable_sqlite_foreign_keys(_engine)
    return _engine


def get_sessionmaker() -> sessionmaker[Session]:
    global _sessionmaker
    if _sessionmaker is None:
        _sessionmaker = sessionmaker(bind=get_engine(), expire_on_commit=False, class_=Session)
    return _sessionmaker


def reset_engine() -> None:
    """Dispose the engine and forget the session factory bound to it."""
    global _engine, _sessionmaker
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _sessionmaker = None
