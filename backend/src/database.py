"""SQLAlchemy engine and sessions for the vendor roster.

Every Celery task opens its own session from SessionLocal. Commit
boundaries inside the creation pipeline belong to the repositories; other
callers use get_db_session() for a self-contained unit of work.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from config import get_settings


def _engine_options(url: str, echo: bool) -> Dict[str, Any]:
    options: Dict[str, Any] = {"pool_pre_ping": True, "echo": echo}
    if url.startswith("sqlite"):
        # Worker threads and test threads share the file database
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(pool_size=5, max_overflow=10)
    return options


_settings = get_settings()
DATABASE_URL = _settings.DATABASE_URL

engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL, _settings.DEBUG))

SessionLocal = sessionmaker(bind=engine, autoflush=False)


@contextmanager
def get_db_session() -> Iterator[Session]:
    """Yield a session that commits when the block exits cleanly.

    An exception inside the block rolls the session back and is re-raised.

    Example:
        with get_db_session() as session:
            ensure_registration_sequence(session)
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
