from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy.orm import sessionmaker
from app.database.session import SQLALCHEMY_DATABASE_URL, get_engine

from app.log import get_logger

log = get_logger(__name__)


ENGINE = get_engine(SQLALCHEMY_DATABASE_URL)
SessionLocal = sessionmaker(
    bind=ENGINE,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    future=True,
)


def get_db() -> Generator:
    """
    Returns a generator that yields a database session

    Yields:
        Session: A database session object.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        try:
            db.close()
        except Exception as e:
            log.error("Error closing session: %s", e)


@contextmanager
def get_ctx_db(session_factory: Optional[sessionmaker] = None) -> Generator:
    """
    Context manager that creates a database session and yields
    it for use in a 'with' statement.

    Parameters:
        session_factory (sessionmaker, optional): Defaults to ``SessionLocal``.

    Yields:
        Session: A database session.

    Raises:
        Exception: Whatever the block raised, after the session is rolled back.
    """
    db = (session_factory or SessionLocal)()
    try:
        yield db
    except Exception as e:
        log.error("An error occurred while using the database session. Error: %s", e)
        db.rollback()
        raise
    finally:
        db.close()
