from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager
import logging

from src.app.config import get_settings

settings = get_settings()
logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # Single shared connection so in-memory databases survive across sessions
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
        }
    return {
        "pool_pre_ping": True,
        "pool_recycle": 3600, # Recycle connections every hour
    }


try:
    engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

    SessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine
    )

    logger.info("Database engine created successfully.")

except Exception as e:
    logger.error(f"Failed to create database engine: {e}")
    raise


@contextmanager
def get_db_session():
    """
    Provides a transactional scope around a series of operations.
    Handles session creation, rollback on error, and closing.
    """
    db: Session | None = None
    try:
        db = SessionLocal()
        yield db
    except Exception:
        if db:
            db.rollback()
        raise
    finally:
        if db:
            db.close()
