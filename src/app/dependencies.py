from collections.abc import Iterator

from sqlalchemy.orm import Session

from src.app.database import get_db_session


# --- DB SESSION ---
def get_db() -> Iterator[Session]:
    """
    Provides a SQLAlchemy database session.
    Use as Depends(get_db) in routers.
    """
    with get_db_session() as db:
        yield db
