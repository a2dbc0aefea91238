# src/init_db.py
import logging

from src.app.database import engine
from src.app.models import models

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def init_db():
    """
    Force-create tables based on models.py.
    This ignores Alembic migrations and just builds the schema directly.
    """
    logger.info("--- INITIALIZING DATABASE ---")
    try:
        models.Base.metadata.create_all(bind=engine)
        logger.info("--- TABLES CREATED SUCCESSFULLY ---")
    except Exception as e:
        logger.error(f"Database init failed: {e}")
        raise

if __name__ == "__main__":
    init_db()
