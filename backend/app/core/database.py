from sqlalchemy import create_engine
from sqlalchemy import text
from sqlalchemy.pool import StaticPool
from sqlmodel import Session
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
import logging
from fastapi import HTTPException

from .config import settings

logger = logging.getLogger(__name__)


def engine_options(database_url: str) -> dict:
    """Connection pool options for the given database URL."""
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url == "sqlite://":
            # Every session must see the same in-memory database
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": True,
        "pool_recycle": 300,  # Recycle connections every 5 minutes
        "pool_size": 10,
        "max_overflow": 20,
    }


@retry(
    stop=stop_after_attempt(5),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    retry=retry_if_exception_type((Exception,)),
    reraise=True
)
def create_database_engine():
    """Create database engine with retry logic."""
    logger.info(f"Attempting to connect to database: {settings.DATABASE_URL.split('@')[1] if '@' in settings.DATABASE_URL else settings.DATABASE_URL.split(':')[0]}")

    engine = create_engine(
        settings.DATABASE_URL,
        echo=settings.DEBUG,
        **engine_options(settings.DATABASE_URL),
    )

    # Test the connection
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
        logger.info("Database connection successful!")

    return engine


try:
    engine = create_database_engine()
except Exception as e:
    logger.error(f"Failed to create database engine after retries: {e}")
    # Keep serving; requests that need the database get a 503
    engine = None


def get_db():
    """Get database session."""
    if not engine:
        raise HTTPException(
            status_code=503,
            detail="Database is temporarily unavailable. Please try again later."
        )

    with Session(engine) as session:
        yield session
