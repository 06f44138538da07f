"""Database base configuration"""

import logging
import sys

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from sdh_inventory.infrastructure.config.settings import settings

logger = logging.getLogger(__name__)

# Get database URL
try:
    database_url = settings.get_database_url()
except Exception as e:
    logger.error("Error getting database URL: %s", e)
    sys.exit(1)


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


# Create database engine with appropriate connect_args
try:
    if settings.DATABASE_TYPE == "postgresql":
        logger.info(
            "Connecting to PostgreSQL database: %s@%s:%s",
            settings.DB_NAME, settings.DB_HOST, settings.DB_PORT,
        )
        engine = create_engine(
            database_url,
            pool_pre_ping=True,  # Verify connections before using
            pool_size=10,
            max_overflow=20,
        )
        # Test connection
        with engine.connect() as conn:
            logger.info("PostgreSQL connection successful")
    elif settings.DATABASE_TYPE == "sqlite":
        # SQLite needs check_same_thread=False
        logger.info("Using SQLite database: %s", database_url)
        if _is_memory_sqlite(database_url):
            # One shared connection, otherwise every session sees an empty database
            engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
            )
    else:
        raise ValueError(f"Unsupported database type: {settings.DATABASE_TYPE}")
except Exception as e:
    logger.error("Database connection error: %s", e)
    logger.error(
        "Check DB_HOST=%s DB_PORT=%s DB_NAME=%s DB_USER=%s in the .env file",
        settings.DB_HOST, settings.DB_PORT, settings.DB_NAME, settings.DB_USER,
    )
    sys.exit(1)

# autocommit=False means we need to explicitly commit transactions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """Get database session

    This is a FastAPI dependency that provides a database session.
    Repositories commit their own transactions; this only closes the session.
    """
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        yield db
    except Exception as e:
        logger.error("Database session error: %s", e)
        db.rollback()
        raise
    finally:
        db.close()


def init_db():
    """Initialize database - create all tables"""
    from sdh_inventory.infrastructure.database import models  # noqa: F401  register models

    Base.metadata.create_all(bind=engine)
