"""
SQLite database setup with SQLAlchemy.
"""
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from app.config import get_settings
import logging

logger = logging.getLogger(__name__)

settings = get_settings()


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"check_same_thread": False}  # Needed for SQLite
    return {}


engine = create_engine(
    settings.database_url,
    connect_args=_connect_args(settings.database_url)
)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db() -> Session:
    """
    Dependency function to get database session.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Initialize database tables."""
    bind = bind or engine
    try:
        from app.models import person, astronaut_detail, astronaut_duty, audit_log

        # Create all tables
        Base.metadata.create_all(bind=bind)
        logger.info("Database tables created successfully")

        tables = inspect(bind).get_table_names()
        logger.info(f"Database tables: {tables}")

    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise
