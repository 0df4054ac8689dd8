from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool
from .config import Settings
import logging

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def build_engine_options(url: str, settings: Settings) -> dict:
    """
    Engine keyword arguments for the given database URL.

    SQLite gets a thread-agnostic connection (FastAPI runs sync endpoints
    in a worker pool); in-memory SQLite must share one connection.
    """
    options = {"echo": settings.DB_ECHO_SQL}

    if url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(url):
            options["poolclass"] = StaticPool
        return options

    options.update(
        poolclass=QueuePool,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,  # Test connection before using (detect disconnects)
        connect_args={
            "connect_timeout": 10,
        },
    )
    return options


class Database:
    """
    Owns the engine and the session factory.

    Created once at application startup and disposed at shutdown; request
    handlers get sessions through `app.api.deps.get_db`.
    """

    def __init__(self, url: str, settings: Settings):
        self.url = url
        self.engine = create_engine(url, **build_engine_options(url, settings))
        self.SessionLocal = sessionmaker(
            autoflush=False,   # Don't auto-flush before queries
            bind=self.engine,
            expire_on_commit=False  # Don't expire objects after commit
        )
        event.listen(self.engine, "connect", _on_connect)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.DATABASE_URL, settings)

    # =============================================================================
    # SESSIONS
    # =============================================================================

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Scoped session for scripts and tests.

        Usage:
            with database.session() as db:
                StudentStore(db).list()
        """
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    # =============================================================================
    # DATABASE UTILITIES
    # =============================================================================

    def create_tables(self):
        """Create all tables defined in models (no-op for existing tables)."""
        # Register models on Base.metadata
        from app.models import student  # noqa: F401

        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=self.engine)
        logger.info("✅ Database tables ready")

    def check_connection(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"❌ Database connection failed: {e}")
            return False

    def close(self):
        logger.info("Closing database engine")
        self.engine.dispose()


# =============================================================================
# EVENT LISTENERS
# =============================================================================

def _on_connect(dbapi_conn, connection_record):
    logger.debug("New database connection established")


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db(settings: Settings) -> Database:
    """
    Open the database and make sure the students table exists.
    Run this when starting the application.
    """
    logger.info("Initializing database...")
    database = Database.from_settings(settings)

    if not database.check_connection():
        database.close()
        raise RuntimeError("Cannot connect to database!")

    database.create_tables()
    logger.info("✅ Database initialized successfully!")
    return database


if __name__ == "__main__":
    """Test database connection when running this file directly."""
    logging.basicConfig(level=logging.INFO)

    from .config import settings, print_config
    print_config()

    db = Database.from_settings(settings)
    if db.check_connection():
        print("✅ Connection successful!")
    else:
        print("❌ Connection failed!")
    db.close()
