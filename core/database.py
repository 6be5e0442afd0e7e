import logging
import os

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from core.config import get_settings

logger = logging.getLogger(__name__)

IN_MEMORY_URL = "sqlite://"

# Base class for all models
Base = declarative_base()


def _make_engine(url: str) -> Engine:
    # One shared connection for the whole process; callers serialize access
    return create_engine(
        url,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


def _open_store(db_path: str) -> Engine:
    """Open the SQLite file and make sure it is actually readable.

    SQLAlchemy connects lazily, so the probe forces the open (and a header
    read) here rather than on the first real query.
    """
    engine = _make_engine(f"sqlite:///{db_path}")
    try:
        with engine.connect() as conn:
            conn.execute(text("PRAGMA schema_version"))
    except SQLAlchemyError:
        engine.dispose()
        raise
    return engine


def open_in_memory() -> Engine:
    """Transient store; nothing survives the process."""
    return _make_engine(IN_MEMORY_URL)


def create_schema(engine: Engine) -> bool:
    """Create missing tables. Returns False (after logging) on failure."""
    # Make sure the models are registered on Base.metadata
    import models.patient  # noqa: F401
    import models.activity_log  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as exc:
        logger.error("Failed to create tables: %s", exc)
        return False
    return True


def resolve_db_path(path=None, capabilities=None) -> str:
    """Pick the database location.

    Explicit argument first, then PATIENTS_DB_PATH, then the platform default.
    """
    if path:
        return os.fspath(path)

    settings = get_settings()
    if settings.database_path:
        return settings.database_path

    if capabilities is None:
        from services.platform_service import detect_capabilities
        capabilities = detect_capabilities()
    return capabilities.database_path()


def initialize(path=None, capabilities=None) -> Engine:
    """Open (or create) the patient store and apply the schema.

    Falls back to an in-memory database when the file cannot be opened or
    its schema cannot be created, so the application stays usable for the
    session. A schema failure on the fallback store is logged and otherwise
    ignored; later operations will report it.
    """
    db_path = resolve_db_path(path, capabilities)

    try:
        engine = _open_store(db_path)
        logger.info("Opened database at %s", db_path)
    except SQLAlchemyError as exc:
        logger.error("Failed to open database at %s: %s", db_path, exc)
        engine = None

    if engine is not None:
        if create_schema(engine):
            logger.info("Database initialized successfully at: %s", db_path)
            return engine
        engine.dispose()

    logger.warning("Falling back to in-memory database")
    engine = open_in_memory()
    if create_schema(engine):
        logger.info("Database initialized successfully at: :memory:")
    return engine
