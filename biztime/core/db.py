import logging

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

from biztime.core.config import get_settings

logger = logging.getLogger(__name__)


# ----------------------------------------------------
# 1. ENGINE FACTORY
# ----------------------------------------------------
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with foreign key enforcement off
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    """
    Build the shared engine. The pool behind it is safe to use from
    concurrent requests; each request checks out its own connection.
    """
    if database_url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})

    engine = create_engine(database_url, echo=echo, **kwargs)

    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


# ----------------------------------------------------
# 2. SESSION FACTORY (bound in configure_engine)
# ----------------------------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

engine: Engine | None = None


def configure_engine(database_url: str | None = None, **kwargs) -> Engine:
    """
    Create the engine for `database_url` (settings by default) and bind the
    session factory to it. Replaces any previously configured engine.
    """
    global engine

    settings = get_settings()
    url = database_url or settings.DATABASE_URL
    kwargs.setdefault("echo", settings.DATABASE_ECHO)

    if engine is not None:
        engine.dispose()

    engine = create_db_engine(url, **kwargs)
    SessionLocal.configure(bind=engine)
    logger.info("Database engine configured for %s", engine.url.render_as_string(hide_password=True))
    return engine


# ----------------------------------------------------
# 3. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------
# 4. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db():
    """
    FastAPI dependency: yields a DB session, one per request.
    """
    if engine is None:
        configure_engine()

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ----------------------------------------------------
# 5. SCHEMA BOOTSTRAP
# ----------------------------------------------------
def table_exists(table_name: str) -> bool:
    inspector = inspect(engine)
    return table_name in inspector.get_table_names()


def init_db():
    """
    Creates the companies and invoices tables when they are missing.
    Existing tables are left as they are.
    """
    from biztime.models.company_model import Company
    from biztime.models.invoice_model import Invoice

    if engine is None:
        configure_engine()

    missing = [
        model.__tablename__
        for model in (Company, Invoice)
        if not table_exists(model.__tablename__)
    ]
    if not missing:
        logger.info("Database schema already present")
        return

    for table_name in missing:
        logger.info("Creating table: %s", table_name)
    Base.metadata.create_all(bind=engine)
