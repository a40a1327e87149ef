"""
Conexión a base de datos PostgreSQL

Este módulo centraliza el acceso a la base de datos:
- Engine y pool de conexiones de SQLAlchemy
- Session factory y dependencia de FastAPI (get_db)
- Verificación de conectividad con reintentos

Author: TM3
Updated: 2026-03-02
"""
import logging
import time

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, URL
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# SQLAlchemy Configuration
# ============================================================================

def build_engine(url: URL) -> Engine:
    """
    Create the SQLAlchemy engine for a database URL

    Pool sizing only applies to server databases; SQLite manages its own pool.
    """
    if url.get_backend_name() == "sqlite":
        return create_engine(url)

    return create_engine(
        url,
        pool_pre_ping=True,  # Verificar conexión antes de usar
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )


engine = build_engine(settings.database_url)

# Session Factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base para modelos
Base = declarative_base()


def get_db():
    """
    FastAPI dependency para obtener sesión de SQLAlchemy

    Usage:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ============================================================================
# Connectivity check with retry
# ============================================================================

def wait_for_database(bind: Engine = None, max_retries: int = 3, retry_delay: float = 1.0) -> None:
    """
    Block until the database answers a trivial query

    Retries connection failures with exponential backoff between attempts.

    Args:
        bind: Engine to check (defaults to the application engine)
        max_retries: Maximum number of connection attempts (default: 3)
        retry_delay: Initial delay between retries in seconds (default: 1.0)

    Raises:
        sqlalchemy.exc.OperationalError: If all retry attempts fail
    """
    bind = bind or engine

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            with bind.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.debug(f"Database connection successful on attempt {attempt}")
            return

        except OperationalError as e:
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            if attempt == max_retries:
                logger.error(f"All {max_retries} connection attempts failed")
                raise

            delay = retry_delay * (2 ** (attempt - 1))
            logger.info(f"Retrying in {delay:.2f} seconds...")
            time.sleep(delay)
