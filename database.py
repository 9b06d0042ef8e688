import enum
import threading

from sqlalchemy import create_engine, make_url, text
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from base import Base
from utils.logger import get_logger

logger = get_logger(__name__)

_engine = None
_engine_lock = threading.RLock()


class DatabaseError(Exception):
    """Any failure talking to the store. Carries the driver's message."""


class Fetch(enum.Enum):
    GENERATED_ID = "generated_id"
    ROWS = "rows"
    ROWCOUNT = "rowcount"


# ==================================
# Engine Lifecycle
# ==================================

def init_pool(database_url, min_conn=1, max_conn=10):
    """
    Create the process-wide engine. No connection is opened until the first
    statement runs. Pooled connections are pinged before each checkout, so
    ones the server dropped are replaced instead of failing a request.
    """
    global _engine
    options = {'pool_pre_ping': True}
    if make_url(database_url).get_backend_name() != 'sqlite':
        options.update(pool_size=min_conn, max_overflow=max(max_conn - min_conn, 0))
    with _engine_lock:
        close_pool()
        _engine = create_engine(database_url, **options)


def _get_engine():
    with _engine_lock:
        if _engine is None:
            raise DatabaseError("Database pool not initialized. Call init_pool() first.")
        return _engine


def close_pool():
    """Close every pooled connection."""
    global _engine
    with _engine_lock:
        if _engine is not None:
            _engine.dispose()
            _engine = None
            logger.info("Database connection pool closed.")


def _message(error):
    # The driver's own text, without SQLAlchemy's statement and docs suffix.
    if isinstance(error, DBAPIError) and error.orig is not None:
        return str(error.orig).strip()
    return str(error).strip()


def _rollback(conn):
    try:
        conn.rollback()
    except SQLAlchemyError:
        logger.warning("Rollback failed; the connection will be discarded.", exc_info=True)


# ==================================
# Statement Execution
# ==================================

def execute(sql, params=None, fetch=Fetch.ROWCOUNT):
    """
    Run one statement with named bind parameters (``:name``) on a pooled
    connection.

    GENERATED_ID expects an ``INSERT ... RETURNING id`` and returns that id,
    ROWS returns every row as a dict keyed by column name, ROWCOUNT returns
    the number of affected rows. Commits on success, rolls back on failure.
    """
    try:
        with _get_engine().connect() as conn:
            try:
                result = conn.execute(text(sql), params or {})
                if fetch is Fetch.GENERATED_ID:
                    value = result.scalar_one()
                elif fetch is Fetch.ROWS:
                    value = [dict(row) for row in result.mappings()]
                else:
                    value = result.rowcount
                conn.commit()
                return value
            except SQLAlchemyError:
                _rollback(conn)
                raise
    except SQLAlchemyError as e:
        raise DatabaseError(_message(e)) from e


def check_connection():
    """Return True when the store answers a trivial query."""
    try:
        execute("SELECT 1", fetch=Fetch.ROWS)
    except DatabaseError as e:
        logger.error("DB connection failed: %s", e)
        return False
    return True


# ==================================
# Schema Creation
# ==================================

def create_db_tables():
    """Create the users and posts tables if they do not exist yet."""
    # Register the table classes on Base.metadata.
    import models  # noqa: F401

    try:
        Base.metadata.create_all(bind=_get_engine())
    except SQLAlchemyError as e:
        raise DatabaseError(_message(e)) from e
    logger.info("Database tables created/updated successfully.")
