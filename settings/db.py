from __future__ import annotations

from surrealdb import AsyncSurreal
from settings.config import settings
from db.errors import StoreUnavailable
import pathlib
import logging

logger = logging.getLogger(__name__)


SCHEMA_PATH = pathlib.Path(__file__).resolve().parent / "surreal" / "schema.surql"

db = None
# --- Lifecycle management ---
async def init_db():
    """Initialize SurrealDB connection on app startup."""
    logger.info("=== Connecting to SurrealDB at: %s ===", settings.SURREALDB_URL)
    logger.info("=== Using namespace: %s / database: %s ===", settings.SURREALDB_NS, settings.SURREALDB_DB)
    global db
    client = AsyncSurreal(settings.SURREALDB_URL)
    try:
        await client.signin({
            "username": settings.SURREALDB_USER,
            "password": settings.SURREALDB_PASS
            })
    except Exception as e:
        raise StoreUnavailable(f"Error initializing app database connection. Check your login credentials: {e}") from e

    try:
        await client.use(settings.SURREALDB_NS, settings.SURREALDB_DB)
    except Exception as e:
        raise StoreUnavailable(f"Error initializing app database connection. Check your namespace/database: {e}") from e

    # Load schema once on startup (idempotent DEFINE statements)
    try:
        schema_sql = SCHEMA_PATH.read_text(encoding="utf-8")
        await client.query(schema_sql)
    except Exception:
        logger.warning("Could not apply schema from %s; continuing schemaless", SCHEMA_PATH, exc_info=True)

    db = client
    return db


async def close_db():
    """Close SurrealDB connection on app shutdown."""
    global db
    if db is None:
        return
    try:
        await db.close()
    except Exception as e:
        raise StoreUnavailable("Error closing app database connection") from e
    finally:
        db = None


# --- FastAPI dependencies ---
async def get_db() -> AsyncSurreal:
    """Return the Surreal client for DI and direct usage in tests."""
    if db is None:
        await init_db()
    return db  # type: ignore
