"""
config.py
---------
Process-wide configuration. Values come from the environment (or a .env
file) and are read once at startup into an immutable Settings object.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "postgresql://postgres:@localhost:5432/hyperlocal"
DEFAULT_PORT = 7071
DEFAULT_CORS_ORIGIN = "http://localhost:5173"


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    db_pool_min: int = 1
    db_pool_max: int = 10
    port: int = DEFAULT_PORT
    cors_origin: str = DEFAULT_CORS_ORIGIN
    create_tables: bool = False
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build Settings from environment variables, loading .env first."""
    load_dotenv()
    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        db_pool_min=int(os.getenv("DB_POOL_MIN", "1")),
        db_pool_max=int(os.getenv("DB_POOL_MAX", "10")),
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
        cors_origin=os.getenv("CORS_ORIGIN", DEFAULT_CORS_ORIGIN),
        create_tables=_as_bool(os.getenv("CREATE_TABLES", "false")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
