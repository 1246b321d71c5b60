"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "medcard")
DB_USER: str = os.getenv("DB_USER", "medcard_user")
DB_PASS: str = os.getenv("DB_PASS", "")

# Full SQLAlchemy URL; when set it wins over the DB_* fields above.
DATABASE_URL: str = os.getenv("DATABASE_URL", "")

DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "5"))
DB_AUTO_MIGRATE: bool = _as_bool(os.getenv("DB_AUTO_MIGRATE", "true"))

# ── gRPC ──────────────────────────────────────────────────
GRPC_HOST: str = os.getenv("GRPC_HOST", "[::]")
GRPC_PORT: int = int(os.getenv("GRPC_PORT", "50051"))
GRPC_MAX_WORKERS: int = int(os.getenv("GRPC_MAX_WORKERS", "10"))
GRPC_GRACE_SECONDS: float = float(os.getenv("GRPC_GRACE_SECONDS", "5"))

# ── Pagination ────────────────────────────────────────────
DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "20"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
