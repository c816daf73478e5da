from pathlib import Path
import os

from dotenv import load_dotenv
from sqlalchemy.engine import URL

# Load environment variables from the project's .env (if present).
load_dotenv(Path(__file__).resolve().parents[1] / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "5"))


def _database_url() -> str:
    """DATABASE_URL if set, otherwise a Postgres URL built from DB_*."""
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    return URL.create(
        "postgresql+psycopg2",
        username=os.getenv("DB_USER", "postgres"),
        password=os.getenv("DB_PASSWORD") or None,
        host=os.getenv("DB_HOST", "localhost"),
        port=int(os.getenv("DB_PORT", "5432")),
        database=os.getenv("DB_NAME", "tasks"),
    ).render_as_string(hide_password=False)


def _parse_origins(value: str) -> list:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


DATABASE_URL = _database_url()
CORS_ORIGINS = _parse_origins(os.getenv("CORS_ORIGINS", "*"))
