# product_api/utils/settings.py
import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


APP_DB_USERNAME = os.getenv("APP_DB_USERNAME", "postgres")
APP_DB_PASSWORD = os.getenv("APP_DB_PASSWORD", "postgres")
APP_DB_NAME = os.getenv("APP_DB_NAME", "products")
APP_DB_HOST = os.getenv("APP_DB_HOST", "localhost")

DATABASE_URL = os.getenv("DATABASE_URL") or URL.create(
    "postgresql+psycopg2",
    username=APP_DB_USERNAME,
    password=APP_DB_PASSWORD,
    host=APP_DB_HOST,
    database=APP_DB_NAME,
).render_as_string(hide_password=False)

DB_STATEMENT_TIMEOUT_MS = int(os.getenv("DB_STATEMENT_TIMEOUT_MS", 5000))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", 5))
DB_RETRY_ATTEMPTS = int(os.getenv("DB_RETRY_ATTEMPTS", 3))
DB_CREATE_TABLES = _as_bool(os.getenv("DB_CREATE_TABLES", "true"))

LIST_MAX_COUNT = int(os.getenv("LIST_MAX_COUNT", 10))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8010))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
