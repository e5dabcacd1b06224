import os
import logging
import secrets
from dotenv import load_dotenv

# Cargar las variables de entorno desde el archivo .env
load_dotenv()

MEMORY_DATABASE_URL = "memory://"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)

_generated_secret = None


def configure_logging():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format=LOG_FORMAT
    )


def get_database_url() -> str:
    """Return DATABASE_URL, failing hard when it is missing."""
    url = os.getenv("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")
    return url


def get_secret_key() -> str:
    global _generated_secret
    key = os.getenv("SECRET_KEY")
    if key:
        return key
    if _generated_secret is None:
        logger.warning("SECRET_KEY is not set, generating a per-process key (sessions will not survive a restart)")
        _generated_secret = secrets.token_urlsafe(32)
    return _generated_secret


def get_token_expire_minutes() -> int:
    return int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "120"))  # 2 hores


def get_cors_origins() -> list:
    raw = os.getenv("CORS_ORIGINS", "http://localhost:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def seed_sample_data_enabled() -> bool:
    return os.getenv("SEED_SAMPLE_DATA", "false").lower() in ("1", "true", "yes")
