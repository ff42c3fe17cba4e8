import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default):
    """Environment variables win over env.yaml; values from the environment are YAML-parsed."""
    raw = os.environ.get(key)
    if raw is None:
        return data.get(key, default)
    return yaml.safe_load(raw) if raw != "" else default


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./auth.db")
    STORE_BACKEND = _get("STORE_BACKEND", "sql")
    API_PREFIX = _get("API_PREFIX", "")
    API_PORT = int(_get("API_PORT", 8000))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = bool(_get("CORS_ALLOW_CREDENTIALS", True))
    LOG_LEVEL = str(_get("LOG_LEVEL", "INFO"))
    APP_NAME = _get("APP_NAME", "Authentication Service")
    APP_VERSION = str(_get("APP_VERSION", "1.0.0"))

    JWT_SECRET = _get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = _get("JWT_ALGORITHM", "HS256")
    SESSION_TOKEN_TTL_HOURS = int(_get("SESSION_TOKEN_TTL_HOURS", 24))
    RESET_TOKEN_TTL_MINUTES = int(_get("RESET_TOKEN_TTL_MINUTES", 60))
    BCRYPT_ROUNDS = int(_get("BCRYPT_ROUNDS", 10))
    STORE_TIMEOUT_SECONDS = float(_get("STORE_TIMEOUT_SECONDS", 10))

    # Hardening switches (see DESIGN.md)
    ROTATE_REFRESH_TOKENS = bool(_get("ROTATE_REFRESH_TOKENS", False))
    RESET_REQUIRES_ACCOUNT = bool(_get("RESET_REQUIRES_ACCOUNT", False))
    EXPOSE_RESET_TOKEN = bool(_get("EXPOSE_RESET_TOKEN", True))
