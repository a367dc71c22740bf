"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    TESTING = _env_flag("TESTING")
    DEBUG = _env_flag("DEBUG")

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Session tokens (issued after the identity provider sign-in)
    SESSION_SECRET = os.getenv("SESSION_SECRET", "dev-session-secret")
    SESSION_ISSUER = os.getenv("SESSION_ISSUER", "quantum-link")
    SESSION_AUDIENCE = os.getenv("SESSION_AUDIENCE", "quantum-link-api")
    SESSION_TTL_SECONDS = int(os.getenv("SESSION_TTL_SECONDS", str(30 * 24 * 3600)))

    # Quantum ID (handle) policy
    # Allocation gives up after HANDLE_MAX_ATTEMPTS collisions and leaves the handle unset.
    HANDLE_MAX_ATTEMPTS = int(os.getenv("HANDLE_MAX_ATTEMPTS", "5"))
    HANDLE_FALLBACK_BASE = os.getenv("HANDLE_FALLBACK_BASE", "user")
    HANDLE_SEPARATOR = os.getenv("HANDLE_SEPARATOR", "-")
    HANDLE_MIN_LENGTH = int(os.getenv("HANDLE_MIN_LENGTH", "6"))
    HANDLE_MIN_DIGITS = int(os.getenv("HANDLE_MIN_DIGITS", "4"))

    # Connection requests
    MAX_CATEGORIES = int(os.getenv("MAX_CATEGORIES", "2"))

    # Postgresql Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Redis room-history cache
    USE_HISTORY_CACHE = _env_flag("USE_HISTORY_CACHE")
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    REDIS_CACHE_TTL: int = int(os.getenv("REDIS_CACHE_TTL", "3600"))

    # Client sync (polling) settings
    API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5001")
    API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))
    REQUESTS_POLL_INTERVAL = float(os.getenv("REQUESTS_POLL_INTERVAL", "5"))
    CONVERSATION_POLL_INTERVAL = float(os.getenv("CONVERSATION_POLL_INTERVAL", "3"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    SESSION_SECRET = "test-secret"


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
