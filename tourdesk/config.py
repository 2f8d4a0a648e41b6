"""Process configuration for tourdesk.

Settings are read once from the environment (and `.env`) and then treated as
immutable. The token signing secret has no default: startup fails without it.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from dotenv import load_dotenv


class ConfigError(RuntimeError):
    """Raised when required configuration is missing or malformed."""


@dataclass(frozen=True)
class Settings:
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    jwt_expiration_hours: int = 24
    port: int = 8000


def int_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def load_settings() -> Settings:
    """Build Settings from the process environment.

    Raises:
        ConfigError: If JWT_SECRET_KEY is unset or blank, or a numeric value is malformed
    """
    load_dotenv()

    secret = (os.getenv("JWT_SECRET_KEY") or "").strip()
    if not secret:
        raise ConfigError("JWT_SECRET_KEY must be set")

    expiration_hours = int_env("JWT_EXPIRATION_HOURS", "24")
    if expiration_hours <= 0:
        raise ConfigError("JWT_EXPIRATION_HOURS must be positive")

    return Settings(
        jwt_secret_key=secret,
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        jwt_expiration_hours=expiration_hours,
        port=int_env("PORT", "8000"),
    )


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide Settings (loaded on first use)."""
    return load_settings()
