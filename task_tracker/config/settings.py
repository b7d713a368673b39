# task_tracker/config/settings.py
# Runtime configuration for the API, read from the environment

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from task_tracker.exceptions import ConfigurationError

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",                  # Local development frontend
    "http://localhost:3001",
    "http://127.0.0.1:3000",                  # Alternative localhost
]


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup"""

    jwt_secret: str
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60 * 24
    database_url: str = "sqlite:///./task_tracker.db"
    database_sslmode: Optional[str] = None
    bcrypt_rounds: int = 12
    api_prefix: str = "/api"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"

    def __post_init__(self):
        if not self.jwt_secret:
            raise ConfigurationError("JWT_SECRET must be set")
        if self.jwt_expires_minutes <= 0:
            raise ConfigurationError("JWT_EXPIRES_MINUTES must be positive")

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables (and a .env file if present)"""
        load_dotenv()

        origins = os.getenv("CORS_ORIGINS")
        cors_origins = (
            [origin.strip() for origin in origins.split(",") if origin.strip()]
            if origins
            else list(DEFAULT_CORS_ORIGINS)
        )

        try:
            expires_minutes = int(os.getenv("JWT_EXPIRES_MINUTES", 60 * 24))
            bcrypt_rounds = int(os.getenv("BCRYPT_ROUNDS", 12))
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        return cls(
            jwt_secret=os.getenv("JWT_SECRET", ""),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            jwt_expires_minutes=expires_minutes,
            database_url=os.getenv("DATABASE_URL", "sqlite:///./task_tracker.db"),
            database_sslmode=os.getenv("DATABASE_SSLMODE") or None,
            bcrypt_rounds=bcrypt_rounds,
            api_prefix=os.getenv("API_PREFIX", "/api"),
            cors_origins=cors_origins,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
