# Standard library imports
import logging
import os
import secrets
from typing import Final, List, Optional

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Server Configuration
        self.port: Final[int] = int(os.getenv("PORT", "4549"))
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS", "http://localhost:5173,http://localhost:5174"
            ).split(",")
            if origin.strip()
        ]

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "banao-social")

        # JWT Configuration
        secret = os.getenv("JWT_SECRET_KEY", "")
        if not secret:
            # Tokens signed with this secret do not survive a restart
            logger.warning("JWT_SECRET_KEY is not set; using a random per-process secret")
            secret = secrets.token_urlsafe(48)
        self.jwt_secret_key: Final[str] = secret
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )

        # Password hashing work factor
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))

        # Authorization policy (all off by default)
        self.comment_requires_auth: Final[bool] = _env_flag("COMMENT_REQUIRES_AUTH")
        self.delete_requires_auth: Final[bool] = _env_flag("DELETE_REQUIRES_AUTH")
        self.post_owner_field: Final[str] = os.getenv("POST_OWNER_FIELD", "").strip()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
