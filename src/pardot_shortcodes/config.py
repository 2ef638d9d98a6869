import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Catalog cache
    cache_prefix: str = os.getenv("PARDOT_CACHE_PREFIX", "pardot")
    cache_ttl: int = int(os.getenv("PARDOT_CACHE_TTL", "600"))  # 10 minutes default

    # Pardot credentials
    pardot_email: str | None = os.getenv("PARDOT_EMAIL")
    pardot_password: str | None = os.getenv("PARDOT_PASSWORD")
    pardot_user_key: str | None = os.getenv("PARDOT_USER_KEY")

    # Pardot API
    pardot_base_url: str = os.getenv("PARDOT_BASE_URL", "https://pi.pardot.com")
    pardot_api_version: int = int(os.getenv("PARDOT_API_VERSION", "3"))
    pardot_timeout: float = float(os.getenv("PARDOT_TIMEOUT", "30"))

    # Site policy
    force_https: bool = os.getenv("PARDOT_FORCE_HTTPS", "false").lower() == "true"
    secure_host: str = os.getenv("PARDOT_SECURE_HOST", "go.pardot.com")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def has_credentials(self) -> bool:
        """Check if all three Pardot credentials are configured.

        Returns:
            True if email, password and user key are set, False otherwise
        """
        return bool(self.pardot_email and self.pardot_password and self.pardot_user_key)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_ttl <= 0:
            raise ValueError("PARDOT_CACHE_TTL must be a positive number of seconds")

        if self.pardot_api_version not in [3, 4]:
            raise ValueError(
                f"PARDOT_API_VERSION must be one of [3, 4], got {self.pardot_api_version}"
            )

        if not self.secure_host or "/" in self.secure_host:
            raise ValueError("PARDOT_SECURE_HOST must be a bare host name")

        if self.log_level.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL is not a known logging level: {self.log_level}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=False,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
