import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

DEFAULT_GONE_MESSAGE = "Sorry, the page you requested has been permanently removed."


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")
    key_prefix: str = os.getenv("GONE_KEY_PREFIX", "gone_links")

    # Miss log (0 disables logging)
    max_miss_entries: int = int(os.getenv("MAX_MISS_ENTRIES", "50"))

    # Site identity
    home_url: str = os.getenv("SITE_HOME_URL", "http://localhost:8000/")
    pretty_permalinks: bool = os.getenv("PRETTY_PERMALINKS", "true").lower() == "true"

    # Response body for 410s
    gone_message: str = os.getenv("GONE_MESSAGE", DEFAULT_GONE_MESSAGE)

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.max_miss_entries < 0:
            raise ValueError(f"MAX_MISS_ENTRIES must be zero or positive, got {self.max_miss_entries}")

        if not self.key_prefix:
            raise ValueError("GONE_KEY_PREFIX must not be empty")

        if "://" not in self.home_url:
            raise ValueError(f"SITE_HOME_URL must be a fully qualified URL, got {self.home_url!r}")


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
        decode_responses=True,
    )


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for the API and the CLI."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
