import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Filigree Solutions API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./data/filigree.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Public asset storage (avatars, brochures, logos, catalog images)
    public_dir: str = "public"
    max_avatar_size_mb: int = 5

    # Startup seed data (SEO pages, contact defaults)
    seed_file: str = "data/seed.yaml"

    # Listing
    default_page_size: int = 10
    max_page_size: int = 100

    # Service catalog
    featured_service_limit: int = 3

    # Theme defaults, used on first load and on reset
    default_site_name: str = "Filigree Solutions"
    default_primary_color: str = "#2563EB"
    default_secondary_color: str = "#9333EA"
    default_gradient_direction: str = "135deg"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL statements
    log_level_http: str = "WARNING"          # httpx / httpcore / multipart parsing
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_storage: str = "INFO"          # asset writes and cleanup

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def max_avatar_size_bytes(self) -> int:
        return self.max_avatar_size_mb * 1024 * 1024

    def model_post_init(self, __context: object) -> None:
        """Clamp listing settings so a bad .env cannot disable pagination."""
        if self.default_page_size < 1 or self.max_page_size < self.default_page_size:
            _config_logger.warning(
                "Invalid page size settings (default=%s, max=%s); falling back to 10/100",
                self.default_page_size,
                self.max_page_size,
            )
            self.default_page_size = 10
            self.max_page_size = 100


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
