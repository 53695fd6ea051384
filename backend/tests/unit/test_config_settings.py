"""Unit tests for application settings configuration."""

from pathlib import Path

from app.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_listing_defaults():
    settings = Settings(_env_file=None)
    assert settings.default_page_size == 10
    assert settings.max_page_size == 100
    assert settings.featured_service_limit == 3


def test_invalid_page_sizes_fall_back():
    settings = Settings(_env_file=None, default_page_size=0, max_page_size=5)
    assert settings.default_page_size == 10
    assert settings.max_page_size == 100


def test_avatar_limit_in_bytes():
    assert Settings(_env_file=None, max_avatar_size_mb=2).max_avatar_size_bytes == 2 * 1024 * 1024
