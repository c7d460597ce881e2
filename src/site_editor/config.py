"""Configuration management for Site Editor."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Content used for a fresh document and new sections
    default_title: str = Field(
        default="My Website",
        alias="SITE_EDITOR_DEFAULT_TITLE",
    )
    default_text: str = Field(
        default="Welcome to my website",
        alias="SITE_EDITOR_DEFAULT_TEXT",
    )
    text_placeholder: str = Field(
        default="New paragraph",
        alias="SITE_EDITOR_TEXT_PLACEHOLDER",
    )
    image_placeholder: str = Field(
        default="https://placeholder.com/image.jpg",
        alias="SITE_EDITOR_IMAGE_PLACEHOLDER",
    )
    image_alt: str = Field(
        default="Image",
        alias="SITE_EDITOR_IMAGE_ALT",
    )

    # Persistence (a single slot in a file-backed key-value store)
    storage_dir: Path = Field(
        default=Path(".site_editor"),
        alias="SITE_EDITOR_STORAGE_DIR",
    )
    storage_key: str = Field(
        default="websiteContent",
        alias="SITE_EDITOR_STORAGE_KEY",
    )

    # Export
    export_filename: str = Field(
        default="my-website.html",
        alias="SITE_EDITOR_EXPORT_FILENAME",
    )

    log_level: str = Field(
        default="WARNING",
        alias="SITE_EDITOR_LOG_LEVEL",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
