#!/usr/bin/env python3
"""
Configuration Management for Archive Renamer
Uses pydantic-settings for type-safe configuration with environment variable support
"""
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError, CredentialsError
from .models import CatalogCredentials


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # ========== Application Info ==========
    app_name: str = Field(default="Archive Renamer", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")

    # ========== Run Mode ==========
    settings_path: Path = Field(
        default=Path("settings.json"),
        description="Path to the JSON file holding DMM API credentials"
    )
    require_complete_metadata: bool = Field(
        default=True,
        description="Fail when a lookup returns an empty title or maker"
    )

    # ========== HTTP Settings ==========
    request_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="HTTP timeout in seconds (None waits indefinitely)"
    )
    user_agent: Optional[str] = Field(
        default=None,
        description="User-Agent header for catalog requests (requests default if None)"
    )

    # ========== Catalog Endpoints ==========
    fanza_api_url: str = Field(
        default="https://api.dmm.com/affiliate/v3/ItemList",
        description="DMM affiliate ItemList endpoint"
    )
    fanza_detail_url: str = Field(
        default="https://www.dmm.co.jp/dc/doujin/-/detail/=/cid={content_id}",
        description="FANZA doujin detail page template"
    )
    dlsite_detail_url: str = Field(
        default="https://www.dlsite.com/maniax/work/=/product_id/{product_id}.html",
        description="DLsite work page template"
    )

    # ========== Logging Settings ==========
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="ARCHIVE_RENAMER_",  # Environment variables: ARCHIVE_RENAMER_RECURSIVE, etc.
        extra="ignore"
    )

    @field_validator("settings_path")
    @classmethod
    def expand_path(cls, v):
        """Expand user home directory"""
        if isinstance(v, str):
            v = Path(v)
        return v.expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper()

    def to_dict(self) -> dict:
        """Convert settings to dictionary"""
        return self.model_dump()


def load_credentials(path: str | Path) -> CatalogCredentials:
    """
    Read DMM API credentials from a JSON file.

    Args:
        path: File containing {"api_id": ..., "affiliate_id": ...}

    Raises:
        CredentialsError: If the file is unreadable or has the wrong shape
    """
    path = Path(path)
    try:
        content = path.read_bytes()
    except OSError as e:
        raise CredentialsError(str(path), str(e)) from e

    try:
        return CatalogCredentials.model_validate_json(content)
    except ValidationError as e:
        raise CredentialsError(str(path), str(e)) from e


# Singleton instance
_settings: Optional[Settings] = None


def _load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigurationError(fields or "settings", str(e)) from e


def get_settings() -> Settings:
    """Get or create settings singleton"""
    global _settings
    if _settings is None:
        _settings = _load_settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment/file"""
    global _settings
    _settings = _load_settings()
    return _settings
