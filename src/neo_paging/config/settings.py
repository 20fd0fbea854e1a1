"""
Configuration for neo-paging.

Settings are read from environment variables prefixed with NEO_PAGING_
(or a .env file) and only shape PageRequest defaults and logging. The
PagedList constructors themselves enforce nothing beyond positive
page number and page size.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PagingSettings(BaseSettings):
    """Paging and logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_PAGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Pagination Configuration
    default_page_size: int = Field(default=20, ge=1)
    max_page_size: Optional[int] = Field(default=None, ge=1)

    # Logging Configuration
    log_level: Optional[str] = Field(default=None)
    log_verbosity: str = Field(default="NORMAL")
    log_format: str = Field(default="simple")

    @field_validator("log_level", "log_verbosity")
    @classmethod
    def _upper(cls, value: Optional[str]) -> Optional[str]:
        return value.upper() if value is not None else None

    @field_validator("log_format")
    @classmethod
    def _lower(cls, value: str) -> str:
        return value.lower()

    @field_validator("max_page_size")
    @classmethod
    def _max_not_below_default(cls, value: Optional[int], info) -> Optional[int]:
        default = info.data.get("default_page_size")
        if value is not None and default is not None and value < default:
            raise ValueError(
                f"max_page_size ({value}) must not be smaller than default_page_size ({default})"
            )
        return value


@lru_cache()
def get_settings() -> PagingSettings:
    """Get cached paging settings."""
    return PagingSettings()
