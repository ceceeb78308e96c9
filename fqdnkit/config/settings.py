"""Configuration management using Pydantic settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RuleSettings(BaseSettings):
    """Validation rules applied to every name parsed in this process."""

    model_config = SettingsConfigDict(
        env_prefix="FQDN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields
    )

    strict: bool = Field(default=False, description="Enable every RFC restriction")
    label_length_63: bool = Field(default=False, description="Limit labels to 63 octets")
    name_length_255: bool = Field(default=False, description="Limit encoded names to 255 octets")
    restricted_charset: bool = Field(default=False, description="Reject underscores in labels")
    trailing_dot: bool = Field(default=False, description="Render names with a trailing dot")
    no_edge_hyphen: bool = Field(default=True, description="Reject labels starting or ending with '-'")


class ApplicationSettings(BaseSettings):
    """Application-level settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields
    )

    # Application settings
    file_encoding: str = Field(default="utf-8", description="Input file encoding")
    verbose: bool = Field(default=False, description="Verbose output")
    unicode_output: bool = Field(default=False, description="Display internationalized labels decoded")


@lru_cache
def get_settings() -> tuple[ApplicationSettings, RuleSettings]:
    """
    Get application and rule settings.

    Returns:
        Tuple of (ApplicationSettings, RuleSettings)
    """
    return ApplicationSettings(), RuleSettings()
