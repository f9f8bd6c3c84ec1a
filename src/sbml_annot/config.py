"""
Configuration management for sbml_annot.

Uses pydantic-settings for environment variable loading and validation.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SBML_ANNOT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Identifier resolution
    identifiers_base_url: str = Field(
        default="http://identifiers.org",
        description="Prefix for every canonical resource URI",
    )
    suppressed_databases: list[str] = Field(
        default_factory=lambda: ["embl"],
        description="Databases that never produce a resource (case-insensitive)",
    )
    reactome_database: str = Field(
        default="reactome",
        description="Database label used for self-references and homologs",
    )

    # Entity traversal
    max_depth: int = Field(
        default=64,
        ge=1,
        description="Maximum nesting depth followed through complexes, sets and polymers",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )


# Global settings instance
settings = Settings()
