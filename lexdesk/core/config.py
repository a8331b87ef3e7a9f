"""
LexDesk - Configuration Management
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml


class Settings(BaseSettings):
    """Application settings loaded from environment variables and config files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------
    APP_NAME: str = Field(default="LexDesk", description="Application name")
    APP_ENV: str = Field(default="development", description="Environment name")
    DEBUG: bool = Field(default=False, description="Debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    FIRM_NAME: str = Field(default="the firm", description="Firm named in assistant prompts")

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------
    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    WORKERS: int = Field(default=2, description="Number of workers")
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    # -------------------------------------------------------------------------
    # LLM Providers
    # -------------------------------------------------------------------------
    ANTHROPIC_API_KEY: Optional[str] = Field(default=None, description="Anthropic API key")
    OPENAI_API_KEY: Optional[str] = Field(default=None, description="OpenAI API key")

    DEFAULT_LLM_PROVIDER: str = Field(default="anthropic", description="Default LLM provider")
    DEFAULT_LLM_MODEL: str = Field(default="claude-sonnet-4-20250514", description="Default model")
    LLM_TEMPERATURE: float = Field(default=0.3, description="LLM temperature")
    LLM_MAX_TOKENS: int = Field(default=2048, description="Max tokens for generation")
    GENERATION_TIMEOUT_SECONDS: float = Field(
        default=60.0, description="Upper bound on a single answer generation call"
    )

    @field_validator("DEFAULT_LLM_PROVIDER")
    @classmethod
    def validate_provider(cls, v):
        """Only providers with a client implementation are accepted."""
        if v not in ("anthropic", "openai"):
            raise ValueError(f"Unsupported LLM provider: {v}")
        return v

    # -------------------------------------------------------------------------
    # Retrieval
    # -------------------------------------------------------------------------
    RANKING_PRESET: str = Field(default="enhanced", description="Ranking preset: basic, enhanced")
    CONTEXT_EXCERPT_LIMIT: int = Field(
        default=3000, gt=0, description="Maximum characters of each document in the context"
    )

    @field_validator("RANKING_PRESET")
    @classmethod
    def validate_ranking_preset(cls, v):
        """Ensure the preset names one of the built-in ranking presets."""
        if v not in ("basic", "enhanced"):
            raise ValueError(f"Unknown ranking preset: {v}")
        return v

    # -------------------------------------------------------------------------
    # Document Store
    # -------------------------------------------------------------------------
    SEED_SAMPLE_DOCUMENTS: bool = Field(
        default=True, description="Load the sample case documents on startup"
    )

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------
    @property
    def BASE_DIR(self) -> Path:
        """Get the base directory of the project."""
        return Path(__file__).parent.parent.parent

    @property
    def CONFIG_DIR(self) -> Path:
        """Get the config directory."""
        return self.BASE_DIR / "configs"

    def load_yaml_config(self, name: str) -> dict:
        """Load a YAML configuration file."""
        config_path = self.CONFIG_DIR / f"{name}.yaml"
        if config_path.exists():
            with open(config_path) as f:
                return yaml.safe_load(f) or {}
        return {}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
