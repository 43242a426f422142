"""Configuration management for the AKS access posture service."""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

# Environment variable names other tooling relies on
AZURE_SUBSCRIPTION_ID_ENV_VAR = "AZURE_SUBSCRIPTION_ID"
AZURE_RESOURCE_GROUP_ENV_VAR = "AZURE_RESOURCE_GROUP"


@dataclass(frozen=True)
class AzureEnvVars:
    """Names of the environment variables holding the Azure target."""

    subscription_id: str = AZURE_SUBSCRIPTION_ID_ENV_VAR
    resource_group: str = AZURE_RESOURCE_GROUP_ENV_VAR


DEFAULT_AZURE_ENV_VARS = AzureEnvVars()


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "AKS Access Posture"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT

    # API Configuration
    api_prefix: str = "/api/v1"
    allowed_origins: str = "*"

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_json: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False

    # Health Check
    health_check_path: str = "/health"
    readiness_check_path: str = "/ready"

    @property
    def allowed_origin_list(self) -> List[str]:
        """Parse allowed origins from comma-separated string."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience function for getting settings
settings = get_settings()
