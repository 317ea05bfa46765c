"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", alias="CAR_RENTAL_LOG_LEVEL", description="Console log level")
    format: str = Field(
        default="detailed", alias="CAR_RENTAL_LOG_FORMAT", description="Log format (simple, detailed, json)"
    )
    file_dir: str = Field(default="logs", alias="CAR_RENTAL_LOG_FILE_DIR", description="Directory for log files")
    enable_file_logging: bool = Field(
        default=False, alias="CAR_RENTAL_ENABLE_FILE_LOGGING", description="Write logs to a file as well"
    )

    model_config = {"populate_by_name": True}


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    url: str = Field(
        default="sqlite+aiosqlite:///./car_rental.db",
        alias="CAR_RENTAL_DATABASE_URL",
        description="Database connection URL",
    )
    echo: bool = Field(default=False, alias="CAR_RENTAL_DATABASE_ECHO", description="Echo SQL statements")

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="CAR_RENTAL_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Logging format (simple, detailed, json)",
        alias="CAR_RENTAL_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory that receives the log file when file logging is enabled",
        alias="CAR_RENTAL_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Whether to also write logs to a file",
        alias="CAR_RENTAL_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./car_rental.db",
        description="Async connection URL for the rental database",
        alias="CAR_RENTAL_DATABASE_URL",
    )
    database_echo: bool = Field(
        default=False,
        description="Echo emitted SQL statements",
        alias="CAR_RENTAL_DATABASE_ECHO",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))


def get_settings(env_file: Optional[str] = ".env") -> Settings:
    """Load settings, optionally from a different dotenv file."""
    return Settings(_env_file=env_file)


settings = Settings()
