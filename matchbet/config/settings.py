"""
Application settings using pydantic-settings.

Loads configuration from environment variables with validation.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MongoSettings(BaseSettings):
    """MongoDB connection settings shared by both services."""

    model_config = SettingsConfigDict(
        env_prefix="MONGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="MongoDB host")
    port: int = Field(default=27017, ge=1, le=65535, description="MongoDB port")
    root_user: str = Field(default="admin", description="MongoDB root username")
    root_password: SecretStr = Field(
        default=SecretStr("secret"), description="MongoDB root password"
    )
    championship_db: str = Field(
        default="championship_db", description="Database holding teams and matches"
    )
    betting_db: str = Field(default="betting_db", description="Database holding bets")
    auth_source: str = Field(default="admin", description="Authentication database")

    # Connection pool settings
    min_pool_size: int = Field(default=5, ge=1, description="Minimum connection pool size")
    max_pool_size: int = Field(default=50, ge=1, description="Maximum connection pool size")
    max_idle_time_ms: int = Field(default=60000, ge=0, description="Max idle time in milliseconds")

    # Timeouts
    connect_timeout_ms: int = Field(default=5000, ge=1000, description="Connection timeout in ms")
    server_selection_timeout_ms: int = Field(
        default=5000, ge=1000, description="Server selection timeout in ms"
    )

    @computed_field  # type: ignore[misc]
    @property
    def uri(self) -> str:
        """Build MongoDB connection URI."""
        password = self.root_password.get_secret_value()
        return (
            f"mongodb://{self.root_user}:{password}@{self.host}:{self.port}"
            f"/?authSource={self.auth_source}"
        )


class AppSettings(BaseSettings):
    """Application-level settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    name: str = Field(default="Match Betting Services", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    debug: bool = Field(default=False, description="Debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    # HTTP servers
    host: str = Field(default="127.0.0.1", description="Bind address for both services")
    championship_port: int = Field(
        default=8080, ge=1, le=65535, description="Championship service port"
    )
    betting_port: int = Field(default=8081, ge=1, le=65535, description="Betting service port")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


class ChampionshipClientSettings(BaseSettings):
    """Where the betting service reaches the championship service."""

    model_config = SettingsConfigDict(
        env_prefix="CHAMPIONSHIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the championship service",
    )


class Settings(BaseSettings):
    """Main settings container."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    mongo: MongoSettings = Field(default_factory=MongoSettings)
    app: AppSettings = Field(default_factory=AppSettings)
    championship: ChampionshipClientSettings = Field(default_factory=ChampionshipClientSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()
