from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

PACKAGE_DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """
    Application configuration using Pydantic Settings.
    Environment variables are loaded from .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Data provider ("static" reads fixture files, "http" calls an upstream data API)
    data_provider: str = "static"
    data_dir: Path = PACKAGE_DATA_DIR
    data_api_base_url: Optional[str] = None  # Required for "http"; must not be this server

    # Loading behaviour
    fetch_timeout_seconds: Optional[float] = None
    error_message_timeout_seconds: float = 5.0  # How long a load error stays visible

    # Dashboard defaults
    default_date_range_days: int = 30

    log_level: str = "INFO"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.api_cors_origins.split(",")]


# Global settings instance
def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()


settings = get_settings()
