"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # USDA FoodData Central
    usda_api_key: str = ""
    usda_base_url: str = "https://api.nal.usda.gov/fdc/v1"

    # Nutrition lookups
    nutrition_max_concurrency: int = 10  # simultaneous external lookups
    nutrition_timeout: float = 15.0  # request timeout in seconds
    nutrition_max_retries: int = 3
    nutrition_page_size: int = 5

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    @property
    def nutrition_enabled(self) -> bool:
        """Check if a FoodData Central API key is configured."""
        return bool(self.usda_api_key)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
