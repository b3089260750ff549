"""LicenseFlow runtime configuration.

Settings come from the process environment or a local .env file and cover
only operational concerns: logging, CORS and the dev server bind address.

Business thresholds (budget tiers, approval limits) are not configuration;
they live in domain.licensing.policy.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runtime settings.

    Environment Variables:
        ENVIRONMENT: Deployment environment (development, staging, production)
        DEBUG: Enable debug mode (default False)
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
        CORS_ORIGINS: Comma-separated list of allowed origins
        HOST: Bind address for the development server
        PORT: Bind port for the development server
    """

    # Application
    APP_NAME: str = "LicenseFlow API"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # HTTP
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings; call get_settings.cache_clear() in tests to reload."""
    return Settings()
