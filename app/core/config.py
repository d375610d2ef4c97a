"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        environment: Deployment environment.
        debug: Force DEBUG logging regardless of log_level.
        docs_enabled: Serve OpenAPI docs at /docs and /docs.json.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_file: Extra file sink for logs. Defaults to logs/app.log in
            development and to no file elsewhere.
        host: Interface the server binds to.
        port: Port the server listens on.
        cors_origin: Allowed CORS origin, "*" for any.
        rate_limit_enabled: Enforce the per-client request budget.
        rate_limit_default: Request budget applied to every route.
        seed_demo_data: Load the demo users into the store at startup.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Users API"
    version: str = "1.0.0"
    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    docs_enabled: bool = True
    log_level: str = "INFO"
    log_file: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origin: str = "*"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "100/minute"
    seed_demo_data: bool = True

    def effective_log_file(self) -> Optional[str]:
        """Return the log file sink to use, if any."""
        if self.log_file:
            return self.log_file
        if self.environment == "development":
            return "logs/app.log"
        return None

    def cors_origins(self) -> list[str]:
        """Return the configured CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]


settings = Settings()
