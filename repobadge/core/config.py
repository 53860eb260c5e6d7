"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name rendered on every page.
        version: Current service version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "RepoBadge"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    def version_info(self) -> str:
        """Return the version string embedded in rendered pages."""
        return f"{self.project_name} v{self.version}"


settings = Settings()
