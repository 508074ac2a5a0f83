"""Application settings configuration."""

import logging
import sys

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, overridable through environment variables or a .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Debugging Configuration
    debug: bool = True
    environment: str = "development"  # development, staging, production
    log_level: str = "INFO"

    # Application Configuration
    app_name: str = "Company Employees"
    app_version: str = "1.0.0"
    app_host: str = "127.0.0.1"  # Uvicorn bind address
    app_port: int = 8080
    api_prefix: str = "/api"

    # CORS Configuration ("CorsPolicy")
    enable_cors: bool = True
    cors_origins: list[str] = ["*"]
    cors_exposed_headers: list[str] = ["Location"]

    # Transport security
    enable_https_redirection: bool = True
    hsts_max_age: int = 2592000  # 30 days
    hsts_include_subdomains: bool = False

    # Reverse proxy: trust X-Forwarded-* headers from these hosts
    forwarded_allow_ips: list[str] = ["*"]

    # Static files
    static_files_dir: str = "wwwroot"  # relative to the src directory unless absolute
    static_files_path: str = "/static"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


app_settings = Settings()


def configure_logging(log_level: str = "INFO") -> None:
    """
    Configure application-wide logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    # Configure root logger
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("fastapi").setLevel(logging.WARNING)
