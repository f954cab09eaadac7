"""
Runtime settings for the catalog API and the hello-world demo.

Values come from environment variables with sensible defaults, so both
services run without any configuration.  Set variables before importing
this module; ``settings`` is built once at import time.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _split_csv(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Product Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console handler.
    log_file: str = os.getenv("LOG_FILE", "")

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8081"))
    hello_port: int = int(os.getenv("HELLO_PORT", "8080"))

    # Comma-separated list, e.g. CORS_ORIGINS="http://localhost:5173,http://localhost:3000"
    cors_origins: List[str] = field(default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*")))

    # Load the five demo products when the service starts.
    seed_data: bool = os.getenv("SEED_DATA", "true").lower() in {"1", "true", "yes"}


settings = Settings()
