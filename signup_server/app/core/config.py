"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
server starts on port 3000 without any configuration at all.
"""

import os
from dataclasses import dataclass, field


def _env_port() -> int:
    return int(os.getenv("PORT", "3000"))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Signup Server"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "0.1.0"))
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=_env_port)
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  When empty, logs only go to the
    # console.
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    @property
    def base_url(self) -> str:
        """Address announced in the startup log line."""
        return f"http://localhost:{self.port}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
