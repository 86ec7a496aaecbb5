"""Configuration loading for the course registration service.

Only connection and serving settings are configurable. Table names (courses,
students, student_registrations) are fixed by the store models.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

DEFAULT_DATABASE_URL = "sqlite:///courseapi.db"
DEFAULT_API_URL = "http://localhost:3000/api"
DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 3000

# Client bundle shipped inside the package
BUNDLED_WEB_DIR = Path(__file__).parent / "web"


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the API server.

    Attributes:
        database_url: SQLAlchemy URL of the backing store.
        api_url: Base API URL injected into the landing page for the client.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        web_dir: Directory holding index.html and the client assets.
    """

    database_url: str = DEFAULT_DATABASE_URL
    api_url: str = DEFAULT_API_URL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    web_dir: Path = field(default_factory=lambda: BUNDLED_WEB_DIR)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from COURSEAPI_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            Parsed settings; unset variables fall back to defaults.

        Raises:
            ConfigError: If a value cannot be parsed.
        """
        env = os.environ if environ is None else environ

        port_value = env.get("COURSEAPI_PORT")
        port = DEFAULT_PORT
        if port_value:
            try:
                port = int(port_value)
            except ValueError as e:
                raise ConfigError(f"COURSEAPI_PORT must be an integer, got '{port_value}'") from e
            if not 0 < port < 65536:
                raise ConfigError(f"COURSEAPI_PORT out of range: {port}")

        web_dir_value = env.get("COURSEAPI_WEB_DIR")
        web_dir = Path(web_dir_value) if web_dir_value else BUNDLED_WEB_DIR

        return cls(
            database_url=env.get("COURSEAPI_DATABASE_URL") or DEFAULT_DATABASE_URL,
            api_url=env.get("COURSEAPI_API_URL") or DEFAULT_API_URL,
            host=env.get("COURSEAPI_HOST") or DEFAULT_HOST,
            port=port,
            web_dir=web_dir,
        )

    def to_env(self) -> dict[str, str]:
        """Render these settings as the COURSEAPI_* variables from_env reads."""
        return {
            "COURSEAPI_DATABASE_URL": self.database_url,
            "COURSEAPI_API_URL": self.api_url,
            "COURSEAPI_HOST": self.host,
            "COURSEAPI_PORT": str(self.port),
            "COURSEAPI_WEB_DIR": str(self.web_dir),
        }

    def with_overrides(self, **overrides: Any) -> Settings:
        """Return a copy with the given non-None fields replaced."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)
