"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the prismalint CLI and REST API.

    Values are read from environment variables prefixed with ``PRISMALINT_``
    and from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRISMALINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shared
    log_level: str = "INFO"
    config_file: str = ".prismalint.yaml"

    # External schema parser (node + @prisma/internals)
    node_binary: str = "node"
    prisma_internals_dir: str | None = None  # cwd for node; must resolve @prisma/internals
    parse_timeout_seconds: float = 30.0

    # REST API
    api_server_host: str = "localhost"
    api_server_port: int = 8000
    # Cloud Run injects an unprefixed PORT; takes precedence over api_server_port
    port: int | None = Field(None, validation_alias="PORT")

    @property
    def effective_port(self) -> int:
        """Return the port to listen on (Cloud Run PORT takes precedence)."""
        return self.port if self.port is not None else self.api_server_port
