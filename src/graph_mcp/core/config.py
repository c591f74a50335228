"""Environment-driven configuration for the Graph MCP server."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Any

ENV_PREFIX = "MCP_MICROSOFT_"

TRANSPORTS = ("stdio", "sse", "streamable-http")

DEFAULT_GRAPH_URL = "https://graph.microsoft.com/v1.0"
DEFAULT_AUTHORITY = "https://login.microsoftonline.com"
DEFAULT_TRANSPORT = "sse"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def _env(name: str, default: str = "") -> str:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


@dataclass(frozen=True)
class Settings:
    """Resolved server settings."""

    tenant_id: str = ""
    client_id: str = ""
    client_secret: str = ""
    transport: str = DEFAULT_TRANSPORT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: float | None = None
    graph_url: str = DEFAULT_GRAPH_URL
    authority: str = DEFAULT_AUTHORITY
    log_level: str = "INFO"

    @property
    def has_credentials(self) -> bool:
        """True when tenant, client id and secret are all set."""
        return bool(self.tenant_id and self.client_id and self.client_secret)

    def validate(self) -> None:
        """Check settings that would otherwise fail late.

        Raises:
            ValueError: If the transport is unknown
        """
        if self.transport not in TRANSPORTS:
            raise ValueError(
                f"invalid transport type: '{self.transport}'. "
                f"Must be one of: {', '.join(TRANSPORTS)}"
            )


def load_settings() -> Settings:
    """Read settings from ``MCP_MICROSOFT_*`` environment variables.

    Returns:
        Settings populated from the environment

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    timeout = _env("TIMEOUT")
    return Settings(
        tenant_id=_env("TENANT_ID"),
        client_id=_env("CLIENT_ID"),
        client_secret=_env("CLIENT_SECRET"),
        transport=_env("TRANSPORT", DEFAULT_TRANSPORT).lower(),
        host=_env("HOST", DEFAULT_HOST),
        port=int(_env("PORT", str(DEFAULT_PORT))),
        timeout=float(timeout) if timeout else None,
        graph_url=_env("GRAPH_URL", DEFAULT_GRAPH_URL).rstrip("/"),
        authority=_env("AUTHORITY", DEFAULT_AUTHORITY).rstrip("/"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the process settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget loaded settings so the next call re-reads the environment."""
    global _settings
    _settings = None


def get_current_config() -> dict[str, Any]:
    """Get the current configuration with the client secret masked.

    Returns:
        Dictionary with current config and a note
    """
    config = asdict(get_settings())
    if config["client_secret"]:
        config["client_secret"] = "****"
    return {
        "config": config,
        "note": f"Configuration is read from {ENV_PREFIX}* environment variables at startup",
    }
