"""Core infrastructure and shared configuration.

This module provides foundational components used across the application:
- Settings loaded from MCP_MICROSOFT_* environment variables
- The default Graph client (see graph_mcp.core.clients)

Client construction lives in its own module so that importing the
configuration never pulls in the HTTP stack.
"""

from graph_mcp.core.config import (
    TRANSPORTS,
    Settings,
    get_current_config,
    get_settings,
    load_settings,
    reset_settings,
)

__all__ = [
    "TRANSPORTS",
    "Settings",
    "get_current_config",
    "get_settings",
    "load_settings",
    "reset_settings",
]
