"""Admin service layer for configuration and stats."""

from __future__ import annotations

from typing import Any

from graph_mcp.core.config import get_current_config, get_settings
from graph_mcp.metrics import get_metrics

__all__ = ["get_current_config", "get_stats"]


def get_stats() -> dict[str, Any]:
    """Get server statistics and metrics.

    Returns:
        Dictionary with request metrics and Graph connection status
    """
    stats = get_metrics().to_dict()
    settings = get_settings()
    stats["graph"] = {
        "url": settings.graph_url,
        "credentials_configured": settings.has_credentials,
    }
    return stats
