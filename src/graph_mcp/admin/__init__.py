"""Admin API functionality for monitoring.

This module provides administrative endpoints for:
- Health checks and server status
- Graph request statistics
- Current (read-only) configuration

The admin module follows a router -> service pattern:
- router.py: HTTP endpoint handlers
- service.py: Business logic for stats and config
"""

from graph_mcp.admin.router import api_config_get, api_stats, health_check
from graph_mcp.admin.service import get_current_config, get_stats

__all__ = [
    # Router functions
    "api_config_get",
    "api_stats",
    "health_check",
    # Service functions
    "get_current_config",
    "get_stats",
]
