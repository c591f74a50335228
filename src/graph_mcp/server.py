"""MCP server for Microsoft Graph."""

from __future__ import annotations

import logging
from dataclasses import replace

from mcp.server.fastmcp import FastMCP

from graph_mcp.admin import api_config_get, api_stats, health_check
from graph_mcp.core.config import get_settings
from graph_mcp.tools import register_graph_tools

logger = logging.getLogger(__name__)

# Stateless mode auto-creates sessions for unknown session IDs, making the server
# resilient to restarts
mcp = FastMCP(
    "Microsoft MCP Server",
    instructions=(
        "An MCP server for Microsoft Graph. Lists directory users, application "
        "registrations and SharePoint sites, including each site's subsites and "
        "pages with their content rendered as Markdown."
    ),
    stateless_http=True,
)

register_graph_tools(mcp)

mcp.custom_route("/healthz", methods=["GET"])(health_check)
mcp.custom_route("/api/stats", methods=["GET"])(api_stats)
mcp.custom_route("/api/config", methods=["GET"])(api_config_get)


def run_server(transport: str | None = None, host: str | None = None, port: int | None = None) -> None:
    """Run the MCP server.

    Args:
        transport: Transport type ('stdio', 'sse' or 'streamable-http');
            defaults to MCP_MICROSOFT_TRANSPORT
        host: Host to bind to for HTTP transports (default: MCP_MICROSOFT_HOST)
        port: Port to bind to for HTTP transports (default: MCP_MICROSOFT_PORT)

    Raises:
        ValueError: If the transport is not supported
    """
    settings = get_settings()
    transport = transport or settings.transport
    replace(settings, transport=transport).validate()

    # Configure host and port via settings
    mcp.settings.host = host or settings.host
    mcp.settings.port = port or settings.port

    logger.info(f"Starting Microsoft MCP server with {transport} transport")
    mcp.run(transport=transport)


if __name__ == "__main__":
    run_server()
