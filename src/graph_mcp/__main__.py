"""Main entry point for the Microsoft Graph MCP server.

Usage:
    python -m graph_mcp [serve] [transport] [host] [port]
    python -m graph_mcp version
    python -m graph_mcp cli
"""

from __future__ import annotations

import asyncio
import logging
import sys

from graph_mcp import __version__
from graph_mcp.core.clients import get_client
from graph_mcp.core.config import get_settings
from graph_mcp.server import run_server
from graph_mcp.tools.service import list_sites


def run_cli() -> None:
    """Print every site as JSON and exit."""
    try:
        output = asyncio.run(list_sites(get_client()))
    except Exception as e:
        raise SystemExit(f"error getting sites: {type(e).__name__}: {e}") from e
    print(output)


def main() -> None:
    """Main entry point."""
    settings = get_settings()
    # Logs go to stderr so they never mix with the stdio transport
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    args = sys.argv[1:]
    command = args[0] if args else "serve"

    if command == "version":
        print(__version__)
        return
    if command == "cli":
        run_cli()
        return
    if command == "serve":
        args = args[1:]

    # Parse command line arguments
    transport = args[0] if len(args) > 0 else settings.transport
    host = args[1] if len(args) > 1 else settings.host
    port = int(args[2]) if len(args) > 2 else settings.port

    run_server(transport=transport, host=host, port=port)


if __name__ == "__main__":
    main()
