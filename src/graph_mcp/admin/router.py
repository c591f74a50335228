"""Admin API routes for health, stats and config."""

from starlette.requests import Request
from starlette.responses import JSONResponse

from graph_mcp.admin.service import get_current_config, get_stats


async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint for container orchestration.

    Returns:
        JSONResponse with status: healthy
    """
    return JSONResponse({"status": "healthy"})


async def api_stats(request: Request) -> JSONResponse:
    """Get server statistics and Graph request metrics as JSON."""
    return JSONResponse(get_stats())


async def api_config_get(request: Request) -> JSONResponse:
    """Get the current configuration with secrets masked."""
    return JSONResponse(get_current_config())
