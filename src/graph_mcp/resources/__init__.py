"""Resource kinds exposed by the server.

Each kind pairs a ResourceSchema (typed fields written first, provider
extras written last) with a coroutine that aggregates every page of the
collection into an id-keyed mapping. Sites are additionally enriched with
their subsites and their pages' rendered content.
"""

from graph_mcp.resources.applications import convert_application_to_map, get_applications
from graph_mcp.resources.normalize import ResourceSchema, odata_filter
from graph_mcp.resources.sites import (
    CONTENT_ERROR,
    convert_site_page_to_map,
    convert_site_to_map,
    get_sites,
)
from graph_mcp.resources.users import convert_user_to_map, get_users

__all__ = [
    "CONTENT_ERROR",
    "ResourceSchema",
    "convert_application_to_map",
    "convert_site_page_to_map",
    "convert_site_to_map",
    "convert_user_to_map",
    "get_applications",
    "get_sites",
    "get_users",
    "odata_filter",
]
