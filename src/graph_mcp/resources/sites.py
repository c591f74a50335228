"""SharePoint sites with their subsites and rendered pages."""

from __future__ import annotations

import logging
from typing import Any

from graph_mcp import metrics
from graph_mcp.collection import aggregate
from graph_mcp.content.page import get_page_content
from graph_mcp.content.resolver import MARKDOWN
from graph_mcp.graph.base import DirectoryClient
from graph_mcp.resources.normalize import ResourceSchema, odata_filter

logger = logging.getLogger(__name__)

# Stored as a page's content when that page alone fails to render
CONTENT_ERROR = "Error fetching content"

DEFAULT_SITE_SELECT = ["id", "displayName", "webUrl", "siteCollection", "description"]

SITE_SCHEMA = ResourceSchema(
    typed_fields=(
        "id",
        "displayName",
        "isPersonalSite",
        "analytics",
        "error",
        "sharepointIds",
        "siteCollection",
    )
)

SITE_PAGE_SCHEMA = ResourceSchema(
    typed_fields=("id", "pageLayout", "publishingState", "title"),
)


def convert_site_to_map(site: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Convert a site record to (id, attributes)."""
    return SITE_SCHEMA.normalize(site)


def convert_site_page_to_map(page: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Convert a site page record to (id, attributes)."""
    return SITE_PAGE_SCHEMA.normalize(page)


async def get_subsites(client: DirectoryClient, site_id: str) -> dict[str, dict[str, Any]]:
    """Fetch every subsite of a site, keyed by id."""
    first_page = await client.fetch_subsites(site_id)
    return await aggregate(first_page, client.fetch_next_page, convert_site_to_map, kind="subsites")


async def get_site_pages(client: DirectoryClient, site_id: str) -> dict[str, dict[str, Any]]:
    """Fetch every page of a site, keyed by id."""
    first_page = await client.fetch_site_pages(site_id)
    return await aggregate(
        first_page, client.fetch_next_page, convert_site_page_to_map, kind="pages"
    )


async def render_page_or_sentinel(
    client: DirectoryClient, site_id: str, page_id: str, fmt: str = MARKDOWN
) -> str:
    """Render one page, returning CONTENT_ERROR instead of raising.

    A single broken page must not fail the listing of its siblings.
    """
    try:
        return await get_page_content(client, site_id, page_id, fmt)
    except Exception as e:
        logger.warning(f"Failed to render page {page_id} of site {site_id}: {e}")
        metrics.record_render(metrics.CONTENT_ERROR)
        return CONTENT_ERROR


async def enrich_site(
    client: DirectoryClient, site_id: str, site: dict[str, Any], fmt: str = MARKDOWN
) -> None:
    """Attach ``subsites`` and ``pages`` (with rendered content) to a site.

    When the subsites or the pages cannot be listed, the site keeps the
    attributes it has so far and the failure is logged.
    """
    try:
        site["subsites"] = await get_subsites(client, site_id)
    except Exception as e:
        logger.warning(f"Failed to list subsites of site {site_id}: {e}")
        return

    try:
        pages = await get_site_pages(client, site_id)
    except Exception as e:
        logger.warning(f"Failed to list pages of site {site_id}: {e}")
        return

    for page_id, page in pages.items():
        page["content"] = await render_page_or_sentinel(client, site_id, page_id, fmt)
    site["pages"] = pages


async def get_sites(client: DirectoryClient, name: str | None = None) -> dict[str, dict[str, Any]]:
    """Fetch every site with its subsites and rendered pages.

    Args:
        client: Directory client
        name: Optional display name to match exactly

    Returns:
        Sites keyed by id
    """
    filter = odata_filter("displayName", name)
    select = None if filter else DEFAULT_SITE_SELECT

    first_page = await client.fetch_collection("sites", filter=filter, select=select)
    sites = await aggregate(first_page, client.fetch_next_page, convert_site_to_map, kind="sites")

    for site_id, site in sites.items():
        if site_id:
            await enrich_site(client, site_id, site)

    logger.info(f"Fetched {len(sites)} site(s)")
    return sites
