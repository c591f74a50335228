"""Render a SharePoint site page to Markdown or plain text."""

from __future__ import annotations

import logging

from graph_mcp import metrics
from graph_mcp.content.layout import render_layout
from graph_mcp.content.resolver import FORMATS, MARKDOWN
from graph_mcp.graph.base import DirectoryClient
from graph_mcp.models.canvas import SitePage

logger = logging.getLogger(__name__)

NO_CONTENT = "No detailed content available. Use the page URL to view in browser."


class PageContentError(RuntimeError):
    """Raised when a page definition cannot be fetched."""

    def __init__(self, site_id: str, page_id: str, cause: Exception) -> None:
        super().__init__(
            f"error getting page content for page {page_id} of site {site_id}: "
            f"{type(cause).__name__}: {cause}"
        )
        self.site_id = site_id
        self.page_id = page_id


def no_content(fmt: str = MARKDOWN) -> str:
    """The text rendered for a page without extractable content."""
    return f"*{NO_CONTENT}*" if fmt == MARKDOWN else NO_CONTENT


def render_page(page: SitePage, fmt: str = MARKDOWN) -> str:
    """Render an already fetched page.

    Args:
        page: Page definition with its canvas layout
        fmt: Output format, "markdown" or "plain"

    Returns:
        Title, description and body separated by blank lines, or the
        no-content text when the canvas yields nothing
    """
    body = render_layout(page.canvas_layout, fmt)
    if not body.strip():
        return no_content(fmt)

    blocks: list[str] = []
    if page.title is not None:
        blocks.append(f"## {page.title}" if fmt == MARKDOWN else f"Title: {page.title}")
    if page.description is not None:
        blocks.append(
            f"*{page.description}*" if fmt == MARKDOWN else f"Description: {page.description}"
        )
    blocks.append(body)

    return "\n\n".join(blocks).rstrip()


async def get_page_content(
    client: DirectoryClient,
    site_id: str,
    page_id: str,
    fmt: str = MARKDOWN,
) -> str:
    """Fetch a site page and render its content.

    Args:
        client: Directory client used to fetch the page
        site_id: Site identifier
        page_id: Page identifier
        fmt: Output format, "markdown" or "plain"

    Returns:
        The rendered document

    Raises:
        ValueError: If the format is not supported
        PageContentError: If the page cannot be fetched
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported format '{fmt}'. Must be one of: {', '.join(FORMATS)}")

    try:
        raw = await client.fetch_page_with_layout(site_id, page_id)
    except Exception as e:
        metrics.record_render(metrics.FAILED)
        raise PageContentError(site_id, page_id, e) from e

    page = SitePage.model_validate(raw)
    logger.debug(f"Rendering page {page_id} of site {site_id} as {fmt}")
    document = render_page(page, fmt)
    metrics.record_render(metrics.EMPTY if document == no_content(fmt) else metrics.RENDERED)
    return document
