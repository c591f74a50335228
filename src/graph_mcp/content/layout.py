"""Walk a canvas layout and assemble the page body."""

from __future__ import annotations

from typing import Iterable, Iterator

from graph_mcp.content.resolver import MARKDOWN, resolve_content
from graph_mcp.models.canvas import CanvasLayout, WebPart


def iter_web_parts(layout: CanvasLayout | None) -> Iterator[WebPart]:
    """Yield web parts in document order.

    Horizontal sections come first (column by column), then the vertical
    section.
    """
    if layout is None:
        return

    for section in layout.horizontal_sections:
        for column in section.columns:
            yield from column.webparts

    if layout.vertical_section is not None:
        yield from layout.vertical_section.webparts


def render_web_parts(web_parts: Iterable[WebPart], fmt: str = MARKDOWN) -> str:
    """Concatenate the resolved content of each web part.

    Web parts without content are skipped.
    """
    body: list[str] = []
    for web_part in web_parts:
        content, found = resolve_content(web_part, fmt)
        if found:
            body.append(content)
            body.append("\n\n")
    return "".join(body)


def render_layout(layout: CanvasLayout | None, fmt: str = MARKDOWN) -> str:
    """Render a page's canvas layout.

    Args:
        layout: The canvas layout, possibly missing
        fmt: Output format, "markdown" or "plain"

    Returns:
        The page body; empty when no web part has displayable content
    """
    return render_web_parts(iter_web_parts(layout), fmt)
