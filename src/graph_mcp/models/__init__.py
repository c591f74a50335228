"""Pydantic models for SharePoint site pages.

The canvas models mirror Graph's sitePage resource: a page holds a canvas
layout made of horizontal sections (columns of web parts) and an optional
vertical section. Web parts keep their declared properties as a typed
backing store and every other property as additional data.
"""

from graph_mcp.models.canvas import (
    CanvasLayout,
    HorizontalSection,
    HorizontalSectionColumn,
    SitePage,
    StandardWebPart,
    TextWebPart,
    VerticalSection,
    WebPart,
    parse_web_part,
)

__all__ = [
    "CanvasLayout",
    "HorizontalSection",
    "HorizontalSectionColumn",
    "SitePage",
    "StandardWebPart",
    "TextWebPart",
    "VerticalSection",
    "WebPart",
    "parse_web_part",
]
