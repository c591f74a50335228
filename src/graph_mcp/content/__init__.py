"""Page content rendering.

This module turns a SharePoint page's canvas layout into a flat document:
- markdown.py: ordered rule cascade converting HTML fragments to Markdown
- values.py: tagged values for untyped web part properties
- resolver.py: per web part content lookup with fixed source precedence
- layout.py: document-order walk of sections, columns and web parts
- page.py: fetch a page with its layout and render title, description, body
"""

from graph_mcp.content.layout import render_layout
from graph_mcp.content.markdown import RULES, Rule, html_to_markdown
from graph_mcp.content.page import PageContentError, get_page_content, render_page
from graph_mcp.content.resolver import FORMATS, MARKDOWN, PLAIN, resolve_content
from graph_mcp.content.values import Value, ValueKind

__all__ = [
    "FORMATS",
    "MARKDOWN",
    "PLAIN",
    "RULES",
    "PageContentError",
    "Rule",
    "Value",
    "ValueKind",
    "get_page_content",
    "html_to_markdown",
    "render_layout",
    "render_page",
    "resolve_content",
]
