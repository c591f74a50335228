"""Extract displayable content from a single web part."""

from __future__ import annotations

from typing import Any, Mapping

from graph_mcp.content.markdown import html_to_markdown
from graph_mcp.content.values import Value
from graph_mcp.models.canvas import WebPart

MARKDOWN = "markdown"
PLAIN = "plain"
FORMATS = (MARKDOWN, PLAIN)

# Candidate keys of a web part's ``data`` mapping, in order of preference
DATA_FIELDS = ("text", "content", "value", "description", "html")


def _from_html(html: str, fmt: str) -> str:
    return html_to_markdown(html) if fmt == MARKDOWN else html


def _from_data(data: Value, fmt: str) -> str | None:
    mapping = data.mapping()
    if mapping is not None:
        for field in DATA_FIELDS:
            text = Value.lookup(mapping, field).non_empty_string()
            if text is not None:
                return _from_html(text, fmt) if field == "html" else text
        return None

    return data.non_empty_string()


def resolve_fields(
    backing_store: Mapping[str, Any] | None,
    additional_data: Mapping[str, Any] | None,
    fmt: str = MARKDOWN,
) -> tuple[str, bool]:
    """Pick a web part's content from its typed and untyped property bags.

    Sources are tried in order and the first hit wins:
    typed ``innerHtml``, untyped ``innerHtml``, untyped ``text``, then
    untyped ``data`` (a string, or a mapping searched over DATA_FIELDS).
    HTML sources are converted to Markdown in markdown mode and returned
    verbatim in plain mode.

    Args:
        backing_store: Typed properties of the web part
        additional_data: Untyped properties of the web part
        fmt: Output format, "markdown" or "plain"

    Returns:
        Tuple of (content, found). ``found`` is False when the web part
        exposes nothing displayable; that is not an error.
    """
    html = Value.lookup(backing_store, "innerHtml").string()
    if html is not None:
        return _from_html(html, fmt), True

    html = Value.lookup(additional_data, "innerHtml").string()
    if html is not None:
        return _from_html(html, fmt), True

    text = Value.lookup(additional_data, "text").string()
    if text is not None:
        return text, True

    content = _from_data(Value.lookup(additional_data, "data"), fmt)
    if content is not None:
        return content, True

    return "", False


def resolve_content(block: WebPart, fmt: str = MARKDOWN) -> tuple[str, bool]:
    """Resolve the displayable content of a web part.

    Args:
        block: The web part
        fmt: Output format, "markdown" or "plain"

    Returns:
        Tuple of (content, found)
    """
    return resolve_fields(block.backing_store(), block.additional_data, fmt)
