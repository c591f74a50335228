"""Pytest configuration and fixtures for graph-mcp tests."""

from __future__ import annotations

from typing import Any

import pytest

from graph_mcp.graph.base import CollectionPage, DirectoryClient
from graph_mcp.models.canvas import STANDARD_WEB_PART, TEXT_WEB_PART


class FakeDirectoryClient(DirectoryClient):
    """In-memory directory client serving canned pages.

    ``collections`` maps a kind ("users", "subsites:<site>", "pages:<site>")
    to its first page, ``links`` maps continuation links to later pages and
    ``page_definitions`` maps (site, page) to a payload. Any value may be an
    exception instance, which is raised instead.
    """

    def __init__(
        self,
        collections: dict[str, Any] | None = None,
        links: dict[str, Any] | None = None,
        page_definitions: dict[tuple[str, str], Any] | None = None,
    ) -> None:
        self.collections = collections or {}
        self.links = links or {}
        self.page_definitions = page_definitions or {}
        self.calls: list[tuple[Any, ...]] = []

    @staticmethod
    def _serve(value: Any) -> Any:
        if isinstance(value, Exception):
            raise value
        return value

    async def fetch_collection(self, kind, filter=None, select=None):
        self.calls.append(("collection", kind, filter, select))
        return self._serve(self.collections.get(kind, CollectionPage()))

    async def fetch_next_page(self, next_link):
        self.calls.append(("next", next_link))
        return self._serve(self.links[next_link])

    async def fetch_subsites(self, site_id):
        self.calls.append(("subsites", site_id))
        return self._serve(self.collections.get(f"subsites:{site_id}", CollectionPage()))

    async def fetch_site_pages(self, site_id):
        self.calls.append(("pages", site_id))
        return self._serve(self.collections.get(f"pages:{site_id}", CollectionPage()))

    async def fetch_page_with_layout(self, site_id, page_id):
        self.calls.append(("page", site_id, page_id))
        return self._serve(self.page_definitions[(site_id, page_id)])


def text_part(html: str, **extra: Any) -> dict[str, Any]:
    """A text web part payload."""
    return {"@odata.type": TEXT_WEB_PART, "id": "text", "innerHtml": html, **extra}


def standard_part(data: Any, **extra: Any) -> dict[str, Any]:
    """A standard web part payload with a ``data`` property."""
    return {"@odata.type": STANDARD_WEB_PART, "id": "std", "webPartType": "guid", "data": data, **extra}


@pytest.fixture
def fake_client_factory():
    """Factory for FakeDirectoryClient instances."""
    return FakeDirectoryClient


@pytest.fixture
def table_html() -> str:
    """A table with a header row."""
    return (
        "<table><tr><th>Name</th><th>Age</th></tr>"
        "<tr><td>Ann</td><td>30</td></tr></table>"
    )


@pytest.fixture
def rich_text_html() -> str:
    """Typical SharePoint rich text web part HTML."""
    return """
    <div data-sp-rte="">
        <h2>Getting started</h2>
        <p>Welcome to the <strong>team</strong> site. Read the <a href="https://contoso.com/guide">guide</a>.</p>
        <ul>
            <li>Onboarding</li>
            <li>Policies</li>
        </ul>
        <p>Questions? Ask in <em>#help</em>.</p>
    </div>
    """


@pytest.fixture
def page_payload() -> dict[str, Any]:
    """A site page with both horizontal sections and a vertical section."""
    return {
        "id": "page-1",
        "title": "Welcome",
        "description": "Team home",
        "webUrl": "https://contoso.sharepoint.com/sites/team/SitePages/Welcome.aspx",
        "canvasLayout": {
            "horizontalSections": [
                {
                    "id": "1",
                    "layout": "twoColumns",
                    "columns": [
                        {"id": "1", "width": 6, "webparts": [text_part("<p>Left</p>")]},
                        {"id": "2", "width": 6, "webparts": [text_part("<p>Right</p>")]},
                    ],
                },
                {
                    "id": "2",
                    "layout": "oneColumn",
                    "columns": [
                        {
                            "id": "1",
                            "webparts": [
                                standard_part({"title": "Hero", "description": "Banner"}),
                                {"@odata.type": STANDARD_WEB_PART, "id": "empty", "data": {"title": "x"}},
                            ],
                        }
                    ],
                },
            ],
            "verticalSection": {"emphasis": "none", "webparts": [text_part("<p>Side</p>")]},
        },
    }
