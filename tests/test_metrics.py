"""Tests for Graph, collection and page render statistics."""

from __future__ import annotations

import pytest

from conftest import text_part
from graph_mcp import metrics
from graph_mcp.admin.service import get_stats
from graph_mcp.content.page import PageContentError, get_page_content
from graph_mcp.graph.base import CollectionPage
from graph_mcp.metrics import GraphMetrics, get_metrics, reset_metrics
from graph_mcp.resources import get_sites, get_users


@pytest.fixture(autouse=True)
def fresh_metrics():
    """Start every test from empty metrics."""
    yield reset_metrics()
    reset_metrics()


class TestGraphMetrics:
    """Tests for the GraphMetrics container."""

    def test_requests(self) -> None:
        """Test request totals, rates and recent failures."""
        stats = GraphMetrics()
        stats.record_request("/users", success=True, status_code=200, elapsed_ms=10.0)
        stats.record_request(
            "/sites", success=False, status_code=429, elapsed_ms=30.0, error="throttled"
        )

        requests = stats.to_dict()["graph_requests"]

        assert requests["total"] == 2
        assert requests["failed"] == 1
        assert requests["success_rate"] == 50.0
        assert requests["average_ms"] == 20.0
        assert requests["recent_failures"][0]["path"] == "/sites"
        assert requests["recent_failures"][0]["status_code"] == 429

    def test_collections(self) -> None:
        """Test per-kind pagination figures."""
        stats = GraphMetrics()
        stats.record_collection("users", records=150, pages=2)
        stats.record_collection("users", records=10, pages=1)
        stats.record_collection("pages", records=0, pages=1)

        collections = stats.to_dict()["collections"]

        assert collections["users"] == {
            "walks": 2,
            "records": 160,
            "pages": 3,
            "deepest": 2,
            "pages_per_walk": 1.5,
        }
        assert collections["pages"]["records"] == 0

    def test_renders(self) -> None:
        """Test render outcome counts."""
        stats = GraphMetrics()
        stats.record_render(metrics.RENDERED)
        stats.record_render(metrics.RENDERED)
        stats.record_render(metrics.CONTENT_ERROR)

        assert stats.to_dict()["page_renders"] == {
            "rendered": 2,
            "empty": 0,
            "failed": 0,
            "content_error": 1,
        }

    def test_unknown_render_outcome(self) -> None:
        """Test that outcomes are restricted to the known set."""
        with pytest.raises(ValueError, match="Unknown render outcome"):
            GraphMetrics().record_render("partial")


class TestRecording:
    """Tests for metrics recorded by listings and page rendering."""

    @pytest.mark.asyncio
    async def test_aggregation_depth(self, fake_client_factory) -> None:
        """Test that a paginated listing records its kind and depth."""
        client = fake_client_factory(
            {"users": CollectionPage(records=[{"id": "u1"}], next_link="n2")},
            links={"n2": CollectionPage(records=[{"id": "u2"}, {"id": "u3"}])},
        )

        await get_users(client)

        users = get_metrics().to_dict()["collections"]["users"]
        assert users["walks"] == 1
        assert users["records"] == 3
        assert users["deepest"] == 2

    @pytest.mark.asyncio
    async def test_site_listing(self, fake_client_factory) -> None:
        """Test kinds and render outcomes recorded while listing sites."""
        client = fake_client_factory(
            {
                "sites": CollectionPage(records=[{"id": "s1"}]),
                "pages:s1": CollectionPage(records=[{"id": "p1"}, {"id": "p2"}, {"id": "p3"}]),
            },
            page_definitions={
                ("s1", "p1"): {
                    "canvasLayout": {"verticalSection": {"webparts": [text_part("<p>Hi</p>")]}}
                },
                ("s1", "p2"): {"canvasLayout": {}},
                ("s1", "p3"): RuntimeError("boom"),
            },
        )

        await get_sites(client)

        snapshot = get_stats()
        assert set(snapshot["collections"]) == {"sites", "subsites", "pages"}
        assert snapshot["collections"]["pages"]["records"] == 3
        assert snapshot["page_renders"] == {
            "rendered": 1,
            "empty": 1,
            "failed": 1,
            "content_error": 1,
        }

    @pytest.mark.asyncio
    async def test_single_page_failure(self, fake_client_factory) -> None:
        """Test that a failed fetch counts as failed without a sentinel."""
        client = fake_client_factory(page_definitions={("s1", "p1"): ConnectionError("down")})

        with pytest.raises(PageContentError):
            await get_page_content(client, "s1", "p1")

        renders = get_metrics().to_dict()["page_renders"]
        assert renders["failed"] == 1
        assert renders["content_error"] == 0
