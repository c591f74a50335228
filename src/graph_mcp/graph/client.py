"""Microsoft Graph client using the requests library."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any
from urllib.parse import quote

import requests

from graph_mcp.core.config import DEFAULT_GRAPH_URL
from graph_mcp.graph.auth import ClientSecretCredential
from graph_mcp.graph.base import CollectionPage, DirectoryClient
from graph_mcp.metrics import record_request

logger = logging.getLogger(__name__)

# Collection endpoints by resource kind
COLLECTION_PATHS = {
    "users": "/users",
    "applications": "/applications",
    "sites": "/sites",
}


def _segment(value: str) -> str:
    # Site ids look like "host,site-guid,web-guid"; keep the commas readable
    return quote(value, safe=",")


def to_collection_page(payload: dict[str, Any]) -> CollectionPage:
    """Build a CollectionPage from a Graph collection response."""
    return CollectionPage(
        records=list(payload.get("value") or []),
        next_link=payload.get("@odata.nextLink"),
    )


class GraphClient(DirectoryClient):
    """Directory client for the Microsoft Graph REST API.

    Requests are made once; failures surface as ``requests`` exceptions.
    """

    def __init__(
        self,
        credential: ClientSecretCredential,
        base_url: str = DEFAULT_GRAPH_URL,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the Graph client.

        Args:
            credential: Source of bearer tokens
            base_url: Graph API root (default: v1.0 endpoint)
            timeout: Request timeout in seconds (default: none)
            session: Optional requests session to reuse
        """
        self.credential = credential
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        logger.info(f"GraphClient initialized for {self.base_url}")

    def _get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Perform a blocking GET and return the decoded JSON body."""
        start = time.perf_counter()
        try:
            headers = {
                "Authorization": f"Bearer {self.credential.get_token()}",
                "Accept": "application/json",
            }
            response = self.session.get(url, headers=headers, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            status_code = e.response.status_code if e.response is not None else None
            record_request(
                path=url,
                success=False,
                status_code=status_code,
                elapsed_ms=(time.perf_counter() - start) * 1000,
                error=f"{type(e).__name__}: {e}",
            )
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        record_request(path=url, success=True, status_code=response.status_code, elapsed_ms=elapsed_ms)
        logger.debug(f"GET {url} -> {response.status_code} in {elapsed_ms:.0f}ms")
        return response.json()

    async def _request(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        # Run requests in thread pool to avoid blocking
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, lambda: self._get(url, params))

    async def fetch_collection(
        self,
        kind: str,
        filter: str | None = None,
        select: list[str] | None = None,
    ) -> CollectionPage:
        """Fetch the first page of a resource collection.

        Raises:
            ValueError: If the resource kind is unknown
            requests.RequestException: If the request fails
        """
        if kind not in COLLECTION_PATHS:
            raise ValueError(f"Unknown resource kind: {kind}")

        params: dict[str, str] = {}
        if filter:
            params["$filter"] = filter
        if select:
            params["$select"] = ",".join(select)

        payload = await self._request(f"{self.base_url}{COLLECTION_PATHS[kind]}", params or None)
        return to_collection_page(payload)

    async def fetch_next_page(self, next_link: str) -> CollectionPage:
        """Fetch the page behind an ``@odata.nextLink``."""
        payload = await self._request(next_link)
        return to_collection_page(payload)

    async def fetch_subsites(self, site_id: str) -> CollectionPage:
        """Fetch the first page of a site's subsites."""
        payload = await self._request(f"{self.base_url}/sites/{_segment(site_id)}/sites")
        return to_collection_page(payload)

    async def fetch_site_pages(self, site_id: str) -> CollectionPage:
        """Fetch the first page of a site's modern pages."""
        payload = await self._request(
            f"{self.base_url}/sites/{_segment(site_id)}/pages/microsoft.graph.sitePage"
        )
        return to_collection_page(payload)

    async def fetch_page_with_layout(self, site_id: str, page_id: str) -> dict[str, Any]:
        """Fetch a site page with ``$expand=canvasLayout``."""
        return await self._request(
            f"{self.base_url}/sites/{_segment(site_id)}/pages/{_segment(page_id)}"
            "/microsoft.graph.sitePage",
            {"$expand": "canvasLayout"},
        )
