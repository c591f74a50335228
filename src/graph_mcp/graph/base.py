"""Base client interface for the directory and collaboration service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CollectionPage:
    """One page of a resource collection."""

    records: list[dict[str, Any]] = field(default_factory=list)
    next_link: str | None = None

    @property
    def has_next(self) -> bool:
        """True when a continuation link points at another page."""
        return bool(self.next_link)


class DirectoryClient(ABC):
    """Abstract base class for directory service clients."""

    @abstractmethod
    async def fetch_collection(
        self,
        kind: str,
        filter: str | None = None,
        select: list[str] | None = None,
    ) -> CollectionPage:
        """Fetch the first page of a resource collection.

        Args:
            kind: Resource kind ("users", "applications", "sites")
            filter: Optional OData filter expression
            select: Optional list of properties to return

        Returns:
            CollectionPage with the records and continuation link
        """
        pass

    @abstractmethod
    async def fetch_next_page(self, next_link: str) -> CollectionPage:
        """Fetch the page a continuation link points at.

        Args:
            next_link: Continuation link of the previous page

        Returns:
            CollectionPage with the records and continuation link
        """
        pass

    @abstractmethod
    async def fetch_subsites(self, site_id: str) -> CollectionPage:
        """Fetch the first page of a site's subsites."""
        pass

    @abstractmethod
    async def fetch_site_pages(self, site_id: str) -> CollectionPage:
        """Fetch the first page of a site's pages."""
        pass

    @abstractmethod
    async def fetch_page_with_layout(self, site_id: str, page_id: str) -> dict[str, Any]:
        """Fetch a site page with its canvas layout expanded.

        Args:
            site_id: Site identifier
            page_id: Page identifier

        Returns:
            The raw page definition
        """
        pass
