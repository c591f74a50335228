"""Fetch every page of a resource collection and merge it by identifier."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from graph_mcp.graph.base import CollectionPage
from graph_mcp.metrics import record_collection

logger = logging.getLogger(__name__)

Record = dict[str, Any]
Normalizer = Callable[[Record], tuple[str, Record]]
FetchNext = Callable[[str], Awaitable[CollectionPage]]


async def aggregate(
    first_page: CollectionPage,
    fetch_next: FetchNext,
    normalize: Normalizer,
    kind: str | None = None,
) -> dict[str, Record]:
    """Follow continuation links and collect every record.

    Records are keyed by the identifier the normalizer returns; a record
    seen on a later page replaces an earlier one with the same identifier.
    ``fetch_next`` is never called once a page carries no continuation
    link. A failing fetch propagates and nothing collected so far is
    returned.

    Args:
        first_page: The page returned by the initial collection request
        fetch_next: Coroutine fetching the page behind a continuation link
        normalize: Converts a raw record to (identifier, attributes)
        kind: Resource kind; when given, the walk is counted in the metrics

    Returns:
        Identifier-keyed mapping of normalized records
    """
    collected: dict[str, Record] = {}
    page = first_page
    pages = 1

    while True:
        for record in page.records:
            identifier, attributes = normalize(record)
            collected[identifier] = attributes

        if not page.has_next:
            break

        page = await fetch_next(page.next_link)
        pages += 1

    logger.debug(f"Aggregated {len(collected)} records from {pages} page(s)")
    if kind:
        record_collection(kind, len(collected), pages)
    return collected
