"""Directory users."""

from __future__ import annotations

from typing import Any

from graph_mcp.collection import aggregate
from graph_mcp.graph.base import DirectoryClient
from graph_mcp.resources.normalize import ResourceSchema, odata_filter

USER_SCHEMA = ResourceSchema(
    typed_fields=(
        "id",
        "displayName",
        "userPrincipalName",
        "mail",
        "givenName",
        "surname",
        "jobTitle",
        "mobilePhone",
        "officeLocation",
        "businessPhones",
        "accountEnabled",
        "city",
        "country",
        "department",
        "companyName",
        "streetAddress",
        "postalCode",
        "state",
        "preferredLanguage",
        "employeeId",
    )
)


def convert_user_to_map(user: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Convert a user record to (id, attributes)."""
    return USER_SCHEMA.normalize(user)


async def get_users(client: DirectoryClient, name: str | None = None) -> dict[str, dict[str, Any]]:
    """Fetch every user, optionally filtered by given name.

    Args:
        client: Directory client
        name: Optional given name to match exactly

    Returns:
        Users keyed by id
    """
    first_page = await client.fetch_collection("users", filter=odata_filter("givenName", name))
    return await aggregate(first_page, client.fetch_next_page, convert_user_to_map, kind="users")
