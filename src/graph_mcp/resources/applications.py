"""Application registrations."""

from __future__ import annotations

from typing import Any

from graph_mcp.collection import aggregate
from graph_mcp.graph.base import DirectoryClient
from graph_mcp.resources.normalize import ResourceSchema, odata_filter

# Complex properties are reported as present rather than expanded
COMPLEX_SUMMARIES = {
    "api": "ApiApplication present",
    "web": "WebApplication present",
    "spa": "SpaApplication present",
    "certification": "Certification present",
    "info": "InformationalUrl present",
    "verifiedPublisher": "VerifiedPublisher present",
}


def _summary(name: str):
    return lambda _value: COMPLEX_SUMMARIES[name]


APPLICATION_SCHEMA = ResourceSchema(
    typed_fields=(
        "id",
        "displayName",
        "appId",
        "publisherDomain",
        "createdDateTime",
        "applicationTemplateId",
        "defaultRedirectUri",
        "description",
        "disabledByMicrosoftStatus",
        "groupMembershipClaims",
        "isDeviceOnlyAuthSupported",
        "isFallbackPublicClient",
        "notes",
        "oauth2RequirePostResponse",
        "samlMetadataUrl",
        "serviceManagementReference",
        "signInAudience",
        "tags",
        "tokenEncryptionKeyId",
        "uniqueName",
        "logo",
        *COMPLEX_SUMMARIES,
    ),
    converters={
        "tokenEncryptionKeyId": str,
        **{name: _summary(name) for name in COMPLEX_SUMMARIES},
    },
)


def convert_application_to_map(application: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    """Convert an application record to (id, attributes)."""
    return APPLICATION_SCHEMA.normalize(application)


async def get_applications(
    client: DirectoryClient, name: str | None = None
) -> dict[str, dict[str, Any]]:
    """Fetch every application, optionally filtered by display name.

    Args:
        client: Directory client
        name: Optional display name to match exactly

    Returns:
        Applications keyed by id
    """
    first_page = await client.fetch_collection(
        "applications", filter=odata_filter("displayName", name)
    )
    return await aggregate(
        first_page, client.fetch_next_page, convert_application_to_map, kind="applications"
    )
