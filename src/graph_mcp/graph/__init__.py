"""Clients for the Microsoft Graph directory and SharePoint APIs."""

from graph_mcp.graph.auth import ClientSecretCredential
from graph_mcp.graph.base import CollectionPage, DirectoryClient
from graph_mcp.graph.client import GraphClient

__all__ = ["ClientSecretCredential", "CollectionPage", "DirectoryClient", "GraphClient"]
