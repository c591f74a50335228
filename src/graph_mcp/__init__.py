"""MCP server for Microsoft Graph users, applications and SharePoint sites."""

__version__ = "1.0.0"
