"""OAuth2 client credentials for Microsoft Graph."""

from __future__ import annotations

import logging
import threading
import time

import requests

from graph_mcp.core.config import DEFAULT_AUTHORITY

logger = logging.getLogger(__name__)

GRAPH_SCOPE = "https://graph.microsoft.com/.default"

# Refresh tokens this many seconds before they expire
EXPIRY_MARGIN = 60


class ClientSecretCredential:
    """Acquire and cache app-only access tokens with a client secret."""

    def __init__(
        self,
        tenant_id: str,
        client_id: str,
        client_secret: str,
        authority: str = DEFAULT_AUTHORITY,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the credential.

        Args:
            tenant_id: Entra tenant ID
            client_id: Application (client) ID
            client_secret: Client secret value
            authority: Token authority root (default: login.microsoftonline.com)
            session: Optional requests session to reuse
            timeout: Request timeout in seconds (default: none)
        """
        if not (tenant_id and client_id and client_secret):
            raise ValueError("tenant id, client id and client secret are required")

        self.token_url = f"{authority.rstrip('/')}/{tenant_id}/oauth2/v2.0/token"
        self.client_id = client_id
        self.client_secret = client_secret
        self.session = session or requests.Session()
        self.timeout = timeout

        self._token: str | None = None
        self._expires_at = 0.0
        self._lock = threading.Lock()

    def get_token(self) -> str:
        """Return a valid access token, requesting a new one when needed.

        Returns:
            Bearer token for Microsoft Graph

        Raises:
            requests.HTTPError: If the token endpoint rejects the request
        """
        with self._lock:
            if self._token and time.time() < self._expires_at - EXPIRY_MARGIN:
                return self._token

            response = self.session.post(
                self.token_url,
                data={
                    "grant_type": "client_credentials",
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                    "scope": GRAPH_SCOPE,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()

            payload = response.json()
            self._token = payload["access_token"]
            self._expires_at = time.time() + int(payload.get("expires_in", 3600))
            logger.debug(f"Acquired Graph token, expires in {payload.get('expires_in')}s")
            return self._token
