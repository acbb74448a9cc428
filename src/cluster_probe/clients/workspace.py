"""Workspace REST client with bearer token authentication.

A thin synchronous wrapper over httpx. Each instance owns one httpx.Client
and is meant to be used for a single call inside a `with` block; there is
no connection reuse across probes.

Proxies are taken from HTTP_PROXY / HTTPS_PROXY by httpx itself.
"""

import httpx

from cluster_probe.observability import get_logger

logger = get_logger(__name__)


class WorkspaceClient:
    """Authenticated client for the workspace REST API."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float,
        verify_ssl: bool = True,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._token = token
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self._transport = transport
        self._client: httpx.Client | None = None

    def __repr__(self) -> str:
        return f"WorkspaceClient(base_url={self.base_url!r}, timeout={self.timeout})"

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            if not self.verify_ssl:
                logger.warning(
                    "TLS peer verification disabled",
                    base_url=self.base_url,
                )
            self._client = httpx.Client(
                verify=self.verify_ssl,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    def _get_auth_headers(self) -> dict[str, str]:
        """Build authentication headers."""
        return {"Authorization": f"Bearer {self._token}"}

    def url_for(self, path: str) -> str:
        """Join the base URL and an absolute API path."""
        return f"{self.base_url}{path}"

    def get(self, path: str) -> httpx.Response:
        """Issue a GET against an API path.

        Raises:
            httpx.HTTPError: transport-level failure (including timeouts)
            httpx.InvalidURL: the base URL cannot be parsed
        """
        client = self._get_client()
        return client.get(self.url_for(path), headers=self._get_auth_headers())

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "WorkspaceClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
