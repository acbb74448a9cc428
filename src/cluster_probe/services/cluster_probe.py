"""Cluster listing probe.

Performs one GET {endpoint}/api/2.0/clusters/list with a bearer token and
projects each cluster onto a ClusterSummary. The probe exists to tell
network/proxy problems apart from authentication problems, so every
expected failure comes back as a typed error on the ProbeResult instead of
being raised:

- ConfigError: endpoint or credential empty, nothing sent
- TransportError: DNS, TLS, proxy, timeout
- HttpStatusError: non-2xx status
- DecodeError: 2xx with a body that is not the listing JSON

No retries and no pagination follow-up.
"""

import time

import httpx
from pydantic import ValidationError

from cluster_probe.clients import WorkspaceClient
from cluster_probe.models import (
    ClusterListResponse,
    ConfigError,
    DecodeError,
    HttpStatusError,
    ProbeResult,
    TransportError,
)
from cluster_probe.observability import (
    get_logger,
    log_external_call_end,
    log_external_call_start,
)

logger = get_logger(__name__)

CLUSTER_LIST_PATH = "/api/2.0/clusters/list"
DEFAULT_TIMEOUT_SECONDS = 20.0
BODY_SNIPPET_LENGTH = 200


class ClusterListProbe:
    """Lists workspace clusters over plain HTTPS REST."""

    def __init__(
        self,
        verify_ssl: bool = True,
        transport: httpx.BaseTransport | None = None,
    ):
        self.verify_ssl = verify_ssl
        self.transport = transport

    def probe(
        self,
        endpoint: str,
        credential: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> ProbeResult:
        """List clusters once.

        Args:
            endpoint: Workspace base URL (scheme + host)
            credential: Bearer token
            timeout: Seconds allowed for the call

        Returns:
            ProbeResult with the cluster rows in remote order, or one error
        """
        if not endpoint or not credential:
            missing = [
                name
                for name, value in (("endpoint", endpoint), ("credential", credential))
                if not value
            ]
            logger.warning("Probe not configured", missing=missing)
            return ProbeResult.failure(
                ConfigError(message=f"Missing required value(s): {', '.join(missing)}")
            )

        # Header values go out as ASCII; a pasted token can carry smart quotes
        if not credential.isascii():
            logger.warning("Credential contains non-ASCII characters")
            return ProbeResult.failure(
                ConfigError(
                    message="Credential contains non-ASCII characters; re-copy the token"
                )
            )

        with WorkspaceClient(
            endpoint,
            credential,
            timeout=timeout,
            verify_ssl=self.verify_ssl,
            transport=self.transport,
        ) as client:
            url = client.url_for(CLUSTER_LIST_PATH)
            log_external_call_start(logger, "workspace", "clusters.list")
            started = time.perf_counter()

            try:
                response = client.get(CLUSTER_LIST_PATH)

            except httpx.TimeoutException as e:
                elapsed_ms = (time.perf_counter() - started) * 1000
                log_external_call_end(
                    logger, "workspace", "clusters.list", False, elapsed_ms, error="timeout"
                )
                return ProbeResult.failure(
                    TransportError(
                        message=f"Request to {url} timed out after {timeout}s",
                        cause=str(e),
                        cause_type=type(e).__name__,
                        timed_out=True,
                    )
                )

            except (httpx.HTTPError, httpx.InvalidURL) as e:
                elapsed_ms = (time.perf_counter() - started) * 1000
                log_external_call_end(
                    logger, "workspace", "clusters.list", False, elapsed_ms, error=str(e)
                )
                return ProbeResult.failure(
                    TransportError(
                        message=f"Cannot reach {url}: {e!s}",
                        cause=str(e),
                        cause_type=type(e).__name__,
                    )
                )

        elapsed_ms = (time.perf_counter() - started) * 1000
        log_external_call_end(
            logger,
            "workspace",
            "clusters.list",
            response.is_success,
            elapsed_ms,
            error=None if response.is_success else f"HTTP {response.status_code}",
        )

        if not response.is_success:
            return ProbeResult.failure(
                HttpStatusError(
                    message=f"Workspace returned HTTP {response.status_code}",
                    status=response.status_code,
                    body_snippet=response.text[:BODY_SNIPPET_LENGTH],
                )
            )

        return self._decode(response)

    def _decode(self, response: httpx.Response) -> ProbeResult:
        """Decode a 2xx listing body into cluster rows."""
        try:
            data = response.json()
        except ValueError as e:
            logger.error("Cluster listing is not JSON", error=str(e))
            return ProbeResult.failure(
                DecodeError(
                    message="Response body is not valid JSON",
                    detail=str(e),
                )
            )

        try:
            listing = ClusterListResponse.model_validate(data)
        except ValidationError as e:
            logger.error(
                "Cluster listing has unexpected shape",
                error_count=e.error_count(),
            )
            return ProbeResult.failure(
                DecodeError(
                    message="Response body does not match the cluster listing format",
                    detail=str(e),
                )
            )

        if listing.has_further_pages:
            logger.warning(
                "Cluster listing has further pages that were not fetched",
                returned=len(listing.clusters),
            )

        logger.info("Clusters listed", count=len(listing.clusters))
        return ProbeResult.success(listing.clusters, truncated=listing.has_further_pages)


def probe_clusters(
    endpoint: str,
    credential: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    verify_ssl: bool = True,
    transport: httpx.BaseTransport | None = None,
) -> ProbeResult:
    """List workspace clusters once."""
    return ClusterListProbe(verify_ssl=verify_ssl, transport=transport).probe(
        endpoint, credential, timeout
    )
