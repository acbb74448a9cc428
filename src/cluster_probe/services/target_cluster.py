"""Target cluster check.

Spark Connect attaches to one cluster (CLUSTER_ID), and the attach hangs or
fails when that cluster is terminated. Looking it up in the REST listing
catches this before the heavier client is involved.
"""

from enum import Enum

from pydantic import BaseModel

from cluster_probe.models import ClusterSummary
from cluster_probe.observability import get_logger

logger = get_logger(__name__)


class TargetClusterStatus(str, Enum):
    """Status of the configured cluster in the listing."""

    RUNNING = "running"
    NOT_RUNNING = "not_running"
    NOT_FOUND = "not_found"
    NOT_CONFIGURED = "not_configured"


class TargetClusterCheck(BaseModel):
    """Result of looking up the target cluster."""

    status: TargetClusterStatus
    message: str
    cluster: ClusterSummary | None = None


def check_target_cluster(
    clusters: list[ClusterSummary],
    cluster_id: str | None,
) -> TargetClusterCheck:
    """Find the target cluster in a listing and report whether it is running."""
    if not cluster_id:
        return TargetClusterCheck(
            status=TargetClusterStatus.NOT_CONFIGURED,
            message="No target cluster configured (CLUSTER_ID)",
        )

    match = next((c for c in clusters if c.id == cluster_id), None)

    if match is None:
        logger.warning("Target cluster not in listing", cluster_id=cluster_id)
        return TargetClusterCheck(
            status=TargetClusterStatus.NOT_FOUND,
            message=f"Cluster {cluster_id} is not visible with this token",
        )

    if not match.is_running:
        state = match.state or "in an unknown state"
        return TargetClusterCheck(
            status=TargetClusterStatus.NOT_RUNNING,
            message=f"Cluster {cluster_id} is {state}; start it before connecting",
            cluster=match,
        )

    return TargetClusterCheck(
        status=TargetClusterStatus.RUNNING,
        message=f"Cluster {cluster_id} is running",
        cluster=match,
    )
