"""Probe services."""

from .cluster_probe import (
    CLUSTER_LIST_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    ClusterListProbe,
    probe_clusters,
)
from .diagnostics import EXIT_CODES, Diagnosis, Verdict, diagnose
from .target_cluster import (
    TargetClusterCheck,
    TargetClusterStatus,
    check_target_cluster,
)

__all__ = [
    "CLUSTER_LIST_PATH",
    "DEFAULT_TIMEOUT_SECONDS",
    "ClusterListProbe",
    "probe_clusters",
    "EXIT_CODES",
    "Diagnosis",
    "Verdict",
    "diagnose",
    "TargetClusterCheck",
    "TargetClusterStatus",
    "check_target_cluster",
]
