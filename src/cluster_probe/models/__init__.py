"""Data models for cluster-probe.

All models follow these conventions:
- Immutable Pydantic models on ProbeBaseModel
- Field names: lowercase snake_case
- Enums: str-valued
"""

# Base
from .base import ProbeBaseModel

# Cluster listing
from .cluster import RUNNING_STATE, ClusterListResponse, ClusterSummary

# Probe outcome
from .probe import (
    AnyProbeError,
    ConfigError,
    DecodeError,
    HttpStatusError,
    ProbeError,
    ProbeErrorKind,
    ProbeResult,
    TransportError,
)

__all__ = [
    # Base
    "ProbeBaseModel",
    # Cluster listing
    "RUNNING_STATE",
    "ClusterSummary",
    "ClusterListResponse",
    # Probe outcome
    "AnyProbeError",
    "ProbeError",
    "ProbeErrorKind",
    "ConfigError",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
    "ProbeResult",
]
