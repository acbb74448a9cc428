"""Probe outcome models.

A probe never raises for expected failures. It returns a ProbeResult that
holds either the cluster rows or exactly one typed error.
"""

from enum import Enum

from pydantic import Field, model_validator

from .base import ProbeBaseModel
from .cluster import ClusterSummary

AUTH_FAILURE_STATUSES = frozenset({401, 403})


class ProbeErrorKind(str, Enum):
    """Failure class of a probe."""

    CONFIG = "config"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DECODE = "decode"


class ProbeError(ProbeBaseModel):
    """Base for typed probe errors."""

    kind: ProbeErrorKind
    message: str


class ConfigError(ProbeError):
    """Endpoint or credential missing. No request was sent."""

    kind: ProbeErrorKind = ProbeErrorKind.CONFIG


class TransportError(ProbeError):
    """DNS, TLS, proxy, timeout or malformed URL."""

    kind: ProbeErrorKind = ProbeErrorKind.TRANSPORT
    cause: str = Field(description="Text of the underlying exception")
    cause_type: str = Field(description="Class name of the underlying exception")
    timed_out: bool = False


class HttpStatusError(ProbeError):
    """The workspace answered with a non-2xx status."""

    kind: ProbeErrorKind = ProbeErrorKind.HTTP_STATUS
    status: int
    body_snippet: str = ""

    @property
    def is_auth_failure(self) -> bool:
        return self.status in AUTH_FAILURE_STATUSES


class DecodeError(ProbeError):
    """2xx response whose body does not match the listing contract."""

    kind: ProbeErrorKind = ProbeErrorKind.DECODE
    detail: str = ""


AnyProbeError = ConfigError | TransportError | HttpStatusError | DecodeError


class ProbeResult(ProbeBaseModel):
    """Outcome of one cluster listing probe."""

    clusters: list[ClusterSummary] | None = None
    error: AnyProbeError | None = None
    truncated: bool = Field(
        default=False,
        description="The workspace advertised further pages that were not fetched",
    )

    @model_validator(mode="after")
    def check_exclusive(self) -> "ProbeResult":
        """Exactly one of clusters/error is set; no partial result with an error."""
        if (self.clusters is None) == (self.error is None):
            raise ValueError("ProbeResult needs exactly one of clusters or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(
        cls, clusters: list[ClusterSummary], truncated: bool = False
    ) -> "ProbeResult":
        return cls(clusters=list(clusters), truncated=truncated)

    @classmethod
    def failure(cls, error: AnyProbeError) -> "ProbeResult":
        return cls(error=error)
