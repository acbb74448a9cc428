"""Diagnosis of probe results.

Turns a ProbeResult into a verdict, a few hint lines for the user and a
process exit code. The REST probe uses plain HTTPS; Spark Connect uses gRPC
over a long-lived HTTP/2 connection, which some proxies block. If this
probe succeeds and Spark Connect still fails, gRPC traffic is the suspect.
"""

from enum import Enum

from pydantic import BaseModel, Field

from cluster_probe.models import (
    ConfigError,
    DecodeError,
    HttpStatusError,
    ProbeErrorKind,
    ProbeResult,
    TransportError,
)


class Verdict(str, Enum):
    """What the probe says about the environment."""

    OK = "ok"
    CONFIGURATION = "configuration"
    NETWORK = "network"
    AUTHENTICATION = "authentication"
    SERVER = "server"
    CONTRACT = "contract"


EXIT_CODES: dict[ProbeErrorKind | None, int] = {
    None: 0,
    ProbeErrorKind.CONFIG: 2,
    ProbeErrorKind.TRANSPORT: 3,
    ProbeErrorKind.HTTP_STATUS: 4,
    ProbeErrorKind.DECODE: 5,
}


class Diagnosis(BaseModel):
    """User-facing reading of a probe result."""

    verdict: Verdict
    summary: str
    hints: list[str] = Field(default_factory=list)
    exit_code: int = 0


def diagnose(result: ProbeResult) -> Diagnosis:
    """Explain a probe result."""
    error = result.error

    if error is None:
        hints = [
            "Network, proxy and token are fine for HTTPS REST traffic.",
            "If Spark Connect still fails, the proxy or firewall is likely blocking gRPC.",
        ]
        if result.truncated:
            hints.append("The workspace has more clusters than one listing page shows.")
        return Diagnosis(
            verdict=Verdict.OK,
            summary="REST connectivity OK",
            hints=hints,
            exit_code=EXIT_CODES[None],
        )

    exit_code = EXIT_CODES[ProbeErrorKind(error.kind)]

    if isinstance(error, ConfigError):
        return Diagnosis(
            verdict=Verdict.CONFIGURATION,
            summary=error.message,
            hints=[
                "Set DATABRICKS_HOST (e.g. https://dbc-xxxx.cloud.databricks.com) "
                "and DATABRICKS_TOKEN in the environment or a .env file.",
            ],
            exit_code=exit_code,
        )

    if isinstance(error, TransportError):
        hints = ["This points at the network, proxy or firewall, not the token."]
        if error.timed_out:
            hints.append("The request timed out; a proxy may be silently dropping it.")
        hints.append("Check HTTPS_PROXY / HTTP_PROXY and that the host URL is correct.")
        if "ssl" in error.cause.lower() or "certificate" in error.cause.lower():
            hints.append(
                "TLS verification failed; an intercepting proxy may need "
                "PROBE_SKIP_TLS_VERIFY=true (or --insecure)."
            )
        return Diagnosis(
            verdict=Verdict.NETWORK,
            summary=f"{error.message} ({error.cause_type})",
            hints=hints,
            exit_code=exit_code,
        )

    if isinstance(error, HttpStatusError):
        if error.is_auth_failure:
            return Diagnosis(
                verdict=Verdict.AUTHENTICATION,
                summary=error.message,
                hints=[
                    "The workspace was reached but rejected the request.",
                    "Check the token and that the host URL is the right workspace.",
                ],
                exit_code=exit_code,
            )
        hints = ["The workspace was reached but the request failed on the server side."]
        if error.body_snippet:
            hints.append(f"Response: {error.body_snippet}")
        return Diagnosis(
            verdict=Verdict.SERVER,
            summary=error.message,
            hints=hints,
            exit_code=exit_code,
        )

    if isinstance(error, DecodeError):
        return Diagnosis(
            verdict=Verdict.CONTRACT,
            summary=error.message,
            hints=[
                "The workspace answered, but not with the cluster listing format.",
                "A proxy login page or an API change can cause this.",
            ],
            exit_code=exit_code,
        )

    raise TypeError(f"Unhandled probe error: {type(error).__name__}")
