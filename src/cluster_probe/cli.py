"""Command line entry point.

Usage:
    cluster-probe [--host URL] [--timeout SECONDS] [--cluster-id ID] [--insecure] [--json]

Reads DATABRICKS_HOST, DATABRICKS_TOKEN and CLUSTER_ID from the environment
(or .env); flags override them. Exit status is 0 on success, otherwise the
failure class: 2 config, 3 network, 4 HTTP status, 5 decode.
"""

import argparse
import sys
from uuid import uuid4

from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cluster_probe import __version__
from cluster_probe.config import LogLevel, ProbeSettings, get_settings
from cluster_probe.models import ClusterSummary, ProbeErrorKind, ProbeResult
from cluster_probe.observability import ProbeContext, get_logger, setup_logging
from cluster_probe.services import (
    EXIT_CODES,
    Diagnosis,
    TargetClusterCheck,
    TargetClusterStatus,
    Verdict,
    check_target_cluster,
    diagnose,
    probe_clusters,
)

logger = get_logger(__name__)

VERDICT_STYLES = {
    Verdict.OK: "green",
    Verdict.CONFIGURATION: "yellow",
}

TARGET_STYLES = {
    TargetClusterStatus.RUNNING: "green",
    TargetClusterStatus.NOT_RUNNING: "yellow",
    TargetClusterStatus.NOT_FOUND: "red",
    TargetClusterStatus.NOT_CONFIGURED: "dim",
}


class ProbeReport(BaseModel):
    """Machine-readable output of one CLI run."""

    host: str
    result: ProbeResult
    diagnosis: Diagnosis
    target: TargetClusterCheck | None = None


def positive_float(value: str) -> float:
    """argparse type for --timeout."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cluster-probe",
        description=(
            "List workspace clusters over plain HTTPS REST to check network, "
            "proxy and token before trying Spark Connect."
        ),
    )
    parser.add_argument("--host", help="Workspace URL (default: DATABRICKS_HOST)")
    parser.add_argument(
        "--timeout",
        type=positive_float,
        help="Request timeout in seconds (default: PROBE_TIMEOUT_SECONDS or 20)",
    )
    parser.add_argument(
        "--cluster-id",
        help="Cluster that Spark Connect will use (default: CLUSTER_ID)",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Skip TLS peer verification (intercepting proxies)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="as_json",
        help="Print the report as JSON",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def render_clusters(console: Console, clusters: list[ClusterSummary]) -> None:
    """Print the cluster listing as a table."""
    if not clusters:
        console.print("No clusters visible with this token.")
        return

    table = Table(title="Available clusters")
    table.add_column("cluster_id", no_wrap=True)
    table.add_column("cluster_name")
    table.add_column("state")
    table.add_column("spark_version")
    for cluster in clusters:
        table.add_row(
            cluster.id or "",
            cluster.name or "",
            cluster.state or "",
            cluster.runtime_version or "",
        )
    console.print(table)


def render_diagnosis(console: Console, diagnosis: Diagnosis) -> None:
    """Print the verdict and hints."""
    style = VERDICT_STYLES.get(diagnosis.verdict, "red")
    if diagnosis.verdict == Verdict.OK:
        console.print(f"[{style}]SUCCESS:[/{style}] {escape(diagnosis.summary)}", highlight=False)
    else:
        console.print(
            f"[{style}]ERROR ({diagnosis.verdict.value}):[/{style}] {escape(diagnosis.summary)}",
            highlight=False,
        )
    for hint in diagnosis.hints:
        console.print(f"  - {hint}", highlight=False, markup=False)


def render_target(console: Console, target: TargetClusterCheck) -> None:
    """Print where the configured cluster stands."""
    style = TARGET_STYLES[target.status]
    console.print(f"[{style}]Target cluster:[/{style}] {escape(target.message)}", highlight=False)


def run(
    settings: ProbeSettings,
    args: argparse.Namespace,
    console: Console,
) -> int:
    """Run one probe and print the report. Returns the exit status."""
    workspace = settings.workspace
    host = args.host or workspace.host
    token = workspace.token.get_secret_value()
    cluster_id = args.cluster_id or workspace.cluster_id
    timeout = args.timeout if args.timeout is not None else settings.timeout_seconds
    verify_ssl = not (args.insecure or settings.skip_tls_verify)

    if not args.as_json:
        console.print(f"Workspace: {host or '(not set)'}", highlight=False)
        console.print(f"Token: {'set' if token else '(not set)'}", highlight=False)
        console.print("Listing clusters over HTTPS REST...", highlight=False)

    with ProbeContext(probe_id=uuid4().hex[:12]):
        logger.info("Starting cluster probe", host=host, timeout=timeout)
        result = probe_clusters(host, token, timeout=timeout, verify_ssl=verify_ssl)
        diagnosis = diagnose(result)

    target = None
    if result.ok:
        target = check_target_cluster(result.clusters, cluster_id)

    if args.as_json:
        report = ProbeReport(host=host, result=result, diagnosis=diagnosis, target=target)
        sys.stdout.write(report.model_dump_json(indent=2) + "\n")
        return diagnosis.exit_code

    if result.ok:
        render_clusters(console, result.clusters)
    render_diagnosis(console, diagnosis)
    if target is not None:
        render_target(console, target)

    return diagnosis.exit_code


def settings_diagnosis(error: ValidationError) -> Diagnosis:
    """Explain settings that failed validation."""
    hints = [
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    ]
    hints.append("Fix the environment or .env value and run again.")
    return Diagnosis(
        verdict=Verdict.CONFIGURATION,
        summary="Invalid configuration",
        hints=hints,
        exit_code=EXIT_CODES[ProbeErrorKind.CONFIG],
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()

    try:
        settings = get_settings()
    except ValidationError as e:
        # Logging is not configured yet; its processors read the same settings
        diagnosis = settings_diagnosis(e)
        if args.as_json:
            sys.stdout.write(diagnosis.model_dump_json(indent=2) + "\n")
        else:
            render_diagnosis(console, diagnosis)
        return diagnosis.exit_code

    setup_logging(
        log_level=LogLevel.DEBUG if args.verbose else settings.log_level,
        log_format=settings.log_format,
    )
    return run(settings, args, console)
