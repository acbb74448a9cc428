"""Tests for probe result diagnosis."""

import pytest

from cluster_probe.models import (
    ClusterSummary,
    ConfigError,
    DecodeError,
    HttpStatusError,
    ProbeResult,
    TransportError,
)
from cluster_probe.services import Verdict, diagnose


def failed(error) -> ProbeResult:
    return ProbeResult.failure(error)


class TestVerdicts:
    def test_success(self):
        diagnosis = diagnose(ProbeResult.success([ClusterSummary(id="1")]))

        assert diagnosis.verdict == Verdict.OK
        assert diagnosis.exit_code == 0
        assert any("gRPC" in hint for hint in diagnosis.hints)

    def test_truncated_success_mentions_pages(self):
        diagnosis = diagnose(ProbeResult.success([], truncated=True))

        assert diagnosis.verdict == Verdict.OK
        assert any("page" in hint for hint in diagnosis.hints)

    def test_config(self):
        diagnosis = diagnose(failed(ConfigError(message="Missing required value(s): endpoint")))

        assert diagnosis.verdict == Verdict.CONFIGURATION
        assert diagnosis.exit_code == 2
        assert "DATABRICKS_HOST" in diagnosis.hints[0]

    def test_transport_is_network(self):
        error = TransportError(
            message="Cannot reach host",
            cause="[Errno -2] Name or service not known",
            cause_type="ConnectError",
        )

        diagnosis = diagnose(failed(error))

        assert diagnosis.verdict == Verdict.NETWORK
        assert diagnosis.exit_code == 3
        assert "ConnectError" in diagnosis.summary
        assert any("HTTPS_PROXY" in hint for hint in diagnosis.hints)

    def test_transport_timeout_hint(self):
        error = TransportError(
            message="timed out",
            cause="timed out",
            cause_type="ReadTimeout",
            timed_out=True,
        )

        diagnosis = diagnose(failed(error))

        assert any("timed out" in hint for hint in diagnosis.hints)

    def test_tls_failure_suggests_insecure(self):
        error = TransportError(
            message="Cannot reach host",
            cause="[SSL: CERTIFICATE_VERIFY_FAILED] certificate verify failed",
            cause_type="ConnectError",
        )

        diagnosis = diagnose(failed(error))

        assert any("PROBE_SKIP_TLS_VERIFY" in hint for hint in diagnosis.hints)

    @pytest.mark.parametrize("status", [401, 403])
    def test_auth_statuses(self, status):
        diagnosis = diagnose(failed(HttpStatusError(message="denied", status=status)))

        assert diagnosis.verdict == Verdict.AUTHENTICATION
        assert diagnosis.exit_code == 4

    def test_other_status_is_server(self):
        error = HttpStatusError(message="HTTP 500", status=500, body_snippet="internal error")

        diagnosis = diagnose(failed(error))

        assert diagnosis.verdict == Verdict.SERVER
        assert diagnosis.exit_code == 4
        assert any("internal error" in hint for hint in diagnosis.hints)

    def test_decode(self):
        diagnosis = diagnose(failed(DecodeError(message="not JSON")))

        assert diagnosis.verdict == Verdict.CONTRACT
        assert diagnosis.exit_code == 5
