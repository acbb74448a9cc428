"""Tests for logging setup and probe context."""

import logging

from cluster_probe.config import LogFormat, LogLevel
from cluster_probe.observability import ProbeContext, probe_id_var, setup_logging
from cluster_probe.observability.logging import add_probe_context, add_service_context


class TestProbeContext:
    def test_sets_and_resets_probe_id(self):
        assert probe_id_var.get() is None

        with ProbeContext(probe_id="abc123"):
            assert probe_id_var.get() == "abc123"

        assert probe_id_var.get() is None

    def test_probe_id_added_to_events(self):
        with ProbeContext(probe_id="abc123"):
            event = add_probe_context(None, "info", {"event": "x"})

        assert event["probe_id"] == "abc123"

    def test_no_probe_id_outside_context(self):
        event = add_probe_context(None, "info", {"event": "x"})

        assert "probe_id" not in event


class TestSetup:
    def test_service_context(self):
        event = add_service_context(None, "info", {"event": "x"})

        assert event["service"] == "cluster-probe"

    def test_level_and_noisy_loggers(self):
        setup_logging(log_level=LogLevel.WARNING, log_format=LogFormat.JSON)

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_accepts_strings(self):
        setup_logging(log_level="debug", log_format="text")

        assert logging.getLogger().level == logging.DEBUG
