"""Observability module for structured logging."""

from .logging import (
    ProbeContext,
    get_logger,
    log_external_call_end,
    log_external_call_start,
    probe_id_var,
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    "get_logger",
    # Context
    "ProbeContext",
    "probe_id_var",
    # Logging helpers
    "log_external_call_start",
    "log_external_call_end",
]
