"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from taskflow.shared.telemetry.logging import setup_logging
from taskflow.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from taskflow.shared.telemetry.tracing import (
    add_span_attributes,
    get_trace_id,
    traced,
)

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "get_trace_id",
]
