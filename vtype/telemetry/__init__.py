"""Telemetry package - OpenTelemetry counters for vtype failures."""

from .metrics import (
    assertion_failure_total,
    guard_failure_total,
    record_assertion_failure,
    record_guard_failure,
    record_usage_error,
    usage_error_total,
)

__all__ = [
    "assertion_failure_total",
    "guard_failure_total",
    "usage_error_total",
    "record_assertion_failure",
    "record_guard_failure",
    "record_usage_error",
]
