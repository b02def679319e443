# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for vtype."""

from __future__ import annotations

import logging

from ..config import telemetry_enabled
from .runtime import meter

logger = logging.getLogger(__name__)

assertion_failure_total = meter.create_counter(
    name="vtype.assertion.failure.total",
    description="Counts assertions that rejected a value, partitioned by category.",
    unit="1",
)

usage_error_total = meter.create_counter(
    name="vtype.usage_error.total",
    description="Counts calls rejected for unrecognized or missing options.",
    unit="1",
)

guard_failure_total = meter.create_counter(
    name="vtype.guard.failure.total",
    description="Counts guarded function calls rejected by argument checks.",
    unit="1",
)


def _add(counter, attributes) -> None:
    if not telemetry_enabled():
        return
    try:
        counter.add(1, attributes)
    except Exception:
        # Telemetry must never interfere with user code
        logger.debug("Failed to record vtype metric", exc_info=True)


def record_assertion_failure(category: str) -> None:
    _add(assertion_failure_total, {"category": category})


def record_usage_error(category: str) -> None:
    _add(usage_error_total, {"category": category})


def record_guard_failure(function: str) -> None:
    _add(guard_failure_total, {"function": function})


__all__ = [
    "assertion_failure_total",
    "usage_error_total",
    "guard_failure_total",
    "record_assertion_failure",
    "record_usage_error",
    "record_guard_failure",
]
