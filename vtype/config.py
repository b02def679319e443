# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Environment-driven settings.

Settings are read on every access so tests (and long-running processes) can
flip them with ``os.environ`` without re-importing the package.
"""

from __future__ import annotations

import os

TELEMETRY_ENV = "VTYPE_TELEMETRY"

_FALSEY = ("", "0", "false", "no", "off")


def env_flag(name: str, default: bool) -> bool:
    """Interpret environment variable *name* as a boolean switch."""

    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSEY


def telemetry_enabled() -> bool:
    """Return whether failure counters should be recorded."""

    return env_flag(TELEMETRY_ENV, True)


__all__ = [
    "TELEMETRY_ENV",
    "env_flag",
    "telemetry_enabled",
]
