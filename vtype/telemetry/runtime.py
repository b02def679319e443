# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry handles shared by the vtype instruments.

Only the OpenTelemetry *API* is used. Applications that install and configure
an SDK get real exports; everyone else gets the API's no-op meter.
"""

from __future__ import annotations

from opentelemetry import metrics

from .._version import __version__

meter = metrics.get_meter("vtype", __version__)

__all__ = ["meter"]
