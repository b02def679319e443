# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Filtering functions - return the value when it matches, ``None`` otherwise.

The original object is returned as-is (same identity), never a copy. Only bad
options raise.
"""

from __future__ import annotations

from typing import Any, Optional

from .boolean_tests import (
    is_arrayref,
    is_coderef,
    is_hashref,
    is_instance,
    is_number,
    is_string,
)


def filter_string(value: Any, **options: Any) -> Optional[Any]:
    return value if is_string(value, **options) else None


def filter_arrayref(value: Any, **options: Any) -> Optional[Any]:
    return value if is_arrayref(value, **options) else None


def filter_hashref(value: Any, **options: Any) -> Optional[Any]:
    return value if is_hashref(value, **options) else None


def filter_coderef(value: Any, **options: Any) -> Optional[Any]:
    return value if is_coderef(value, **options) else None


def filter_number(value: Any, **options: Any) -> Optional[Any]:
    return value if is_number(value, **options) else None


def filter_instance(value: Any, **options: Any) -> Optional[Any]:
    return value if is_instance(value, **options) else None


__all__ = [
    "filter_string",
    "filter_arrayref",
    "filter_hashref",
    "filter_coderef",
    "filter_number",
    "filter_instance",
]
