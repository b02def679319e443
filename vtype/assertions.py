# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Assertion functions - return nothing, raise when the value does not match.

Meant for function-entry guards::

    def load(path, *, retries=3):
        assert_string(path, allow_empty=False)
        assert_number(retries, positive=True)

A mismatch raises :class:`~vtype.exceptions.ValidationFailure` with a fixed
message per category. Option errors from the underlying boolean test propagate
unchanged as :class:`~vtype.exceptions.UsageError`.
"""

from __future__ import annotations

from typing import Any

from .boolean_tests import (
    is_arrayref,
    is_coderef,
    is_hashref,
    is_instance,
    is_number,
    is_string,
)
from .exceptions import ValidationFailure
from .options import Category
from .telemetry import record_assertion_failure

MESSAGES = {
    Category.STRING: "Not a string",
    Category.ARRAYREF: "Not an arrayref",
    Category.HASHREF: "Not a hashref",
    Category.CODEREF: "Not a coderef",
    Category.NUMBER: "Not a number",
    Category.INSTANCE: "Not an instance of the requested class",
}


def _fail_unless(accepted: bool, category: Category) -> None:
    if accepted:
        return
    record_assertion_failure(category.value)
    raise ValidationFailure(MESSAGES[category], category=category.value)


def assert_string(value: Any, **options: Any) -> None:
    """Raise unless *value* is a string (``0`` and ``''`` are strings)."""
    _fail_unless(is_string(value, **options), Category.STRING)


def assert_arrayref(value: Any, **options: Any) -> None:
    """Raise unless *value* is a list; accepts ``allow_empty`` and ``no_subclass``."""
    _fail_unless(is_arrayref(value, **options), Category.ARRAYREF)


def assert_hashref(value: Any, **options: Any) -> None:
    """Raise unless *value* is a mapping; accepts ``allow_empty`` and ``no_subclass``."""
    _fail_unless(is_hashref(value, **options), Category.HASHREF)


def assert_coderef(value: Any, **options: Any) -> None:
    _fail_unless(is_coderef(value, **options), Category.CODEREF)


def assert_number(value: Any, **options: Any) -> None:
    """Raise unless *value* is a number; accepts ``positive`` and ``strictly_positive``."""
    _fail_unless(is_number(value, **options), Category.NUMBER)


def assert_instance(value: Any, **options: Any) -> None:
    """Raise unless *value* is-a ``class`` (subclasses included)."""
    _fail_unless(is_instance(value, **options), Category.INSTANCE)


__all__ = [
    "assert_string",
    "assert_arrayref",
    "assert_hashref",
    "assert_coderef",
    "assert_number",
    "assert_instance",
]
