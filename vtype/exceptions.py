# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for the vtype package.

Two kinds of failure exist and they must never be confused:

* :class:`UsageError` - the *call* is malformed (unknown option, missing
  required option, bad guard configuration). This is a programming mistake and
  is raised by every calling convention.
* :class:`ValidationFailure` - the *value* does not match. Only the assertion
  form and :func:`vtype.type_guard` raise it; the boolean form answers
  ``False`` and the filter form answers ``None`` instead.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence


class VTypeError(Exception):
    """Base class for every error raised by vtype."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UsageError(VTypeError, TypeError):
    """Raised when a predicate is called with options it does not recognise."""

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        category: Optional[str] = None,
        unrecognized: Iterable[str] = (),
    ):
        self.category = category
        self.unrecognized = tuple(sorted(str(key) for key in unrecognized))
        if message is None:
            message = f"Arguments not recognized: {', '.join(self.unrecognized)}"
        super().__init__(message)


class ValidationFailure(VTypeError, ValueError):
    """Raised by assertions when the value does not belong to the category.

    The offending value is deliberately absent from the message.
    """

    def __init__(
        self,
        message: str,
        *,
        category: Optional[str] = None,
        arguments: Sequence[str] = (),
    ):
        super().__init__(message)
        self.category = category
        self.arguments = tuple(arguments)


__all__ = [
    "VTypeError",
    "UsageError",
    "ValidationFailure",
]
