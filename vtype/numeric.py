# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Numeric content detection used by :func:`vtype.is_number`.

Numeric-ness is about content, not representation: ``42``, ``4.2e1`` and
``" 42 "`` are all numbers. Only ASCII digits and whitespace count. Text is
first normalised through a plain ``str`` round-trip so that ``str`` subclasses
with overridden methods are inspected the same way as ordinary strings.
``bytes`` are never numbers, just as they are never strings.
"""

from __future__ import annotations

import math
import numbers
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

_NUMERIC_TEXT = re.compile(
    r"""
    \s*
    [+-]?
    (?:
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | inf(?:inity)?
      | nan
    )
    \s*
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


def normalize(value: Any) -> Any:
    """Return *value* with ``str`` subclasses rebuilt as plain ``str``."""

    if isinstance(value, str):
        return str.__str__(value)
    return value


def is_real_number(value: Any) -> bool:
    """True for native real numbers; ``bool`` is not considered a number."""

    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def is_numeric_text(value: Any) -> bool:
    return isinstance(value, str) and _NUMERIC_TEXT.fullmatch(value) is not None


def numeric_value(value: Any) -> Optional[Union[numbers.Real, Decimal]]:
    """Return a comparable number for *value*, or ``None`` when it has no sign.

    Text is converted with :class:`~decimal.Decimal` so that very large or very
    small values keep their exact sign. NaN has no sign and yields ``None``.
    """

    if is_numeric_text(value):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
        return None if number.is_nan() else number
    if isinstance(value, Decimal):
        return None if value.is_nan() else value
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


__all__ = [
    "is_numeric_text",
    "is_real_number",
    "normalize",
    "numeric_value",
]
