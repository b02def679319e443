# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""vtype - data type validation helpers.

Each category (string, arrayref, hashref, coderef, number, instance) comes in
three calling conventions:

* ``is_*``      - boolean tests, see :mod:`vtype.boolean_tests`
* ``assert_*``  - raise on mismatch, see :mod:`vtype.assertions`
* ``filter_*``  - return the value or ``None``, see :mod:`vtype.filters`

Functions can be imported one by one, or a whole group at a time::

    from vtype.assertions import *
    checks = vtype.get_group("boolean_tests")
"""

from types import MappingProxyType
from typing import Callable, Dict, Mapping, Tuple

from ._version import __version__
from . import assertions as _assertions
from . import boolean_tests as _boolean_tests
from . import filters as _filters
from .assertions import (
    assert_arrayref,
    assert_coderef,
    assert_hashref,
    assert_instance,
    assert_number,
    assert_string,
)
from .boolean_tests import (
    is_arrayref,
    is_coderef,
    is_hashref,
    is_instance,
    is_number,
    is_string,
)
from .decorator import type_guard
from .exceptions import UsageError, ValidationFailure, VTypeError
from .filters import (
    filter_arrayref,
    filter_coderef,
    filter_hashref,
    filter_instance,
    filter_number,
    filter_string,
)
from .options import Category

EXPORT_GROUPS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "boolean_tests": tuple(_boolean_tests.__all__),
        "assertions": tuple(_assertions.__all__),
        "filters": tuple(_filters.__all__),
        "all": (
            *_boolean_tests.__all__,
            *_assertions.__all__,
            *_filters.__all__,
        ),
    }
)


def get_group(name: str) -> Dict[str, Callable]:
    """Return ``{function name: function}`` for an export group."""

    try:
        names = EXPORT_GROUPS[name]
    except KeyError:
        raise UsageError(
            f"Unknown export group {name!r}. Expected one of: {', '.join(EXPORT_GROUPS)}"
        ) from None
    return {fn_name: globals()[fn_name] for fn_name in names}


__all__ = [
    "__version__",
    "EXPORT_GROUPS",
    "get_group",
    "Category",
    "type_guard",
    "VTypeError",
    "UsageError",
    "ValidationFailure",
    *EXPORT_GROUPS["all"],
]
