# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Option schemas shared by every calling convention.

Each category declares the option names it recognises together with their
defaults. :func:`parse_options` is called once at the top of every predicate:
it rejects unknown keys, fills in defaults and returns a read-only mapping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Tuple

from .exceptions import UsageError
from .telemetry import record_usage_error

logger = logging.getLogger(__name__)


class Category(str, Enum):
    """The closed set of value categories."""

    STRING = "string"
    ARRAYREF = "arrayref"
    HASHREF = "hashref"
    CODEREF = "coderef"
    NUMBER = "number"
    INSTANCE = "instance"


@dataclass(frozen=True)
class OptionSchema:
    """Recognised options for one category.

    ``defaults`` maps option name to default value. Names listed in
    ``required`` have no default and must be supplied. ``aliases`` maps an
    alternative spelling onto its canonical name.
    """

    category: Category
    defaults: Mapping[str, Any] = field(default_factory=dict)
    required: Tuple[str, ...] = ()
    aliases: Mapping[str, str] = field(default_factory=dict)

    @property
    def recognized(self) -> Tuple[str, ...]:
        return tuple(sorted({*self.defaults, *self.required, *self.aliases}))

    def parse(self, options: Mapping[str, Any]) -> Mapping[str, Any]:
        """Validate *options* and return them with defaults applied."""

        category = self.category.value
        recognized = self.recognized
        unknown = [key for key in options if key not in recognized]
        if unknown:
            logger.debug("Rejected %s options: %s", category, ", ".join(sorted(map(str, unknown))))
            record_usage_error(category)
            raise UsageError(category=category, unrecognized=unknown)

        resolved = dict(self.defaults)
        for key, value in options.items():
            canonical = self.aliases.get(key, key)
            if canonical != key and canonical in options:
                record_usage_error(category)
                raise UsageError(
                    f"Option '{canonical}' given twice (as '{canonical}' and '{key}')",
                    category=category,
                )
            # None means "not supplied" so callers can forward optional settings.
            if value is None and canonical in self.defaults:
                continue
            resolved[canonical] = value

        missing = [name for name in self.required if resolved.get(name) is None]
        if missing:
            record_usage_error(category)
            raise UsageError(
                f"Missing required argument(s): {', '.join(missing)}",
                category=category,
            )
        return MappingProxyType(resolved)


SCHEMAS: Mapping[Category, OptionSchema] = MappingProxyType(
    {
        Category.STRING: OptionSchema(Category.STRING, {"allow_empty": True}),
        Category.ARRAYREF: OptionSchema(
            Category.ARRAYREF, {"allow_empty": True, "no_subclass": False}
        ),
        Category.HASHREF: OptionSchema(
            Category.HASHREF, {"allow_empty": True, "no_subclass": False}
        ),
        Category.CODEREF: OptionSchema(Category.CODEREF),
        Category.NUMBER: OptionSchema(
            Category.NUMBER, {"positive": False, "strictly_positive": False}
        ),
        Category.INSTANCE: OptionSchema(
            Category.INSTANCE, required=("class",), aliases={"class_": "class"}
        ),
    }
)


def parse_options(category: Category, options: Mapping[str, Any]) -> Mapping[str, Any]:
    """Validate the options bag for *category*; raise :class:`UsageError` on bad keys."""

    return SCHEMAS[Category(category)].parse(options)


def check_class_target(target: Any) -> Any:
    """Return *target* if it is usable as the ``class`` option of an is-a check."""

    if isinstance(target, type) or (isinstance(target, str) and target):
        return target
    record_usage_error(Category.INSTANCE.value)
    raise UsageError(
        "Option 'class' must be a class name or a type",
        category=Category.INSTANCE.value,
    )


__all__ = [
    "Category",
    "OptionSchema",
    "SCHEMAS",
    "check_class_target",
    "parse_options",
]
