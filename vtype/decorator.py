# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

# vtype/decorator.py

import functools
import inspect
import logging
from typing import Any, Callable, Dict, List, Mapping, Tuple

from .assertions import (
    assert_arrayref,
    assert_coderef,
    assert_hashref,
    assert_instance,
    assert_number,
    assert_string,
)
from .exceptions import UsageError, ValidationFailure
from .options import SCHEMAS, Category, check_class_target
from .telemetry import record_guard_failure, record_usage_error

logger = logging.getLogger(__name__)

# Sentinel object to detect if a parameter was provided by the user
_sentinel = object()

_ASSERTIONS: Dict[Category, Callable[..., None]] = {
    Category.STRING: assert_string,
    Category.ARRAYREF: assert_arrayref,
    Category.HASHREF: assert_hashref,
    Category.CODEREF: assert_coderef,
    Category.NUMBER: assert_number,
    Category.INSTANCE: assert_instance,
}


def _configuration_error(message: str, **details: Any) -> UsageError:
    """Log and count a guard misconfiguration, returning the error to raise."""

    logger.error("%s", message)
    record_usage_error("guard")
    return UsageError(message, **details)


def _parse_check(func_name: str, argument: str, check: Any) -> Tuple[Category, Dict[str, Any]]:
    """Turn ``"number"`` or ``("number", {"positive": True})`` into a validated pair."""

    options: Mapping[str, Any] = {}
    if isinstance(check, tuple):
        if len(check) != 2 or not isinstance(check[1], Mapping):
            raise _configuration_error(
                f"Check for argument '{argument}' of '{func_name}' must be a category "
                "or a (category, options) pair"
            )
        check, options = check

    try:
        category = Category(check)
    except ValueError:
        known = ", ".join(c.value for c in Category)
        raise _configuration_error(
            f"Unknown category {check!r} for argument '{argument}' of '{func_name}'. "
            f"Expected one of: {known}"
        ) from None

    # Bad options surface now, not on the first call.
    resolved = SCHEMAS[category].parse(options)
    if category is Category.INSTANCE:
        check_class_target(resolved["class"])
    return category, dict(options)


def type_guard(*, on_fail: Any = _sentinel, **checks: Any):
    """
    Validate the arguments of the decorated function before it runs.

    Each keyword names a parameter of the decorated function and the category
    its value must belong to, optionally with options for that category:

    .. code-block:: python

        from vtype import type_guard

        @type_guard(
            name="string",
            rows=("arrayref", {"allow_empty": False}),
            limit=("number", {"strictly_positive": True}),
        )
        def export(name, rows, limit=100): ...

    Misconfiguration (unknown parameter, unknown category, unrecognised
    option, unusable ``class`` for an instance check) is logged and raises :class:`~vtype.exceptions.UsageError` when the decorator is
    applied. At call time every failing argument is collected into a single
    :class:`~vtype.exceptions.ValidationFailure`; its message names the
    arguments and the expected categories but never their values.

    :param on_fail: Optional. Behaviour when validation fails. If not given the
                    ``ValidationFailure`` is raised. A callable is invoked
                    (with the error when it accepts one argument) and its
                    result returned. Any other value is returned directly.
    """

    if not checks:
        raise _configuration_error("type_guard() needs at least one argument check")

    def decorator(func: Callable):
        func_name = func.__qualname__
        signature = inspect.signature(func)
        var_kwargs = next(
            (
                name
                for name, param in signature.parameters.items()
                if param.kind == inspect.Parameter.VAR_KEYWORD
            ),
            None,
        )

        unknown = set(checks) - set(signature.parameters)
        if unknown and var_kwargs is None:
            raise _configuration_error(
                f"type_guard on '{func_name}' references undefined parameter(s): {sorted(unknown)}",
                unrecognized=unknown,
            )

        parsed = {
            argument: _parse_check(func_name, argument, check)
            for argument, check in checks.items()
        }

        def _validate(args, kwargs) -> None:
            bound = signature.bind(*args, **kwargs)
            bound.apply_defaults()
            extra = bound.arguments.get(var_kwargs, {}) if var_kwargs else {}

            failed: List[str] = []
            lines = [f"Argument validation failed for '{func_name}':"]
            for argument, (category, options) in parsed.items():
                if argument in bound.arguments:
                    value = bound.arguments[argument]
                elif argument in extra:
                    value = extra[argument]
                else:
                    continue
                try:
                    _ASSERTIONS[category](value, **options)
                except ValidationFailure as failure:
                    failed.append(argument)
                    lines.append(f" - {argument}: {failure.message}")

            if failed:
                record_guard_failure(func_name)
                raise ValidationFailure("\n".join(lines), arguments=failed)

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                _validate(args, kwargs)
            except ValidationFailure as error:
                return _handle_failure(error)
            return func(*args, **kwargs)

        @functools.wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                _validate(args, kwargs)
            except ValidationFailure as error:
                result = _handle_failure(error)
                if inspect.isawaitable(result):
                    result = await result
                return result
            return await func(*args, **kwargs)

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    def _handle_failure(error: ValidationFailure):
        """Executes the user-supplied `on_fail` handler or raises by default."""

        if on_fail is _sentinel:
            raise error

        # Static value supplied (e.g. None/False)
        if not callable(on_fail):
            return on_fail

        if _accepts_argument(on_fail):
            return on_fail(error)
        return on_fail()

    return decorator


def _accepts_argument(handler: Callable) -> bool:
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(None)
    except TypeError:
        return False
    return True


__all__ = ["type_guard"]
