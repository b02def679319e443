"""Shared fixtures for the vtype test-suite.

The class hierarchy and sample values below are reused across the predicate,
convention and decorator tests so every calling convention is exercised
against the same inputs.
"""
from __future__ import annotations

import collections
from decimal import Decimal
from fractions import Fraction

import pytest


class Parent:  # pylint: disable=too-few-public-methods
    pass


class Child(Parent):  # pylint: disable=too-few-public-methods
    pass


class TaggedList(list):
    """A list subclass standing in for an object layered on a plain list."""


class TaggedDict(dict):
    """A dict subclass standing in for an object layered on a plain dict."""


def _function():  # noqa: D401
    return None


# Values spanning every category plus the usual suspects (None, bool, empties).
SAMPLE_VALUES = [
    None,
    True,
    False,
    0,
    1,
    -3,
    2**100,
    0.0,
    -0.5,
    float("nan"),
    Decimal("1.5"),
    Fraction(1, 3),
    "",
    "text",
    "42",
    " -1.5e3 ",
    b"42",
    [],
    [1, 2],
    TaggedList([1]),
    collections.deque([1]),
    (1, 2),
    {},
    {"a": 1},
    TaggedDict(a=1),
    collections.OrderedDict(),
    {1, 2},
    _function,
    lambda: None,
    len,
    Parent,
    Parent(),
    Child(),
    object(),
]

# Category name -> option combinations worth checking for that category.
OPTION_SETS = {
    "string": [{}, {"allow_empty": False}],
    "arrayref": [{}, {"allow_empty": False}, {"no_subclass": True}],
    "hashref": [{}, {"allow_empty": False}, {"no_subclass": True}],
    "coderef": [{}],
    "number": [{}, {"positive": True}, {"strictly_positive": True}],
    "instance": [{"class": "Parent"}, {"class_": "Child"}, {"class": Parent}],
}


@pytest.fixture()
def parent() -> Parent:
    return Parent()


@pytest.fixture()
def child() -> Child:
    return Child()


@pytest.fixture()
def tagged_list() -> TaggedList:
    return TaggedList([1, 2, 3])


@pytest.fixture()
def tagged_dict() -> TaggedDict:
    return TaggedDict(key="value")


@pytest.fixture(autouse=True)
def _telemetry_on(monkeypatch):  # noqa: D401
    """Run every test with counters enabled regardless of the caller's env."""
    monkeypatch.delenv("VTYPE_TELEMETRY", raising=False)
    yield


@pytest.fixture()
def recorded_metrics(monkeypatch):
    """Replace the vtype counters with in-memory recorders.

    Returns a dict mapping counter attribute name to the list of attribute
    dicts passed to ``add``.
    """
    import vtype.telemetry.metrics as metrics

    recorded: dict[str, list] = {}

    class _Recorder:  # pylint: disable=too-few-public-methods
        def __init__(self, name: str):
            self._calls = recorded.setdefault(name, [])

        def add(self, amount, attributes=None):  # noqa: D401
            self._calls.append(dict(attributes or {}))

    for name in ("assertion_failure_total", "usage_error_total", "guard_failure_total"):
        monkeypatch.setattr(metrics, name, _Recorder(name))
    return recorded
