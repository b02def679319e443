# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Argument Checks Demo: three calling conventions and the type guard.

This demo walks through the boolean, assertion and filter forms of the vtype
checks, then shows @type_guard rejecting bad arguments and bad configuration.

Run with:
    python examples/argument_checks_demo.py
"""

from vtype import (
    assert_arrayref,
    filter_number,
    is_number,
    is_string,
    type_guard,
)
from vtype.exceptions import UsageError, ValidationFailure


def demo_conventions():
    """Show the same check in its three forms."""
    print("\n" + "=" * 70)
    print("DEMO 1: Boolean, assertion and filter forms")
    print("=" * 70)

    print(f"\n  is_string(0)                       -> {is_string(0)}")
    print(f"  is_string('', allow_empty=False)   -> {is_string('', allow_empty=False)}")
    print(f"  is_number('42')                    -> {is_number('42')}")
    print(f"  filter_number('-3', positive=True) -> {filter_number('-3', positive=True)}")

    try:
        assert_arrayref([], allow_empty=False)
        print("  Result: FAIL - empty list accepted")
    except ValidationFailure as e:
        print(f"  assert_arrayref([], allow_empty=False) raised: {e}")


def demo_usage_errors():
    """Show how a misspelled option is caught instead of ignored."""
    print("\n" + "=" * 70)
    print("DEMO 2: Unrecognized options")
    print("=" * 70)
    print("\nCalling is_string() with a typo: 'allow_emtpy'")

    try:
        is_string("", allow_emtpy=False)
        print("  Result: FAIL - typo silently ignored")
    except UsageError as e:
        print("  Result: SUCCESS - call rejected")
        print(f"    {e}")


@type_guard(
    table="string",
    row_limit=("number", {"strictly_positive": True}),
    columns=("arrayref", {"allow_empty": False}),
)
def run_report(table, row_limit, columns):
    return f"SELECT {', '.join(columns)} FROM {table} LIMIT {row_limit}"


def demo_type_guard():
    """Show @type_guard collecting every failing argument."""
    print("\n" + "=" * 70)
    print("DEMO 3: @type_guard")
    print("=" * 70)

    print(f"\n  Valid call: {run_report('users', 10, ['id', 'email'])}")

    try:
        run_report(None, 0, [])
    except ValidationFailure as e:
        print(f"\n  Invalid call rejected ({', '.join(e.arguments)}):")
        print(f"    {e}")


if __name__ == "__main__":
    demo_conventions()
    demo_usage_errors()
    demo_type_guard()
