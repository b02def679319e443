# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from decimal import Decimal
from fractions import Fraction

import pytest

from vtype import filter_number, is_number, is_string
from vtype.exceptions import UsageError
from vtype.numeric import normalize, numeric_value


@pytest.mark.parametrize(
    "value",
    [
        0,
        -3,
        3.14,
        2**128,
        -(2**128),
        Decimal("10.5"),
        Fraction(1, 3),
        float("inf"),
        float("nan"),
        "42",
        "-42",
        "+4.2",
        ".5",
        "5.",
        "1e10",
        "1E-3",
        "  7  ",
        "Inf",
        "-infinity",
        "NaN",
        "123456789012345678901234567890",
    ],
)
def test_numbers(value):
    assert is_number(value) is True


@pytest.mark.parametrize(
    "value",
    [
        None,
        True,
        False,
        "",
        " ",
        "abc",
        "42abc",
        "1e",
        "0x1A",
        "1_000",
        "--1",
        "\u0664\u0662",
        "\uff14\uff12",
        "\u00a042\u00a0",
        b"42",
        bytearray(b"42"),
        [],
        {},
        [1],
        len,
        object(),
    ],
)
def test_non_numbers(value):
    assert is_number(value) is False


def test_numeric_strings_count_as_numbers():
    assert is_number("42") is True


def test_positive_accepts_zero_but_not_negatives():
    assert is_number(0, positive=True) is True
    assert is_number(5, positive=True) is True
    assert is_number(-3, positive=True) is False
    assert is_number("-0.001", positive=True) is False
    assert is_number("0", positive=True) is True


def test_strictly_positive_rejects_zero_and_negatives():
    assert is_number(0, strictly_positive=True) is False
    assert is_number(0.0, strictly_positive=True) is False
    assert is_number("0", strictly_positive=True) is False
    assert is_number(-1, strictly_positive=True) is False
    assert is_number(1, strictly_positive=True) is True
    assert is_number("1e-400", strictly_positive=True) is True


def test_sign_checks_keep_wide_integer_text_exact():
    assert is_number("-" + "9" * 40, positive=True) is False
    assert is_number("9" * 40, strictly_positive=True) is True


def test_nan_is_not_rejected_by_sign_checks():
    assert is_number(float("nan"), strictly_positive=True) is True
    assert is_number("nan", positive=True) is True
    assert is_number(Decimal("NaN"), strictly_positive=True) is True


def test_str_subclass_is_normalized_before_the_check():
    class Weird(str):
        def strip(self, *_a):  # pragma: no cover - must never be used
            raise AssertionError("normalization should bypass overridden methods")

    assert is_number(Weird("12")) is True
    assert type(normalize(Weird("12"))) is str


def test_non_ascii_digits_are_rejected_by_sign_checks_too():
    assert is_number("\u0664\u0662", positive=True) is False
    assert is_number("\uff14\uff12", strictly_positive=True) is False


def test_bytes_agree_with_is_string():
    assert is_number(b"12") is False
    assert is_string(b"12") is False
    assert filter_number(b"12") is None
    assert normalize(b"12") == b"12"


def test_numeric_value_has_no_sign_for_nan():
    assert numeric_value("nan") is None
    assert numeric_value(" 2 ") == Decimal("2")
    assert numeric_value(3) == 3


def test_unknown_option_is_a_usage_error():
    with pytest.raises(UsageError):
        is_number(1, negative=True)
