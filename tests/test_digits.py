import math
import random

import pytest

from binary_radix.digits import (
    calculate_bin_digits,
    fast_bin_digits,
    find_estimator_mismatch,
    max_value,
    top_bit,
)
from binary_radix.errors import NonPositiveEstimatorInputError, RadixSortError, WidthOverflowError


@pytest.mark.parametrize(
    "num, expected",
    [(1, 1), (2, 2), (3, 2), (4, 3), (7, 3), (8, 4), (255, 8), (256, 9), (1073741824, 31)],
)
def test_known_digit_counts(num, expected):
    assert fast_bin_digits(num) == expected
    assert calculate_bin_digits(num) == expected


def test_estimators_agree_on_powers_of_two():
    for k in range(31):
        num = 1 << k
        assert fast_bin_digits(num) == calculate_bin_digits(num) == k + 1


def test_estimators_agree_around_powers_of_two():
    for k in range(1, 31):
        for num in ((1 << k) - 1, (1 << k) + 1):
            if num > 1 << 30:
                continue
            assert fast_bin_digits(num) == calculate_bin_digits(num) == math.floor(math.log2(num)) + 1


def test_estimators_agree_on_small_and_sampled_values():
    rng = random.Random(7)
    values = list(range(1, 5000)) + [rng.randint(1, 1 << 30) for _ in range(2000)]
    for num in values:
        assert fast_bin_digits(num) == calculate_bin_digits(num) == num.bit_length()


def test_find_estimator_mismatch_reports_none():
    assert find_estimator_mismatch() is None
    assert find_estimator_mismatch(1 << 31) is None


@pytest.mark.parametrize("num", [0, -1, -1073741824])
def test_non_positive_input_rejected(num):
    with pytest.raises(NonPositiveEstimatorInputError):
        fast_bin_digits(num)
    with pytest.raises(NonPositiveEstimatorInputError):
        calculate_bin_digits(num)


def test_errors_share_a_base_class():
    with pytest.raises(RadixSortError):
        fast_bin_digits(0)
    with pytest.raises(ValueError):
        calculate_bin_digits(0)


def test_width_bounds():
    assert top_bit() == 30
    assert max_value() == 2**31 - 1
    assert fast_bin_digits(2**31 - 1) == 31
    with pytest.raises(WidthOverflowError):
        fast_bin_digits(2**31)
    with pytest.raises(OverflowError):
        fast_bin_digits(2**31, width=32)


def test_wider_integer_types():
    assert top_bit(64) == 62
    assert fast_bin_digits(2**31, width=64) == 32
    assert fast_bin_digits(2**63 - 1, width=64) == 63
    assert fast_bin_digits(127, width=8) == 7
    with pytest.raises(WidthOverflowError):
        fast_bin_digits(128, width=8)


def test_width_too_small():
    with pytest.raises(ValueError):
        top_bit(1)


def test_find_estimator_mismatch_stops_at_width():
    assert find_estimator_mismatch(1 << 20, width=8) is None
    assert find_estimator_mismatch(1 << 40, width=32) is None
