"""
Digit-count estimators: how many binary digits a positive integer needs.

Two forms are provided. ``fast_bin_digits`` scans for the most significant set
bit and is what the sorter uses. ``calculate_bin_digits`` uses the change of
base formula for logs and only exists to cross-check the bit scan.
"""

from __future__ import annotations

import math
from typing import Optional

from .errors import NonPositiveEstimatorInputError, WidthOverflowError

DEFAULT_WIDTH = 32

# 1 / ln(2), truncated; log[2](c) = ln(c) / ln(2)
INV_LN2 = 1.44269504089


def top_bit(width: int = DEFAULT_WIDTH) -> int:
    """Highest magnitude bit of a signed ``width``-bit integer (one bit is the sign)."""
    if width < 2:
        raise ValueError(f"Integer width must be at least 2 bits, got {width}")
    return width - 2


def max_value(width: int = DEFAULT_WIDTH) -> int:
    return (1 << (top_bit(width) + 1)) - 1


def calculate_bin_digits(num: int) -> int:
    if num <= 0:
        raise NonPositiveEstimatorInputError(num)
    return int(math.log(num) * INV_LN2) + 1


def fast_bin_digits(num: int, width: int = DEFAULT_WIDTH) -> int:
    """
    Return the position of the most significant set bit of ``num``, plus one.

    The mask starts at bit ``width - 2`` (bit 30 for 32-bit integers) and walks
    down to bit 0.
    """
    if num <= 0:
        raise NonPositiveEstimatorInputError(num)
    if num > max_value(width):
        raise WidthOverflowError(num, width)

    for pos in range(top_bit(width), -1, -1):
        mask = 1 << pos
        if num & mask == mask:
            return pos + 1

    # Unreachable for num >= 1
    raise AssertionError(f"no set bit found in {num}")


def find_estimator_mismatch(limit: int = 1 << 29, width: int = DEFAULT_WIDTH) -> Optional[int]:
    """
    Return the first power of two below ``limit`` where both estimators disagree.

    ``limit`` is capped at the first value that no longer fits in ``width`` bits.
    """
    limit = min(limit, max_value(width) + 1)
    num = 2
    while num < limit:
        if calculate_bin_digits(num) != fast_bin_digits(num, width):
            return num
        num *= 2
    return None
