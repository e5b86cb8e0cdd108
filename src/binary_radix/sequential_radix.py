"""
LSB-first binary radix sort.

Every pass partitions the working list into two buckets keyed by one bit,
then copies bucket 0 followed by bucket 1 back over the list. Passes run from
bit 0 up to the bit length of the largest value.
"""

from __future__ import annotations

import logging
from typing import List, MutableSequence, Sequence

from .digits import DEFAULT_WIDTH, fast_bin_digits, max_value
from .errors import EmptyInputError, NegativeValueSortError, WidthOverflowError

logger = logging.getLogger(__name__)


class BinaryRadixSorter:
    """
    Sort a mutable sequence of non-negative integers in place.

    arr: the sequence to sort; it is bound, not copied
    width: bit width of the signed integer type the values come from
    prescan: find the true maximum before pass 0. When False the first element
             seeds the maximum and pass 0 extends the digit count whenever it
             meets a larger value.
    """

    def __init__(self, arr: MutableSequence[int], width: int = DEFAULT_WIDTH, prescan: bool = True) -> None:
        self.arr = arr
        self.width = width
        self.prescan = prescan
        self.digits = 0
        self.passes = 0

    def digits_of(self, value: int) -> int:
        return fast_bin_digits(value, self.width)

    def _digit_count(self, largest: int) -> int:
        # A maximum of 0 means every value is 0: nothing to sort
        return self.digits_of(largest) if largest > 0 else 0

    def _validate(self) -> int:
        """Reject values the bit selectors cannot order; return the largest value."""
        limit = max_value(self.width)
        largest = self.arr[0]
        for idx, v in enumerate(self.arr):
            if v < 0:
                raise NegativeValueSortError(idx, v)
            if v > limit:
                raise WidthOverflowError(v, self.width)
            if v > largest:
                largest = v
        return largest

    def sort(self) -> None:
        A = self.arr
        n = len(A)
        if n == 0:
            raise EmptyInputError()

        true_largest = self._validate()
        if self.prescan:
            largest = true_largest
            digits = self._digit_count(largest)
        else:
            largest = A[0]
            # Pass 0 has to run, it is where the real maximum gets discovered
            digits = max(1, self._digit_count(largest))
        logger.debug("n = %d, starting with %d digit(s)", n, digits)

        # Two buckets of capacity n in one flat list: bucket b starts at b * n
        buckets = [0] * (2 * n)
        counter = [0, 0]

        i = 0
        while i < digits:
            for j in range(n):
                number = A[j]
                key = (number >> i) & 1
                buckets[key * n + counter[key]] = number
                counter[key] += 1

                if i == 0 and number > largest:
                    largest = number
                    extended = self._digit_count(number)
                    if extended > digits:
                        logger.debug("found %d on pass 0, extending to %d digit(s)", number, extended)
                        digits = extended

            # Bucket 0 then bucket 1, each in the order it was filled
            for k in range(counter[0]):
                A[k] = buckets[k]
            for k in range(counter[1]):
                A[counter[0] + k] = buckets[n + k]

            counter[0] = 0
            counter[1] = 0
            i += 1

        self.digits = digits
        self.passes = i

    def is_sorted(self) -> bool:
        return is_sorted(self.arr)


def is_sorted(A: Sequence[int]) -> bool:
    """True when every adjacent pair satisfies previous <= current."""
    if not A:
        return True
    previous = A[0]
    for i in range(1, len(A)):
        if previous > A[i]:
            return False
        previous = A[i]
    return True


def radix_sort(A: List[int], width: int = DEFAULT_WIDTH) -> List[int]:
    """Sort ``A`` in place and return it."""
    BinaryRadixSorter(A, width=width).sort()
    return A
