"""Exceptions raised by the binary radix sort and its benchmark driver."""

from __future__ import annotations


class RadixSortError(ValueError):
    """Base class for every precondition violation in this package."""


class EmptyInputError(RadixSortError):
    def __init__(self) -> None:
        super().__init__("Cannot sort an empty sequence")


class NonPositiveEstimatorInputError(RadixSortError):
    def __init__(self, num: int) -> None:
        super().__init__(f"Digit count is only defined for positive integers, got {num}")
        self.num = num


class NegativeValueSortError(RadixSortError):
    """A negative value was found; bit selectors are only meaningful for values >= 0."""

    def __init__(self, index: int, value: int) -> None:
        super().__init__(f"Negative value {value} at index {index} cannot be radix sorted")
        self.index = index
        self.value = value


class WidthOverflowError(RadixSortError, OverflowError):
    def __init__(self, value: int, width: int) -> None:
        super().__init__(f"{value} does not fit in a signed {width}-bit integer")
        self.value = value
        self.width = width


class BenchmarkValidationError(RadixSortError):
    """A benchmark iteration produced output that is not sorted."""

    def __init__(self, size: int, iteration: int) -> None:
        super().__init__(f"Sorter broke on iteration {iteration} (n = {size:,})")
        self.size = size
        self.iteration = iteration
