from .digits import DEFAULT_WIDTH, calculate_bin_digits, fast_bin_digits, find_estimator_mismatch
from .errors import (
    BenchmarkValidationError,
    EmptyInputError,
    NegativeValueSortError,
    NonPositiveEstimatorInputError,
    RadixSortError,
    WidthOverflowError,
)
from .sequential_radix import BinaryRadixSorter, is_sorted, radix_sort

__all__ = [
    "DEFAULT_WIDTH",
    "BinaryRadixSorter",
    "radix_sort",
    "is_sorted",
    "calculate_bin_digits",
    "fast_bin_digits",
    "find_estimator_mismatch",
    "RadixSortError",
    "EmptyInputError",
    "NonPositiveEstimatorInputError",
    "NegativeValueSortError",
    "WidthOverflowError",
    "BenchmarkValidationError",
]
