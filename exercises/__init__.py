from exercises.arrays.closest_sum_pair.solution_two_pointer import closest_sum_pair
from exercises.arrays.max_subarray_sum.solution_kadane import max_subarray, max_subarray_sum
from exercises.errors import InvalidInput
from exercises.math.gcd.solution_binary_gcd import gcd

__all__ = [
    "InvalidInput",
    "closest_sum_pair",
    "gcd",
    "max_subarray",
    "max_subarray_sum",
]
