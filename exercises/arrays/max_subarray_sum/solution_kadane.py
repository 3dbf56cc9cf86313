
"""

Maximum Subarray Sum (Kadane's algorithm):

Keep a running sum of the current subarray and the best sum seen so far.
Once the running sum has gone negative it can only drag the next element
down, so the current subarray restarts there. If several subarrays share the
maximum, the first one the scan reaches is kept.

Time O(N), extra space O(1).

"""

from typing import List, Optional, Sequence, Tuple

from exercises.errors import InvalidInput


def max_subarray(values: Sequence[int]) -> Tuple[int, int, int]:
    """
    Returns (max_sum, start, end) of the first maximal subarray, end exclusive.
    """
    if len(values) == 0:
        raise InvalidInput("max_subarray_sum", 1, 0)

    best_sum, best_start, best_end = values[0], 0, 1
    current_sum, current_start = values[0], 0

    for i in range(1, len(values)):
        if current_sum < 0:
            current_sum, current_start = values[i], i
        else:
            current_sum += values[i]

        if current_sum > best_sum:
            best_sum, best_start, best_end = current_sum, current_start, i + 1

    return best_sum, best_start, best_end


def max_subarray_sum(values: Sequence[int]) -> int:
    return max_subarray(values)[0]


class Elements:
    """
    Chained form: Elements(nums).find_max_sum().result()
    """

    def __init__(self, values: Sequence[int]):
        if len(values) == 0:
            raise InvalidInput("max_subarray_sum", 1, 0)

        self.values = values
        self.max_sum: Optional[int] = None
        self.bounds: Optional[Tuple[int, int]] = None

    def find_max_sum(self) -> "Elements":
        self.max_sum, start, end = max_subarray(self.values)
        self.bounds = (start, end)
        return self

    def result(self) -> int:
        if self.max_sum is None:
            raise RuntimeError("result() called before find_max_sum()")
        return self.max_sum


class Solution:
    def maxSubArray(self, nums: List[int]) -> int:
        return max_subarray_sum(nums)


# ------------------ Tests (fail fast, clean log) ------------------
def run_tests():
    sol = Solution()

    test_cases = [
        ([-2, -3, 4, -1, -2, 1, 5, -3], 7),
        ([-2, 1, -3, 4, -1, 2, 1, -5, 4], 6),
        ([1], 1),
        ([-1], -1),
        ([-3, -1, -2], -1),
        ([5, 4, -1, 7, 8], 23),
        ([0, 0, 0], 0),
        ([2, -2, 2], 2),
    ]

    for nums, expected in test_cases:
        result = sol.maxSubArray(nums)
        assert result == expected, (
            "FAILED TEST CASE\n"
            f"maxSubArray({nums})\n"
            f"Expected: {expected}\n"
            f"Got: {result}"
        )

    range_cases = [
        ([-2, -3, 4, -1, -2, 1, 5, -3], (7, 2, 7)),
        ([2, -2, 2], (2, 0, 1)),
        ([-3, -1, -2], (-1, 1, 2)),
        ([0, 3, -5, 3], (3, 0, 2)),
    ]

    for nums, expected in range_cases:
        result = max_subarray(nums)
        assert result == expected, (
            "FAILED TEST CASE\n"
            f"max_subarray({nums})\n"
            f"Expected: {expected}\n"
            f"Got: {result}"
        )

    try:
        sol.maxSubArray([])
    except InvalidInput:
        pass
    else:
        raise AssertionError("FAILED: maxSubArray([]) did not raise InvalidInput")

    print("✅ All tests passed")


if __name__ == "__main__":
    run_tests()
