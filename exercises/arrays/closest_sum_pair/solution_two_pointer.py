
"""

Closest Sum Pair (two pointers):

Find the pair of values whose sum is closest to a target. When several pairs
are equally close, the one with the most distance between its elements in
sorted order wins.

The list is sorted in place, then scanned from both ends: a sum below the
target moves the left pointer up, a sum above it moves the right pointer
down. The best pair is only replaced on a strictly smaller distance, so the
first (widest) pair reaching the minimum is the one kept.

Time O(N log N), extra space O(1).

"""

from typing import List, Optional, Tuple

from exercises.errors import InvalidInput


class Elements:
    """
    Chained form of the search:

        Elements(nums, target).sort_list().find_init_distance().find_pair().result()

    `values` is held by reference, so `sort_list` sorts the caller's list.
    """

    def __init__(self, values: List[int], target: int):
        if len(values) < 2:
            raise InvalidInput("closest_sum_pair", 2, len(values))

        self.values = values
        self.target = target
        self.pair: Optional[Tuple[int, int]] = None
        self.init_distance: Optional[int] = None

    def sort_list(self) -> "Elements":
        self.values.sort()
        return self

    def find_init_distance(self) -> "Elements":
        """
        Upper bound on the distance of any pair sum from the target.

        Every pair sum lies between the two smallest and the two largest
        elements, so the bound is the distance from the target to whichever
        of those two sums is farther away.
        """
        values = self.values
        target = self.target

        lowest_sum = values[0] + values[1]
        highest_sum = values[-1] + values[-2]

        # midpoint <= target, without truncating the halved sum
        if lowest_sum + highest_sum <= 2 * target:
            self.init_distance = target - lowest_sum
        else:
            self.init_distance = highest_sum - target

        return self

    def find_pair(self) -> "Elements":
        if self.init_distance is None:
            self.find_init_distance()

        values = self.values
        target = self.target
        distance = self.init_distance

        left, right = 0, len(values) - 1

        for _ in range(len(values) - 1):
            temp_sum = values[left] + values[right]
            temp_distance = target - temp_sum

            # the bound is inclusive, so the first pair is always taken
            if self.pair is None or abs(temp_distance) < abs(distance):
                distance = temp_distance
                self.pair = (values[left], values[right])

            if temp_distance > 0:
                left += 1
            elif temp_distance < 0:
                right -= 1
            else:
                break

        return self

    def result(self) -> Tuple[int, int]:
        if self.pair is None:
            raise RuntimeError("result() called before find_pair()")
        return self.pair


def closest_sum_pair(values: List[int], target: int) -> Tuple[int, int]:
    return (
        Elements(values, target)
        .sort_list()
        .find_init_distance()
        .find_pair()
        .result()
    )


class Solution:
    def closestSumPair(self, nums: List[int], target: int) -> Tuple[int, int]:
        return closest_sum_pair(nums, target)


# ------------------ Tests (fail fast) ------------------
def run_tests():
    sol = Solution()

    test_cases = [
        ([-2, -4, -7, -2, -5, -13, -7], -1, (-2, -2)),
        ([3, 5, 7], 9, (3, 7)),
        ([1, 2], 0, (1, 2)),
        ([1, 4, 5, 8], 9, (1, 8)),
        ([10, 22, 28, 29, 30, 40], 54, (22, 30)),
        ([1, 3, 4, 7, 10], 15, (4, 10)),
        ([-1, 2, 1, -4], 1, (-1, 2)),
        ([0, 0], 100, (0, 0)),
    ]

    for nums, target, expected in test_cases:
        result = sol.closestSumPair(list(nums), target)
        assert result == expected, (
            "FAILED TEST CASE\n"
            f"closestSumPair({nums}, {target})\n"
            f"Expected: {expected}\n"
            f"Got: {result}"
        )

    for nums in ([], [7]):
        try:
            sol.closestSumPair(nums, 0)
        except InvalidInput:
            continue
        raise AssertionError(f"FAILED: closestSumPair({nums}, 0) did not raise InvalidInput")

    print("✅ All tests passed")


if __name__ == "__main__":
    run_tests()
