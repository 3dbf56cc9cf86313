
"""

Euclidean Algorithm:

The GCD of two numbers does not change when the larger one is replaced by its
remainder modulo the smaller one. Repeating that until one side hits zero
leaves the GCD on the other side.

Kept next to the binary version as the modulo-based oracle it is checked
against.

"""

class Solution:
    def gcd(self, a: int, b: int) -> int:
        """
        GCD logic, with modulo
        """
        if a < 0 or b < 0:
            raise ValueError(f"gcd is defined here for unsigned operands only: ({a}, {b})")

        while b:
            a, b = b, a % b

        return a


# ------------------ Basic Tests ------------------
def run_tests():
    sol = Solution()

    test_cases = [
        (0, 0, 0),
        (0, 5, 5),
        (5, 0, 5),
        (1, 1, 1),
        (15, 51, 3),
        (12, 18, 6),
        (18, 12, 6),
        (17, 13, 1),
        (100, 10, 10),
        (270, 192, 6),
    ]

    for a, b, expected in test_cases:
        result = sol.gcd(a, b)
        assert result == expected, (
            f"FAILED: gcd({a}, {b})\n"
            f"Expected: {expected}\n"
            f"Got: {result}"
        )

    print("✅ All tests passed")


if __name__ == "__main__":
    run_tests()
