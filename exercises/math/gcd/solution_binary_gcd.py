
"""

Binary GCD (Stein's algorithm):

Finds the greatest common divisor of two unsigned integers using only
comparison, shifts and subtraction. Common factors of 2 are stripped with
trailing-zero shifts and restored at the end; what is left is reduced by
subtracting the smaller odd number from the larger one.

Python ints have no width, so the width is passed explicitly and both
operands must fit in it (0 <= n < 2**bits). Running time is O(bits)
shift/subtract steps.

"""

from functools import partial

SUPPORTED_BITS = (8, 16, 32, 64, 128)
DEFAULT_BITS = 64


def _check_operand(name: str, n: int, bits: int) -> None:
    if bits not in SUPPORTED_BITS:
        raise ValueError(f"unsupported width u{bits}, expected one of {SUPPORTED_BITS}")
    if not 0 <= n < (1 << bits):
        raise ValueError(f"{name}={n} does not fit in u{bits}")


def _trailing_zeros(n: int) -> int:
    # n is non-zero and already range checked
    return (n & -n).bit_length() - 1


def trailing_zeros(n: int, bits: int = DEFAULT_BITS) -> int:
    """
    Count of zero bits below the lowest set bit. Zero has `bits` of them.
    """
    _check_operand("n", n, bits)

    if n == 0:
        return bits

    return _trailing_zeros(n)


def gcd(num1: int, num2: int, bits: int = DEFAULT_BITS) -> int:
    """
    GCD logic, no division or modulo
    """
    _check_operand("num1", num1, bits)
    _check_operand("num2", num2, bits)

    if num1 == 0:
        return num2
    if num2 == 0:
        return num1

    twos_num1 = _trailing_zeros(num1)
    twos_num2 = _trailing_zeros(num2)

    num1 >>= twos_num1
    num2 >>= twos_num2

    shared_twos = min(twos_num1, twos_num2)

    while True:
        if num1 > num2:
            num1, num2 = num2, num1

        num2 -= num1

        if num2 == 0:
            return num1 << shared_twos

        # odd minus odd is even; num1 stays odd
        num2 >>= _trailing_zeros(num2)


gcd_u8 = partial(gcd, bits=8)
gcd_u16 = partial(gcd, bits=16)
gcd_u32 = partial(gcd, bits=32)
gcd_u64 = partial(gcd, bits=64)
gcd_u128 = partial(gcd, bits=128)

WIDTHS = {
    8: gcd_u8,
    16: gcd_u16,
    32: gcd_u32,
    64: gcd_u64,
    128: gcd_u128,
}


class Solution:
    def gcd(self, a: int, b: int) -> int:
        return gcd_u64(a, b)


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
        (2**40, 2**20 * 3, 2**20),
        (2**64 - 1, 2**64 - 1, 2**64 - 1),
        (1, 2**64 - 1, 1),
        (2**61 - 1, 2**31 - 1, 1),
    ]

    for a, b, expected in test_cases:
        result = sol.gcd(a, b)
        assert result == expected, (
            f"FAILED: gcd({a}, {b})\n"
            f"Expected: {expected}\n"
            f"Got: {result}"
        )

    width_cases = [
        (8, 15, 51, 3),
        (8, 255, 255, 255),
        (8, 128, 96, 32),
        (16, 65535, 255, 255),
        (128, 2**127, 2**126, 2**126),
    ]

    for bits, a, b, expected in width_cases:
        result = WIDTHS[bits](a, b)
        assert result == expected, (
            f"FAILED: gcd_u{bits}({a}, {b})\n"
            f"Expected: {expected}\n"
            f"Got: {result}"
        )

    print("✅ All tests passed")


if __name__ == "__main__":
    run_tests()
