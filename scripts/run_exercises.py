import os
import random
import sys
from datetime import datetime, timezone

from exercises.arrays.closest_sum_pair import solution_two_pointer
from exercises.arrays.max_subarray_sum import solution_kadane
from exercises.math.gcd import solution_binary_gcd, solution_euclidean_algo

# ---------------- CONFIG ----------------
SOLUTION_MODULES = [
    solution_binary_gcd,
    solution_euclidean_algo,
    solution_two_pointer,
    solution_kadane,
]
FUZZ_ITERATIONS = int(os.getenv("FUZZ_ITERATIONS", "2000"))
FUZZ_SEED = int(os.getenv("FUZZ_SEED", "0"))
GCD_BITS = int(os.getenv("GCD_BITS", "32"))
MAX_LIST_LEN = 12
MAX_ABS_VALUE = 50

# ---------------- HELPERS ----------------
def log(msg):
    print(f"[{datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S')}] {msg}")

def random_list(rng, min_len):
    return [rng.randint(-MAX_ABS_VALUE, MAX_ABS_VALUE) for _ in range(rng.randint(min_len, MAX_LIST_LEN))]

def brute_force_closest_distance(values, target):
    return min(
        abs(target - (values[i] + values[j]))
        for i in range(len(values))
        for j in range(i + 1, len(values))
    )

def brute_force_max_sum(values):
    return max(
        sum(values[i:j])
        for i in range(len(values))
        for j in range(i + 1, len(values) + 1)
    )

# ---------------- CROSS-CHECKS ----------------
def check_gcd(rng, iterations, bits):
    binary_gcd = solution_binary_gcd.WIDTHS[bits]
    reference = solution_euclidean_algo.Solution()
    top = (1 << bits) - 1
    for _ in range(iterations):
        # bias towards shared powers of two
        shift = rng.randint(0, bits - 1)
        a = (rng.randint(0, top) >> shift) << shift
        b = (rng.randint(0, top) >> shift) << shift
        got, expected = binary_gcd(a, b), reference.gcd(a, b)
        if got != expected:
            raise RuntimeError(f"gcd_u{bits}({a}, {b}) = {got}, expected {expected}")
    log(f"gcd_u{bits}: {iterations} cases agree with the euclidean reference")

def check_closest_sum_pair(rng, iterations):
    for _ in range(iterations):
        values = random_list(rng, 2)
        target = rng.randint(-3 * MAX_ABS_VALUE, 3 * MAX_ABS_VALUE)
        a, b = solution_two_pointer.closest_sum_pair(list(values), target)
        expected = brute_force_closest_distance(values, target)
        if abs(target - (a + b)) != expected:
            raise RuntimeError(f"closest_sum_pair({values}, {target}) = {(a, b)}, off by more than {expected}")
    log(f"closest_sum_pair: {iterations} cases agree with brute force")

def check_max_subarray_sum(rng, iterations):
    for _ in range(iterations):
        values = random_list(rng, 1)
        got, expected = solution_kadane.max_subarray_sum(values), brute_force_max_sum(values)
        if got != expected:
            raise RuntimeError(f"max_subarray_sum({values}) = {got}, expected {expected}")
    log(f"max_subarray_sum: {iterations} cases agree with brute force")

# ---------------- MAIN ----------------
def main():
    for module in SOLUTION_MODULES:
        log(f"Running {module.__name__}")
        module.run_tests()

    rng = random.Random(FUZZ_SEED)
    log(f"Fuzzing with seed={FUZZ_SEED}, iterations={FUZZ_ITERATIONS}")
    check_gcd(rng, FUZZ_ITERATIONS, GCD_BITS)
    check_closest_sum_pair(rng, FUZZ_ITERATIONS)
    check_max_subarray_sum(rng, FUZZ_ITERATIONS)
    log("All exercises passed")
    return 0

if __name__ == "__main__":
    sys.exit(main())
