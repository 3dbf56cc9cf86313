"""Tests for exercises/arrays/closest_sum_pair/solution_two_pointer.py."""

from __future__ import annotations

import pytest

from exercises.arrays.closest_sum_pair import solution_two_pointer
from exercises.arrays.closest_sum_pair.solution_two_pointer import Elements, closest_sum_pair
from exercises.errors import InvalidInput


def test_known_case() -> None:
    assert closest_sum_pair([-2, -4, -7, -2, -5, -13, -7], -1) == (-2, -2)


def test_sorts_callers_list_in_place() -> None:
    values = [5, -1, 3, 0]
    closest_sum_pair(values, 4)
    assert values == [-1, 0, 3, 5]


def test_exact_match_stops_early() -> None:
    assert closest_sum_pair([1, 4, 5, 8], 9) == (1, 8)


def test_tie_keeps_widest_pair() -> None:
    # 3 + 7 = 10 and 3 + 5 = 8 are both 1 away from 9
    assert closest_sum_pair([3, 5, 7], 9) == (3, 7)


def test_first_pair_is_always_recorded() -> None:
    # the seeded bound equals the only pair's distance here
    assert closest_sum_pair([1, 2], 0) == (1, 2)


def test_target_far_below_all_sums() -> None:
    assert closest_sum_pair([10, 20, 30], -1000) == (10, 20)


def test_target_far_above_all_sums() -> None:
    assert closest_sum_pair([10, 20, 30], 1000) == (20, 30)


def test_chained_form_matches_function() -> None:
    values = [10, 22, 28, 29, 30, 40]
    elements = Elements(values, 54)
    pair = elements.sort_list().find_init_distance().find_pair().result()
    assert pair == (22, 30)
    assert elements.init_distance is not None


def test_init_distance_bounds_every_pair() -> None:
    values = [-9, -3, 0, 4, 11]
    elements = Elements(values, 2).sort_list().find_init_distance()
    for i in range(len(values)):
        for j in range(i + 1, len(values)):
            assert abs(2 - (values[i] + values[j])) <= elements.init_distance


def test_result_before_find_pair_raises() -> None:
    with pytest.raises(RuntimeError):
        Elements([1, 2, 3], 4).result()


@pytest.mark.parametrize("values", [[], [7]])
def test_too_short_input_raises(values: list[int]) -> None:
    with pytest.raises(InvalidInput) as excinfo:
        closest_sum_pair(values, 0)
    assert excinfo.value.required == 2
    assert excinfo.value.got == len(values)
    assert isinstance(excinfo.value, ValueError)


def test_inline_harness(capsys) -> None:
    solution_two_pointer.run_tests()
    assert "All tests passed" in capsys.readouterr().out
