"""Tests for scripts/run_exercises.py."""

from __future__ import annotations

import importlib.util
import random
import re
import sys
from pathlib import Path
from typing import Any

import pytest


def _import_runner() -> Any:
    root = Path(__file__).resolve().parents[1]
    path = root / "scripts" / "run_exercises.py"
    spec = importlib.util.spec_from_file_location("scripts.run_exercises", path)
    assert spec and spec.loader, f"could not load spec from {path}"
    module = importlib.util.module_from_spec(spec)
    sys.modules["scripts.run_exercises"] = module
    spec.loader.exec_module(module)
    return module


runner = _import_runner()


def test_log_is_timestamped(capsys) -> None:
    runner.log("hello")
    out = capsys.readouterr().out
    assert re.match(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] hello$", out.strip())


def test_brute_force_helpers() -> None:
    assert runner.brute_force_closest_distance([1, 4, 5, 8], 10) == 1
    assert runner.brute_force_max_sum([-2, -3, 4, -1, -2, 1, 5, -3]) == 7


def test_random_list_respects_bounds() -> None:
    rng = random.Random(3)
    for _ in range(50):
        values = runner.random_list(rng, 2)
        assert 2 <= len(values) <= runner.MAX_LIST_LEN
        assert all(abs(v) <= runner.MAX_ABS_VALUE for v in values)


@pytest.mark.parametrize("bits", [8, 16, 32, 64, 128])
def test_check_gcd_agrees(bits: int, capsys) -> None:
    runner.check_gcd(random.Random(bits), 200, bits)
    assert f"gcd_u{bits}: 200 cases agree" in capsys.readouterr().out


def test_check_closest_sum_pair_agrees(capsys) -> None:
    runner.check_closest_sum_pair(random.Random(1), 300)
    assert "closest_sum_pair: 300 cases agree" in capsys.readouterr().out


def test_check_max_subarray_sum_agrees(capsys) -> None:
    runner.check_max_subarray_sum(random.Random(2), 300)
    assert "max_subarray_sum: 300 cases agree" in capsys.readouterr().out


def test_check_gcd_reports_mismatch(monkeypatch) -> None:
    monkeypatch.setitem(runner.solution_binary_gcd.WIDTHS, 8, lambda a, b: -1)
    with pytest.raises(RuntimeError, match="gcd_u8"):
        runner.check_gcd(random.Random(0), 50, 8)


def test_main_runs_everything(monkeypatch, capsys) -> None:
    monkeypatch.setattr(runner, "FUZZ_ITERATIONS", 50)
    assert runner.main() == 0
    out = capsys.readouterr().out
    assert out.count("✅ All tests passed") == len(runner.SOLUTION_MODULES)
    assert "All exercises passed" in out
