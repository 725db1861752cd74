"""Tests for :mod:`utils.text`."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from utils.text import normalize_input


def test_lowercases_and_trims():
    assert normalize_input("  Every MONDAY at 9AM  ") == "every monday at 9am"


def test_collapses_whitespace_and_separators():
    assert normalize_input("every\tmonday\n\n  and   friday") == "every monday and friday"
    assert normalize_input("monday,,, tuesday;; wednesday ,;, thursday") == (
        "monday, tuesday, wednesday , thursday"
    )


def test_empty_values():
    assert normalize_input("") == ""
    assert normalize_input("   \t ") == ""
    assert normalize_input(None) == ""


@pytest.mark.parametrize(
    "value",
    [
        "Every Monday",
        "  ,,, ;; every   day ,, at 9AM ;",
        " daily at noon ",
        "ÉVERY İSTANBUL ß",
        ", " * 50 + "weekly",
    ],
)
def test_normalization_is_idempotent(value):
    once = normalize_input(value)
    assert normalize_input(once) == once
