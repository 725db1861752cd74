"""Tests for the batch conversion script."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import yaml

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import scripts.convert_schedules as batch


def _write(path: Path, data) -> Path:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_read_phrases_accepts_strings_and_mappings(tmp_path: Path):
    source = _write(
        tmp_path / "phrases.yaml",
        ["daily", {"text": "every monday"}, {"title": "no text"}, 42],
    )
    assert batch.read_phrases(source) == ["daily", "every monday"]


def test_read_phrases_requires_a_list(tmp_path: Path):
    source = _write(tmp_path / "phrases.yaml", {"text": "daily"})
    with pytest.raises(ValueError):
        batch.read_phrases(source)


def test_main_writes_results(tmp_path: Path):
    source = _write(tmp_path / "phrases.yaml", ["daily", "every weekday at 9am"])
    target = tmp_path / "out" / "rrules.yaml"
    assert batch.main([str(source), "-o", str(target)]) == 0
    records = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert records == [
        {"text": "daily", "result": {"rrules": ["FREQ=DAILY"]}},
        {
            "text": "every weekday at 9am",
            "result": {"rrules": ["FREQ=WEEKLY;BYDAY=MO,TU,WE,TH,FR;BYHOUR=9;BYMINUTE=0"]},
        },
    ]


def test_main_reports_unsupported(tmp_path: Path, capsys):
    source = _write(tmp_path / "phrases.yaml", ["daily", "purple elephant"])
    assert batch.main([str(source)]) == 1
    records = yaml.safe_load(capsys.readouterr().out)
    assert records[0]["result"] == {"rrules": ["FREQ=DAILY"]}
    assert "unsupported" in records[1]["result"]
