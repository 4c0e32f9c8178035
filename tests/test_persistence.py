from __future__ import annotations

from pathlib import Path

import pytest

from reaction_trainer.persistence import (
    PersistenceError,
    append_results,
    format_session,
    read_results,
)


def test_format_session_layout() -> None:
    text = format_session(3, [0.5, 1.23456])
    assert text == "\nTest: Level 3\nPress 1: 0.500 sec\nPress 2: 1.235 sec\n"


def test_append_creates_then_appends(tmp_path: Path) -> None:
    path = tmp_path / "reaction_results.txt"

    append_results(path, 1, [0.1] * 10)
    append_results(path, 4, [0.2, 0.3])

    sessions = read_results(path)
    assert [s.level for s in sessions] == [1, 4]
    assert len(sessions[0].reaction_times) == 10
    assert sessions[1].reaction_times == (0.2, 0.3)


def test_read_back_recovers_count_and_level(tmp_path: Path) -> None:
    path = tmp_path / "log.txt"
    times = [0.412, 0.389, 0.501, 0.277, 0.6, 0.45, 0.333, 0.298, 0.512, 0.4]

    append_results(path, 5, times)

    (session,) = read_results(path)
    assert session.level == 5
    assert len(session.reaction_times) == len(times)
    assert list(session.reaction_times) == pytest.approx(times, abs=5e-4)


def test_read_missing_file_is_empty(tmp_path: Path) -> None:
    assert read_results(tmp_path / "absent.txt") == []


def test_read_skips_unrelated_lines(tmp_path: Path) -> None:
    path = tmp_path / "log.txt"
    path.write_text("notes\nPress 1: 0.100 sec\n\nTest: Level 2\nPress 1: 0.250 sec\ngarbage\n", encoding="utf-8")

    (session,) = read_results(path)
    assert session.level == 2
    assert session.reaction_times == (0.25,)


def test_unwritable_path_raises_persistence_error(tmp_path: Path) -> None:
    path = tmp_path / "missing_dir" / "log.txt"
    with pytest.raises(PersistenceError):
        append_results(path, 1, [0.1])
