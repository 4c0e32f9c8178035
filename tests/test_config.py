from __future__ import annotations

from pathlib import Path

import pytest

from reaction_trainer.config import (
    ATTEMPTS_PER_SESSION,
    GRAPH_PATH_ENV,
    RESULTS_PATH_ENV,
    SEED_ENV,
    TrainerConfig,
)


def test_defaults_use_working_directory(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (RESULTS_PATH_ENV, GRAPH_PATH_ENV, SEED_ENV):
        monkeypatch.delenv(name, raising=False)

    cfg = TrainerConfig.from_env()

    assert cfg.results_path == Path("reaction_results.txt")
    assert cfg.chart_path == Path("reaction_graph.png")
    assert cfg.attempts_per_session == ATTEMPTS_PER_SESSION == 10
    assert cfg.seed >= 1


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(RESULTS_PATH_ENV, str(tmp_path / "r.txt"))
    monkeypatch.setenv(GRAPH_PATH_ENV, str(tmp_path / "g.png"))
    monkeypatch.setenv(SEED_ENV, "1234")

    cfg = TrainerConfig.from_env()

    assert cfg.results_path == tmp_path / "r.txt"
    assert cfg.chart_path == tmp_path / "g.png"
    assert cfg.seed == 1234


def test_bad_seed_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SEED_ENV, "abc")
    with pytest.raises(ValueError):
        TrainerConfig.from_env()
