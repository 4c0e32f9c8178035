from __future__ import annotations

import os
import random
from dataclasses import dataclass
from pathlib import Path

RESULTS_PATH_ENV = "REACTION_RESULTS_PATH"
GRAPH_PATH_ENV = "REACTION_GRAPH_PATH"
SEED_ENV = "REACTION_SEED"

DEFAULT_RESULTS_FILE = "reaction_results.txt"
DEFAULT_GRAPH_FILE = "reaction_graph.png"

ATTEMPTS_PER_SESSION = 10


@dataclass(frozen=True, slots=True)
class TrainerConfig:
    results_path: Path
    chart_path: Path
    seed: int
    attempts_per_session: int = ATTEMPTS_PER_SESSION

    @classmethod
    def from_env(cls) -> "TrainerConfig":
        """Defaults live in the working directory; env vars override them."""

        return cls(
            results_path=_path_from_env(RESULTS_PATH_ENV, DEFAULT_RESULTS_FILE),
            chart_path=_path_from_env(GRAPH_PATH_ENV, DEFAULT_GRAPH_FILE),
            seed=_seed_from_env(),
        )


def _path_from_env(name: str, default: str) -> Path:
    explicit = os.environ.get(name, "").strip()
    if explicit:
        return Path(explicit).expanduser()
    return Path(default)


def _seed_from_env() -> int:
    raw = os.environ.get(SEED_ENV, "").strip()
    if raw:
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{SEED_ENV} must be an integer, got {raw!r}") from None
    return random.SystemRandom().randint(1, 2**31 - 1)
