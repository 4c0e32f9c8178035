from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Phase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


class SubmitOutcome(str, Enum):
    IGNORED = "ignored"  # no session running
    MISMATCH = "mismatch"
    ACCEPTED = "accepted"
    COMPLETED = "completed"


class ReactionTrainerError(Exception):
    """Base class for errors the UI shell treats as fatal."""


@dataclass(slots=True)
class Session:
    level: int
    running: bool = False
    attempts_completed: int = 0
    reaction_times: list[float] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class Highlight:
    key: str
    started_at_s: float


@dataclass(frozen=True, slots=True)
class ReactionSnapshot:
    """View model for the UI (pure data)."""

    title: str
    phase: Phase
    level: int
    prompt: str
    target_key: str | None
    attempts_completed: int
    attempts_total: int
    enabled_keys: tuple[str, ...]
    numpad_visible: bool
    feedback: str | None = None
    chart_path: Path | None = None


class SeededRng:
    """Simple seeded RNG wrapper to keep deterministic streams explicit."""

    def __init__(self, seed: int) -> None:
        self._rng = random.Random(int(seed))

    def choice(self, seq: list[str]) -> str:
        return self._rng.choice(seq)


def format_seconds(value: float | None) -> str:
    return "n/a" if value is None else f"{value:.3f}"
