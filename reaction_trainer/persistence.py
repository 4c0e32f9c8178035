from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .reaction_core import ReactionTrainerError

logger = logging.getLogger(__name__)

HEADER_FORMAT = "Test: Level {level}"
PRESS_FORMAT = "Press {index}: {seconds:.3f} sec"

_HEADER_RE = re.compile(r"^Test: Level (\d+)$")
_PRESS_RE = re.compile(r"^Press (\d+): (\d+(?:\.\d+)?) sec$")


class PersistenceError(ReactionTrainerError):
    """The results log could not be written."""


@dataclass(frozen=True, slots=True)
class LoggedSession:
    level: int
    reaction_times: tuple[float, ...]


def format_session(level: int, reaction_times: Sequence[float]) -> str:
    lines = ["", HEADER_FORMAT.format(level=int(level))]
    for i, t in enumerate(reaction_times, start=1):
        lines.append(PRESS_FORMAT.format(index=i, seconds=float(t)))
    return "\n".join(lines) + "\n"


def append_results(path: Path, level: int, reaction_times: Sequence[float]) -> None:
    """Append one session report to the results log, creating it if absent."""

    text = format_session(level, reaction_times)
    try:
        with open(path, "a", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as exc:
        raise PersistenceError(f"cannot write results log {path}: {exc}") from exc
    logger.info("Appended %d reaction times (level %d) to %s", len(reaction_times), level, path)


def read_results(path: Path) -> list[LoggedSession]:
    """Parse the results log back into sessions, in file order."""

    if not path.exists():
        return []

    sessions: list[LoggedSession] = []
    level: int | None = None
    times: list[float] = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        m = _HEADER_RE.match(line)
        if m:
            if level is not None:
                sessions.append(LoggedSession(level=level, reaction_times=tuple(times)))
            level = int(m.group(1))
            times = []
            continue
        m = _PRESS_RE.match(line)
        if m and level is not None:
            times.append(float(m.group(2)))

    if level is not None:
        sessions.append(LoggedSession(level=level, reaction_times=tuple(times)))
    return sessions
