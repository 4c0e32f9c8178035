from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionResult:
    """Persistable summary of one completed session."""

    level: int
    reaction_times: tuple[float, ...]

    attempts: int
    mean_s: float | None
    median_s: float | None
    best_s: float | None
    worst_s: float | None


def session_result_from_times(level: int, reaction_times: list[float] | tuple[float, ...]) -> SessionResult:
    """Build a SessionResult from the recorded reaction times (in order)."""

    times = tuple(float(t) for t in reaction_times)
    ordered = sorted(times)

    mean_s: float | None
    median_s: float | None
    if not ordered:
        mean_s = None
        median_s = None
    else:
        mean_s = sum(ordered) / float(len(ordered))
        mid = len(ordered) // 2
        if len(ordered) % 2 == 1:
            median_s = ordered[mid]
        else:
            median_s = (ordered[mid - 1] + ordered[mid]) / 2.0

    return SessionResult(
        level=int(level),
        reaction_times=times,
        attempts=len(times),
        mean_s=mean_s,
        median_s=median_s,
        best_s=ordered[0] if ordered else None,
        worst_s=ordered[-1] if ordered else None,
    )
