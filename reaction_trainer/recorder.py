from __future__ import annotations

from pathlib import Path

from .chart import render_chart
from .persistence import append_results
from .results import SessionResult


class SessionRecorder:
    """Completion hook: append the results log, then redraw the chart."""

    def __init__(self, *, results_path: Path, chart_path: Path) -> None:
        self._results_path = results_path
        self._chart_path = chart_path

    @property
    def chart_path(self) -> Path:
        return self._chart_path

    def record(self, result: SessionResult) -> Path:
        append_results(self._results_path, result.level, result.reaction_times)
        return render_chart(result.reaction_times, self._chart_path)
