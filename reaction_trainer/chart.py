from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from .reaction_core import ReactionTrainerError  # noqa: E402

logger = logging.getLogger(__name__)

MM_PER_INCH = 25.4
CHART_WIDTH_MM = 150.0
CHART_HEIGHT_MM = 100.0
CHART_DPI = 100


class ChartRenderError(ReactionTrainerError):
    """The reaction chart image could not be rendered or written."""


def render_chart(reaction_times: Sequence[float], path: Path) -> Path:
    """Scatter the reaction times by press number and save to ``path``.

    An existing image at ``path`` is overwritten.
    """

    xs = [i + 1 for i in range(len(reaction_times))]
    ys = [float(t) for t in reaction_times]

    fig, ax = plt.subplots(figsize=(CHART_WIDTH_MM / MM_PER_INCH, CHART_HEIGHT_MM / MM_PER_INCH))
    try:
        ax.scatter(xs, ys)
        ax.set_title("Reaction time")
        ax.set_xlabel("Press")
        ax.set_ylabel("Time (sec)")
        if xs:
            ax.set_xticks(xs)
        ax.grid(True, alpha=0.3)
        fig.savefig(path, dpi=CHART_DPI, format="png")
    except (OSError, ValueError) as exc:
        raise ChartRenderError(f"cannot render chart {path}: {exc}") from exc
    finally:
        plt.close(fig)

    logger.info("Rendered reaction chart (%d points) to %s", len(ys), path)
    return path
