"""
Scatter-plot rendering for point lists.

Responsibilities
  - Render ``(x, y)`` points to an image file with title and axis labels.
  - Optionally use a log-scaled y axis and overlay a fitted line.

Usage Context
  - Feed the output of ``get_points`` (and optionally ``get_linear_reg``).

Limitations
  - Requires the optional ``matplotlib`` dependency (``pip install tabstat[plot]``).
  - Always renders with the non-interactive Agg backend.
"""
# 说明：绘图协作者，把点列表渲染为图片文件；核心库只负责提供点列表。
# 约定：
# - matplotlib 为可选依赖，缺失时调用 plot_points 抛出 ImportError

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from tabstat.core.utils.logging import get_logger
from tabstat.core.utils.param_validation import ensure

from tabstat.analysis.queries.extract import Point
from tabstat.analysis.stats.regression import LinearFit

try:
    import matplotlib

    matplotlib.use("Agg")
    from matplotlib import pyplot as plt
except Exception:  # pragma: no cover - optional dependency
    # 可选依赖 matplotlib 缺失时置为 None，绘图接口在调用时报错
    plt = None  # type: ignore

logger = get_logger(__name__)


def plot_points(
    points: Sequence[Point],
    path: Union[str, Path],
    *,
    title: str = "",
    xlabel: str = "",
    ylabel: str = "",
    log_y: bool = False,
    fit: Optional[LinearFit] = None,
) -> Path:
    """Render ``points`` as a scatter chart at ``path`` and return the path."""
    if plt is None:
        raise ImportError("matplotlib is required for plotting; install tabstat[plot]")
    ensure(len(points) > 0, "cannot plot an empty point list")
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    xs = [float(x) for x, _ in points]
    ys = [float(y) for _, y in points]
    fig, ax = plt.subplots()
    try:
        ax.scatter(xs, ys, s=12)
        if fit is not None:
            lo, hi = min(xs), max(xs)
            ax.plot([lo, hi], [fit.predict(lo), fit.predict(hi)], color="red")
        if log_y:
            ax.set_yscale("log")
        ax.set_title(title)
        ax.set_xlabel(xlabel)
        ax.set_ylabel(ylabel)
        fig.savefig(out)
    finally:
        plt.close(fig)
    logger.debug("wrote %d points to %s", len(points), out)
    return out
