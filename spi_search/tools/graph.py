"""Plot the iterates of an approximation run."""
from __future__ import annotations

import math
import os
import tempfile
import warnings
from pathlib import Path
from typing import Callable, Iterable, Optional

from ..triple import TripleSnapshot

__all__ = ["render_iterates"]

_CURVE_SAMPLES = 400


def _select_backend() -> None:
    import matplotlib  # type: ignore

    try:
        backend = matplotlib.get_backend().lower()
    except Exception:
        backend = ""
    if backend in {"agg", "tkagg"}:
        return
    env_backend = os.environ.get("MPLBACKEND", "").lower()
    prefer_tk = bool(os.environ.get("DISPLAY")) or env_backend == "tkagg"
    if prefer_tk:
        try:
            matplotlib.use("TkAgg")
        except Exception as exc:  # pragma: no cover - depends on system backend
            warnings.warn(
                f"Preferred GUI backend 'TkAgg' unavailable; falling back to 'Agg': {exc}",
                RuntimeWarning,
            )
            matplotlib.use("Agg")
    else:
        matplotlib.use("Agg")


def render_iterates(
    rows: Iterable[tuple[int, TripleSnapshot]],
    f: Optional[Callable[[float], float]] = None,
    path: str | Path | None = None,
    title: str | None = None,
) -> str:
    """Render the sampled points of every iterate to a **PNG file**.

    ``rows`` is what :class:`spi_search.tools.table.IterationTable` collects.
    When *f* is given its curve is drawn over the span of the samples.  The
    PNG goes to *path*, or to a fresh temporary file; its path is returned.
    """
    try:
        import matplotlib  # type: ignore  # noqa: F401
    except Exception as exc:  # pragma: no cover - environment-dependent
        raise RuntimeError(
            "matplotlib is required to render plots. Install it or run without --plot."
        ) from exc
    _select_backend()
    import matplotlib.pyplot as plt  # type: ignore
    import numpy as np

    rows = list(rows)
    if not rows:
        raise ValueError("no iterates to plot")

    points = [
        (x, y)
        for _, snap in rows
        for x, y in zip(snap.xs, snap.ys)
        if math.isfinite(x) and math.isfinite(y)
    ]

    fig, ax = plt.subplots(figsize=(7, 5))
    if f is not None and points:
        lo = min(p[0] for p in points)
        hi = max(p[0] for p in points)
        if hi > lo:
            grid = np.linspace(lo, hi, _CURVE_SAMPLES)
            with np.errstate(all="ignore"):
                curve = [float(f(float(x))) for x in grid]
            ax.plot(grid, curve, color="0.6", linewidth=1)

    if points:
        xs, ys = zip(*points)
        ax.scatter(xs, ys, s=12, color="tab:blue", label="samples")

    last = rows[-1][1]
    ax.scatter([last.x2], [last.y2], s=40, color="tab:red", zorder=3, label=f"x2 = {last.x2:.9f}")
    ax.legend(loc="best")
    ax.grid(True)
    if title:
        ax.set_title(str(title))

    if path is None:
        fd, tmp = tempfile.mkstemp(suffix=".png")
        os.close(fd)
        png_path = Path(tmp)
    else:
        png_path = Path(path)
    fig.savefig(png_path, format="png")
    plt.close(fig)
    return str(png_path)
