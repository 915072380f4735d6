"""Iteration table observer with plain-text and HTML rendering."""
from __future__ import annotations

import html as _html
import json
import math
from typing import Any

from ..constants import HEADER
from ..triple import TripleSnapshot

__all__ = ["IterationTable", "format_row"]

_MIN_WIDTH = 8
_PADDING = 1


def format_row(index: int, snap: TripleSnapshot) -> list[str]:
    """Cells of one report row: ``%3d`` index then each abscissa as ``%.9f``."""
    return [f"{index:3d}"] + [f"{x:.9f}" for x in snap.xs]


class IterationTable:
    """Observer that records every triple it is shown.

    Pass an instance as the ``observer`` of
    :func:`spi_search.runner.run_approximation`; afterwards render the rows.
    """

    def __init__(self, title: str | None = None) -> None:
        self.title = title
        self.rows: list[tuple[int, TripleSnapshot]] = []

    def __call__(self, index: int, snap: TripleSnapshot) -> None:
        self.rows.append((index, snap))

    def __len__(self) -> int:
        return len(self.rows)

    def render_text(self) -> str:
        """Tab-aligned table in the column layout of the classic SPI printout."""
        lines = [list(HEADER)] + [format_row(i, s) for i, s in self.rows]
        widths = [
            max(_MIN_WIDTH, max(len(line[col]) for line in lines) + _PADDING)
            for col in range(len(HEADER))
        ]
        out = [self.title] if self.title else []
        for line in lines:
            out.append("".join(cell.ljust(w) for cell, w in zip(line, widths)).rstrip())
        return "\n".join(out) + "\n"

    def render_html(self) -> str:
        """Render the rows as a ``<table>`` element string (values escaped)."""
        head_html = "".join(f"<th>{_html.escape(str(h))}</th>" for h in HEADER)
        rows_html = "".join(
            "<tr>" + "".join(f"<td>{_html.escape(c.strip())}</td>" for c in format_row(i, s)) + "</tr>"
            for i, s in self.rows
        )
        caption = f"<caption>{_html.escape(self.title)}</caption>" if self.title else ""
        return f"<table>{caption}<thead><tr>{head_html}</tr></thead><tbody>{rows_html}</tbody></table>"

    def as_records(self) -> list[dict[str, Any]]:
        return [{"iteration": i, **s.as_dict()} for i, s in self.rows]

    def to_json(self) -> str:
        # NaN/inf are not valid JSON; emit them as null.
        records = [{k: _json_number(v) for k, v in rec.items()} for rec in self.as_records()]
        return json.dumps({"title": self.title, "rows": records}, separators=(",", ":"))


def _json_number(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
