"""Command-line interface wrapper around :pyfunc:`spi_search.run_approximation`."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

from . import constants as C
from .functions import compile_expression, resolve_example
from .runner import run_approximation
from .tools.table import IterationTable

__all__ = ["main"]

logger = logging.getLogger(__name__)


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:  # noqa: D401 – imperative mood
    parser = argparse.ArgumentParser(
        description="Locate an extremum by successive parabolic interpolation"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--example",
        help=f"Run a catalogue example (default: {C.DEFAULT_EXAMPLE}); see --list",
    )
    source.add_argument("--expr", help="Expression in x to approximate, e.g. 'x**2/10 - 2*sin(x)'")
    source.add_argument("--list", action="store_true", help="List catalogue examples and exit")
    parser.add_argument(
        "abscissas",
        nargs="*",
        type=float,
        help="Three starting abscissas (any order); required with --expr",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=C.MAX_ITERATIONS,
        help="Iteration cap (default: %(default)s)",
    )
    parser.add_argument("--html", action="store_true", help="Print HTML tables instead of text")
    parser.add_argument("--out", help="Write JSON output to file")
    parser.add_argument("--plot", help="Write a PNG plot of the iterates (one file per run)")
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging level for spi_search",
    )
    return parser.parse_args(argv)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("spi_search")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def _plot_path(base: str, idx: int, total: int) -> Path:
    path = Path(base)
    if total == 1:
        return path
    suffix = path.suffix or ".png"
    return path.with_name(f"{path.stem}-{idx + 1}{suffix}")


def _resolve_runs(ns: argparse.Namespace) -> tuple[str, Callable[[float], float], list[tuple[float, ...]]]:
    if ns.abscissas and len(ns.abscissas) != 3:
        sys.exit(f"Error: expected exactly three abscissas, got {len(ns.abscissas)}.")

    if ns.expr is not None:
        if not ns.abscissas:
            sys.exit("Error: --expr requires three starting abscissas.")
        try:
            f = compile_expression(ns.expr)
        except ValueError as exc:
            sys.exit(f"Error: {exc}")
        return ns.expr, f, [tuple(ns.abscissas)]

    try:
        example, f = resolve_example(ns.example or C.DEFAULT_EXAMPLE)
    except ValueError as exc:
        sys.exit(f"Error: {exc}")
    starts = [tuple(ns.abscissas)] if ns.abscissas else [tuple(s) for s in example.starts]
    return example.title, f, starts


def main(argv: list[str] | None = None) -> int:  # noqa: D401 – imperative mood
    ns = _parse_cli(argv)
    _configure_logging(ns.log_level)

    if ns.list:
        for name, example in C.EXAMPLES.items():
            print(f"{name:<16} {example.title}")
        return 0
    if ns.max_iterations < 0:
        sys.exit("Error: --max-iterations must be non-negative.")

    title, f, starts = _resolve_runs(ns)
    runs: list[dict[str, Any]] = []
    for idx, (a, b, c) in enumerate(starts):
        table = IterationTable(title)
        result = run_approximation(f, a, b, c, table, max_iterations=ns.max_iterations)
        logger.info(
            "run %d/%d from (%g, %g, %g): %s after %d iterations",
            idx + 1,
            len(starts),
            a,
            b,
            c,
            result.reason.value,
            result.iterations,
        )
        print(table.render_html() if ns.html else table.render_text(), end="\n" if ns.html else "")

        record = json.loads(table.to_json())
        record.update(
            start=[float(a), float(b), float(c)],
            iterations=result.iterations,
            reason=result.reason.value,
        )
        if ns.plot:
            from .tools.graph import render_iterates

            try:
                record["plot"] = render_iterates(
                    table.rows, f, _plot_path(ns.plot, idx, len(starts)), title
                )
            except RuntimeError as exc:
                sys.exit(f"Error: {exc}")
        runs.append(record)

    if ns.out:
        Path(ns.out).write_text(
            json.dumps({"title": title, "runs": runs}, ensure_ascii=False, separators=(",", ":")),
            "utf-8",
        )
        print(f"✔ Run JSON written to {ns.out}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
