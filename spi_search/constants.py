"""Package-wide constants and the example catalogue."""

from dataclasses import dataclass

# Hard iteration cap of the driver. There is no tolerance-based early exit.
MAX_ITERATIONS = 100

# One report row: iteration index and the three abscissas.
ROW_FORMAT = "%3d\t%.9f\t%.9f\t%.9f\t"
HEADER = ("#", "x", "y", "z")


@dataclass(frozen=True)
class Example:
    """A named evaluator together with the starting abscissas it is run from."""

    name: str
    title: str
    function: str  # attribute name in spi_search.functions
    starts: tuple[tuple[float, float, float], ...]


EXAMPLES: dict[str, Example] = {
    ex.name: ex
    for ex in (
        Example(
            "quadratic-sine",
            "x^2/10 - 2sin(x)",
            "f1",
            ((0, 1, 4), (4, 5, 6), (4, 6, 8), (16, 20, 22)),
        ),
        Example(
            "sinh-sine",
            "sinh(sin(x))",
            "f2",
            ((0, 1, 2), (3, 4, 5), (2, 3, 4)),
        ),
        Example(
            "exp-sine",
            "exp(sin(-x))",
            "f3",
            ((1, 2, 3), (2, 3, 4), (4, 5, 6)),
        ),
        Example(
            "exp-sine-cosine",
            "exp(sin(-x)) + exp(-x * cos^2(x))",
            "f4",
            ((1, 2, 3), (2, 3, 4), (-2, -1.2, -0.8), (4, 5, 6)),
        ),
        Example(
            "sine-reciprocal",
            "sin(1 / x)",
            "f5",
            (
                (0.1, 0.2, 0.3),
                (0.1, 0.3, 0.5),
                (0.001, 0.002, 0.003),
                (0.00001, 0.00002, 0.00003),
                (1, 2, 3),
            ),
        ),
        Example(
            "weierstrass",
            "Weierstrass function (a = 0.3, b = 7)",
            "f6",
            ((0.5, 1, 1.5), (0.5, 1, 1.6)),
        ),
    )
}

DEFAULT_EXAMPLE = "quadratic-sine"

__all__ = [
    "DEFAULT_EXAMPLE",
    "EXAMPLES",
    "Example",
    "HEADER",
    "MAX_ITERATIONS",
    "ROW_FORMAT",
]
