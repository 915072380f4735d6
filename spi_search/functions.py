"""Example evaluators and a compiler for user-supplied expressions."""
from __future__ import annotations

from typing import Any, Callable

import numpy as np

from .constants import EXAMPLES, Example

__all__ = [
    "compile_expression",
    "f1",
    "f2",
    "f3",
    "f4",
    "f5",
    "f6",
    "resolve_example",
]


def f1(x: float) -> float:
    return x * x / 10 - 2 * np.sin(x)


def f2(x: float) -> float:
    return np.sinh(np.sin(x))


def f3(x: float) -> float:
    return np.exp(-np.sin(x))


def f4(x: float) -> float:
    cos = -np.cos(x)
    return np.exp(-np.sin(x)) + np.exp(-x * cos * cos)


def f5(x: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.sin(1 / np.float64(x))


def f6(x: float, a: float = 0.3, b: float = 7, terms: int = 21) -> float:
    """Partial sum of the Weierstrass function ``sum a^n cos(b^n pi x)``."""
    z = 0.0
    for n in range(terms):
        z = a**n * np.cos(b**n * np.pi * x) + z
    return z


def resolve_example(name: str) -> tuple[Example, Callable[[float], float]]:
    """Return the catalogue entry called *name* and its evaluator."""
    try:
        example = EXAMPLES[name]
    except KeyError:
        known = ", ".join(sorted(EXAMPLES))
        raise ValueError(f"Unknown example '{name}'. Choose one of: {known}") from None
    return example, globals()[example.function]


def compile_expression(expression: str) -> Callable[[float], float]:
    """Turn an expression in ``x`` (SymPy syntax) into a float evaluator."""
    import sympy as sp  # type: ignore
    from sympy.core.relational import Relational

    error_msg = (
        f"Could not parse expression '{expression}'. "
        "Use '*' for multiplication, '**' for powers and 'x' as the only variable."
    )
    x_sym = sp.Symbol("x")
    try:
        expr = sp.sympify(expression, locals={"x": x_sym})
    except (sp.SympifyError, SyntaxError, TypeError) as exc:
        raise ValueError(error_msg) from exc

    if isinstance(expr, Relational) or not isinstance(expr, sp.Expr):
        raise ValueError(error_msg)
    extra = expr.free_symbols - {x_sym}
    if extra:
        names = ", ".join(sorted(str(s) for s in extra))
        raise ValueError(f"{error_msg} Unexpected symbols: {names}")

    compiled = sp.lambdify(x_sym, expr, modules="numpy")

    def _evaluate(x: float) -> float:
        with np.errstate(all="ignore"):
            value: Any = compiled(np.float64(x))
        return float(value)

    _evaluate.__doc__ = str(expr)
    return _evaluate
