"""Taylor-series approximations of e**x, recursive and iterative."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Sequence

__all__ = [
    "e_taylor_recursive",
    "e_taylor_iterative",
    "e_taylor_iterative_optimized",
    "e_taylor_recursive_optimized",
    "main",
]


def _term_count(n: float) -> int:
    if n < 0 or n != int(n):
        raise ValueError("number of terms must be a non-negative integer")
    return int(n)


def e_taylor_recursive(x: float, n: float) -> float:
    """Sum the first ``n`` terms after 1 of the series for e**x, recursively."""
    terms = _term_count(n)

    def expand(k: int) -> tuple[float, float, float]:
        if k == 0:
            return 1.0, 1.0, 1.0
        result, power, factorial = expand(k - 1)
        power *= x
        factorial *= k
        return result + power / factorial, power, factorial

    return expand(terms)[0]


def e_taylor_iterative(x: float, n: float) -> float:
    """Sum the series for e**x term by term in a loop."""
    result = 1.0
    power = 1.0
    factorial = 1.0
    i = 1.0
    while i <= n:
        power *= x
        factorial *= i
        result += power / factorial
        i += 1
    return result


def e_taylor_iterative_optimized(x: float, n: float) -> float:
    """Evaluate the series for e**x in nested (Horner) form in a loop."""
    result = 1.0
    while n > 0:
        result = 1 + (x / n) * result
        n -= 1
    return result


def e_taylor_recursive_optimized(x: float, n: float) -> float:
    """Evaluate the series for e**x in nested (Horner) form, recursively."""
    terms = _term_count(n)

    def step(accumulated: float, k: int) -> float:
        if k == 0:
            return accumulated
        return step(1 + (x / k) * accumulated, k - 1)

    return step(1.0, terms)


_VARIANTS: tuple[tuple[str, Callable[[float, float], float]], ...] = (
    ("Recursive Taylor", e_taylor_recursive),
    ("Recursive Taylor optimized", e_taylor_recursive_optimized),
    ("Iterative Taylor", e_taylor_iterative),
    ("Iterative Taylor optimized", e_taylor_iterative_optimized),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Time each variant and print its result."""
    parser = argparse.ArgumentParser(description="Compare Taylor-series evaluations of e**x.")
    parser.add_argument("--x", type=float, default=5.0, help="exponent (default: 5)")
    parser.add_argument("--terms", type=int, default=15, help="number of terms (default: 15)")
    args = parser.parse_args(argv)

    for name, function in _VARIANTS:
        started = time.perf_counter()
        result = function(args.x, args.terms)
        elapsed = (time.perf_counter() - started) * 1e6
        print(f"{name}: {result!r} ({elapsed:.3f} us)")
    return 0