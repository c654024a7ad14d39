"""The Gauss-Seidel iterative method for linear systems."""

from __future__ import annotations

from collections.abc import Sequence

from calcnum.gauss import _check_square
from calcnum.jacobi import IterativeSolution, _solve_from_stdin

MAX_ITERATIONS = 100


def gauss_seidel(
    a: Sequence[Sequence[float]],
    b: Sequence[float],
    x0: Sequence[float],
    tolerance: float,
    max_iterations: int = MAX_ITERATIONS,
) -> IterativeSolution:
    """Solve ``a x = b`` by Gauss-Seidel iteration from the guess ``x0``."""
    _check_square(a, b, x0)
    x = [float(v) for v in x0]
    sweeps = 0
    converged = False
    while sweeps < max_iterations and not converged:
        converged = True
        for i, (row, bi) in enumerate(zip(a, b)):
            total = sum(aij * xj for j, (aij, xj) in enumerate(zip(row, x)) if j != i)
            new = (bi - total) / row[i]
            if abs(new - x[i]) > tolerance:
                converged = False
            x[i] = new
        sweeps += 1
    return IterativeSolution(
        method="Gauss-Seidel",
        x=tuple(x),
        converged=converged,
        iterations=sweeps,
        max_iterations=max_iterations,
    )


def main(argv: list[str] | None = None) -> int:
    """Read a system, a guess and a tolerance from stdin and solve it."""
    return _solve_from_stdin("Gauss-Seidel", gauss_seidel, "\n")


if __name__ == "__main__":
    raise SystemExit(main())