"""The Gauss-Jacobi iterative method for linear systems."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from calcnum.gauss import _check_square, _fail, _read_matrix, _read_order, _read_vector, _reader

MAX_ITERATIONS = 100
_RULE = "=" * 59


@dataclass(frozen=True)
class IterativeSolution:
    """Result of an iterative solver.

    ``iterations`` is the count the method reports: for Gauss-Jacobi the
    final sweep that confirms convergence is not counted.
    """

    method: str
    x: tuple[float, ...]
    converged: bool
    iterations: int
    max_iterations: int

    def report(self) -> str:
        """Render the result as the solver's text report."""
        status = (
            f"Convergiu em {self.iterations} iteracoes."
            if self.converged
            else f"Nao convergiu apos {self.max_iterations} iteracoes."
        )
        lines = [_RULE, f" Método de {self.method}", _RULE, status, "Solucoes aproximadas:"]
        lines.extend(f"x{i} = {value:g}" for i, value in enumerate(self.x, start=1))
        return "\n".join(lines)


def gauss_jacobi(
    a: Sequence[Sequence[float]],
    b: Sequence[float],
    x0: Sequence[float],
    tolerance: float,
    max_iterations: int = MAX_ITERATIONS,
) -> IterativeSolution:
    """Solve ``a x = b`` by Gauss-Jacobi iteration from the guess ``x0``."""
    _check_square(a, b, x0)
    previous = [float(v) for v in x0]
    sweeps = 0
    converged = False
    while sweeps < max_iterations and not converged:
        current = [
            (bi - sum(aij * xj for j, (aij, xj) in enumerate(zip(row, previous)) if j != i))
            / row[i]
            for i, (row, bi) in enumerate(zip(a, b))
        ]
        converged = not any(abs(new - old) > tolerance for new, old in zip(current, previous))
        previous = current
        sweeps += 1
    return IterativeSolution(
        method="Gauss-Jacobi",
        x=tuple(previous),
        converged=converged,
        iterations=sweeps - 1 if converged else sweeps,
        max_iterations=max_iterations,
    )


def _solve_from_stdin(method: str, solver, gap: str) -> int:
    """Prompt for a system, a guess and a tolerance, solve and print the report."""
    read = _reader()
    print(f"Metodo de {method} para resolver sistemas lineares")
    try:
        print("Digite o numero de variaveis: ", end="", flush=True)
        n = _read_order(read)
        print("Digite a matriz A (linha por linha):")
        a = _read_matrix(read, n)
        print("Digite o vetor b:")
        b = _read_vector(read, n)
        print("Digite o vetor chute inicial:")
        x0 = _read_vector(read, n)
        print("Digite a tolerancia: ", end="", flush=True)
        solution = solver(a, b, x0, read())
    except (ValueError, ZeroDivisionError) as exc:
        return _fail(exc)
    print(gap)
    print(solution.report())
    return 0


def main(argv: list[str] | None = None) -> int:
    """Read a system, a guess and a tolerance from stdin and solve it."""
    return _solve_from_stdin("Gauss-Jacobi", gauss_jacobi, "\n\n")


if __name__ == "__main__":
    raise SystemExit(main())