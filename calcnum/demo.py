"""Fixed worked examples of each numerical method, run in sequence."""

from __future__ import annotations

import argparse
import math
import sys
from typing import TextIO

from calcnum.jacobi import IterativeSolution, gauss_jacobi
from calcnum.sassenfeld import find_row_permutation, satisfies_sassenfeld
from calcnum.secant import MAX_ITERATIONS, SecantError, format_step, secant
from calcnum.seidel import gauss_seidel

_RULE = "=" * 59

_SECANT_START = (1.5, 2.0)
_SECANT_EPSILON = 0.0001

_JACOBI_A = [[10.0, 2.0, 3.0], [1.0, 5.0, 1.0], [2.0, 3.0, 10.0]]
_JACOBI_B = [7.0, 8.0, 6.0]
_JACOBI_X0 = [0.7, -1.6, 0.6]
_JACOBI_TOLERANCE = 0.5

_SEIDEL_A = [[5.0, 1.0, 1.0], [3.0, 4.0, 1.0], [3.0, 3.0, 6.0]]
_SEIDEL_B = [5.0, 6.0, 0.0]
_SEIDEL_X0 = [0.0, 0.0, 0.0]
_SEIDEL_TOLERANCE = 0.1

_SASSENFELD_A = [[2.0, 1.0, 3.0], [0.0, -1.0, 1.0], [1.0, 0.0, 3.0]]


def demo_function(x: float) -> float:
    """The function whose root the demonstration seeks: exp(-x^2) - cos(x)."""
    return math.exp(-(x**2)) - math.cos(x)


def _banner(title: str) -> str:
    return f"{_RULE}\n {title}\n{_RULE}\n"


def _solution_lines(solution: IterativeSolution) -> str:
    if solution.converged:
        head = f"Convergiu em {solution.iterations} iteracoes.\n"
    else:
        head = f"Nao convergiu apos {solution.max_iterations} iteracoes.\n"
    values = "".join(
        f"x{i} = {value:.8f}\n" for i, value in enumerate(solution.x, start=1)
    )
    return head + "Solucoes aproximadas:\n" + values


def run_demo(out: TextIO | None = None) -> None:
    """Write the full demonstration report to ``out`` (standard output by default).

    Raises SecantError if the secant example cannot converge.
    """
    out = sys.stdout if out is None else out
    write = out.write

    write("\n\nMetodo da Secante (Recursivo, com limite de iteracoes)\n\n")
    x0, x1 = _SECANT_START
    result = secant(x0, x1, _SECANT_EPSILON, demo_function, MAX_ITERATIONS)
    for step in result.steps:
        write(format_step(step) + "\n")
    write(f"\nTotal de iteracoes: {result.iterations}\n")
    write(f"\nRaiz aproximada: {result.root:.8f}\n")
    write("\n\n")

    write(_banner("Método de Gauss-Jacobi"))
    write("Metodo de Gauss-Jacobi para resolver sistemas lineares\n")
    jacobi = gauss_jacobi(_JACOBI_A, _JACOBI_B, _JACOBI_X0, _JACOBI_TOLERANCE)
    write("\n\n\n")
    write(_solution_lines(jacobi))
    write("\n\n")

    write(_banner("Método de Gauss-Seidel"))
    seidel = gauss_seidel(_SEIDEL_A, _SEIDEL_B, _SEIDEL_X0, _SEIDEL_TOLERANCE)
    write("\n\n")
    write(_solution_lines(seidel))
    write("\n\n")

    write(_banner("Critério Sassenfeld"))
    if satisfies_sassenfeld(_SASSENFELD_A, weighted=True):
        write("\nCritério de Sassenfeld satisfeito.\n")
        write("\n\n")
        return
    write("\nCritério de Sassenfeld NÃO satisfeito.\n")
    write("Tentando permutar linhas...\n")
    permuted = find_row_permutation(_SASSENFELD_A, weighted=True)
    if permuted is None:
        write("Não foi possível satisfazer o critério com permutação de linhas.\n")
        write("\n\n")
        return
    write("Permutação encontrada que satisfaz o critério.\n")
    write("Nova matriz A:\n")
    for row in permuted:
        write("".join(f"{value:.8f}\t" for value in row) + "\n")


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration and print it to standard output."""
    parser = argparse.ArgumentParser(description="Apresentacao dos metodos numericos")
    parser.parse_args(argv)
    try:
        run_demo(sys.stdout)
    except SecantError as exc:
        print(f"Erro: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())