"""The Sassenfeld convergence criterion and row permutation search."""

from __future__ import annotations

import itertools
from collections.abc import Sequence

from calcnum.gauss import _check_square, _fail, _read_matrix, _read_order, _reader

_MIN_DIAGONAL = 1e-12


def sassenfeld_betas(a: Sequence[Sequence[float]], weighted: bool = False) -> list[float]:
    """Return the beta coefficient of each row.

    With ``weighted`` the coefficients of earlier rows scale their columns;
    otherwise each row is a plain off-diagonal sum. Raises ZeroDivisionError
    for a (near) zero diagonal entry.
    """
    _check_square(a)
    betas: list[float] = []
    for i, row in enumerate(a):
        total = sum(
            abs(value) * (betas[j] if weighted and j < i else 1.0)
            for j, value in enumerate(row)
            if j != i
        )
        if abs(row[i]) < _MIN_DIAGONAL:
            raise ZeroDivisionError(f"zero diagonal entry in row {i}")
        betas.append(total / abs(row[i]))
    return betas


def satisfies_sassenfeld(a: Sequence[Sequence[float]], weighted: bool = False) -> bool:
    """Whether every beta coefficient is below one."""
    try:
        return all(beta < 1.0 for beta in sassenfeld_betas(a, weighted))
    except ZeroDivisionError:
        return False


def find_row_permutation(
    a: Sequence[Sequence[float]], weighted: bool = False
) -> list[list[float]] | None:
    """Return the first row order, in lexicographic order, meeting the criterion."""
    rows = [list(row) for row in a]
    candidates = (list(order) for order in itertools.permutations(rows))
    return next((c for c in candidates if satisfies_sassenfeld(c, weighted)), None)


def format_matrix(a: Sequence[Sequence[float]]) -> str:
    """Render a matrix with each value followed by a tab, one row per line."""
    return "".join("".join(f"{value:g}\t" for value in row) + "\n" for row in a)


def main(argv: list[str] | None = None) -> int:
    """Read a matrix from stdin and check, or try to reach, the criterion."""
    read = _reader()
    try:
        print("Digite a ordem da matriz: ", end="", flush=True)
        n = _read_order(read)
        print(f"Digite a matriz dos coeficientes A ({n}x{n}):")
        a = _read_matrix(read, n)
    except ValueError as exc:
        return _fail(exc)

    if satisfies_sassenfeld(a):
        print("\nCritério de Sassenfeld satisfeito.")
        return 0

    print("\nCritério de Sassenfeld NÃO satisfeito.\nTentando permutar linhas...")
    permuted = find_row_permutation(a)
    if permuted is None:
        print("Não foi possível satisfazer o critério com permutação de linhas.")
    else:
        print("Permutação encontrada que satisfaz o critério.\nNova matriz A:")
        print(format_matrix(permuted), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())