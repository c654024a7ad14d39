"""Gaussian elimination without pivoting."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence


def _check_square(a, *vectors) -> int:
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    if any(len(v) != n for v in vectors):
        raise ValueError("vector lengths must match the matrix")
    return n


def gauss_elimination(a: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """Solve ``a x = b`` by triangularisation and back substitution.

    The inputs are not modified. Rows are not exchanged, so a zero pivot
    raises ZeroDivisionError.
    """
    n = _check_square(a, b)
    m = [[float(v) for v in row] for row in a]
    rhs = [float(v) for v in b]

    for k, pivot_row in enumerate(m[:-1]):
        if pivot_row[k] == 0:
            raise ZeroDivisionError(f"zero pivot in row {k}")
        for i in range(k + 1, n):
            factor = m[i][k] / pivot_row[k]
            m[i][k:] = [v - factor * p for v, p in zip(m[i][k:], pivot_row[k:])]
            rhs[i] -= factor * rhs[k]

    x = [0.0] * n
    for i in reversed(range(n)):
        if m[i][i] == 0:
            raise ZeroDivisionError(f"zero pivot in row {i}")
        total = sum(aij * xj for aij, xj in zip(m[i][i + 1 :], x[i + 1 :]))
        x[i] = (rhs[i] - total) / m[i][i]
    return x


def _reader(stream=None) -> Callable:
    """Return a function reading the next whitespace-separated value."""
    tokens = (tok for line in (stream or sys.stdin) for tok in line.split())

    def read(kind=float):
        try:
            return kind(next(tokens))
        except StopIteration:
            raise ValueError("entrada insuficiente") from None

    return read


def _read_order(read) -> int:
    n = read(int)
    if n < 0:
        raise ValueError("n deve ser nao negativo")
    return n


def _read_vector(read, n: int) -> list[float]:
    return [read() for _ in range(n)]


def _read_matrix(read, n: int) -> list[list[float]]:
    return [_read_vector(read, n) for _ in range(n)]


def _fail(exc: Exception) -> int:
    print(f"Erro: {exc}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Read a system from stdin and print its solution."""
    read = _reader()
    try:
        print("Digite o número de equações (n): ", end="", flush=True)
        n = _read_order(read)
        print(f"Digite a matriz A ({n}x{n}):")
        a = _read_matrix(read, n)
        print("Digite o vetor b:")
        x = gauss_elimination(a, _read_vector(read, n))
    except (ValueError, ZeroDivisionError) as exc:
        return _fail(exc)

    print("\nSolução aproximada do sistema:")
    for i, value in enumerate(x):
        print(f"x[{i}] = {value:.6f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())