import io

import pytest

from calcnum.jacobi import IterativeSolution, gauss_jacobi, main

A = [[10, 2, 3], [1, 5, 1], [2, 3, 10]]
B = [7, 8, 6]


def _residual(a, x, b):
    return max(abs(sum(aij * xj for aij, xj in zip(row, x)) - bi) for row, bi in zip(a, b))


def test_converges_on_dominant_system():
    result = gauss_jacobi(A, B, [0.7, -1.6, 0.6], 1e-10)
    assert result.converged
    assert _residual(A, result.x, B) < 1e-8
    assert result.iterations < result.max_iterations


def test_guess_not_modified():
    guess = [0.7, -1.6, 0.6]
    gauss_jacobi(A, B, guess, 0.5)
    assert guess == [0.7, -1.6, 0.6]


def test_first_sweep_convergence_counts_zero():
    result = gauss_jacobi(A, B, [0, 0, 0], 1e9)
    assert result.converged
    assert result.iterations == 0


def test_identity_system_counts():
    result = gauss_jacobi([[1, 0], [0, 1]], [1, 2], [0, 0], 0.5)
    assert result.x == (1.0, 2.0)
    assert result.iterations == 1


def test_divergent_system_hits_limit():
    result = gauss_jacobi([[1, 2], [3, 1]], [1, 1], [0, 0], 1e-6)
    assert not result.converged
    assert result.iterations == 100
    assert result.max_iterations == 100


def test_custom_iteration_limit():
    result = gauss_jacobi([[1, 2], [3, 1]], [1, 1], [0, 0], 1e-6, max_iterations=5)
    assert not result.converged
    assert result.iterations == 5


def test_report_converged():
    solution = IterativeSolution("Gauss-Jacobi", (1.0, 2.5), True, 4, 100)
    lines = solution.report().splitlines()
    assert lines[0] == "=" * 59
    assert lines[1] == " Método de Gauss-Jacobi"
    assert lines[3] == "Convergiu em 4 iteracoes."
    assert lines[4] == "Solucoes aproximadas:"
    assert lines[5:] == ["x1 = 1", "x2 = 2.5"]


def test_report_not_converged():
    solution = IterativeSolution("Gauss-Jacobi", (0.0,), False, 100, 100)
    assert "Nao convergiu apos 100 iteracoes." in solution.report()


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        gauss_jacobi([[1, 0], [0, 1]], [1, 2], [0], 0.1)


def test_zero_diagonal_raises():
    with pytest.raises(ZeroDivisionError):
        gauss_jacobi([[0, 1], [1, 0]], [1, 1], [0, 0], 0.1)


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 0\n0 1\n1 2\n0 0\n0.5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Convergiu em 1 iteracoes." in out
    assert "x1 = 1" in out
    assert "x2 = 2" in out