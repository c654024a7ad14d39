import io

import pytest

from calcnum.sassenfeld import (
    find_row_permutation,
    format_matrix,
    main,
    sassenfeld_betas,
    satisfies_sassenfeld,
)

EXAM = [[2, 1, 3], [0, -1, 1], [1, 0, 3]]


def test_plain_betas():
    assert sassenfeld_betas([[4, 1], [2, 4]]) == pytest.approx([0.25, 0.5])


def test_weighted_betas():
    assert sassenfeld_betas([[4, 1], [2, 4]], weighted=True) == pytest.approx([0.25, 0.125])


def test_weighted_never_exceeds_plain_when_betas_below_one():
    a = [[10, 2, 3], [1, 5, 1], [2, 3, 10]]
    plain = sassenfeld_betas(a)
    weighted = sassenfeld_betas(a, weighted=True)
    assert all(w <= p for w, p in zip(weighted, plain))


def test_dominant_matrix_satisfies():
    assert satisfies_sassenfeld([[10, 2, 3], [1, 5, 1], [2, 3, 10]])


def test_exam_matrix_fails_as_given():
    assert not satisfies_sassenfeld(EXAM)
    assert not satisfies_sassenfeld(EXAM, weighted=True)


def test_zero_diagonal():
    with pytest.raises(ZeroDivisionError):
        sassenfeld_betas([[0, 1], [1, 1]])
    assert not satisfies_sassenfeld([[0, 1], [1, 1]])


def test_non_square_raises():
    with pytest.raises(ValueError):
        sassenfeld_betas([[1, 2, 3]])


def test_permutation_found():
    assert find_row_permutation([[1, 4], [4, 1]]) == [[4, 1], [1, 4]]


def test_permutation_impossible():
    assert find_row_permutation([[1, 1], [1, 1]]) is None


def test_identity_order_preferred():
    a = [[10, 2, 3], [1, 5, 1], [2, 3, 10]]
    assert find_row_permutation(a) == a


@pytest.mark.parametrize("weighted", [False, True])
def test_permutation_is_rearrangement_that_satisfies(weighted):
    result = find_row_permutation(EXAM, weighted)
    if result is None:
        assert not any(
            satisfies_sassenfeld([EXAM[i] for i in order], weighted)
            for order in [(0, 1, 2), (0, 2, 1), (1, 0, 2), (1, 2, 0), (2, 0, 1), (2, 1, 0)]
        )
    else:
        assert satisfies_sassenfeld(result, weighted)
        assert sorted(result) == sorted(EXAM)


def test_format_matrix():
    assert format_matrix([[4, 1], [0.5, -2]]) == "4\t1\t\n0.5\t-2\t\n"


def test_main_finds_permutation(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 4\n4 1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Critério de Sassenfeld NÃO satisfeito." in out
    assert "Permutação encontrada que satisfaz o critério." in out
    assert "4\t1\t\n1\t4\t\n" in out


def test_main_satisfied(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n4 1\n1 4\n"))
    assert main([]) == 0
    assert "Critério de Sassenfeld satisfeito." in capsys.readouterr().out


def test_main_impossible(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 1\n1 1\n"))
    assert main([]) == 0
    assert "Não foi possível satisfazer" in capsys.readouterr().out