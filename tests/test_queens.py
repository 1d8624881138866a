from itertools import combinations

import pytest

from algokit.queens import format_board, solve_eight_queens


def test_number_of_solutions():
    assert len(list(solve_eight_queens())) == 92


def test_solutions_are_valid():
    for board in solve_eight_queens():
        assert sorted(board) == list(range(8))
        for (r1, c1), (r2, c2) in combinations(enumerate(board), 2):
            assert abs(c1 - c2) != r2 - r1


def test_solutions_are_distinct_and_ordered():
    solutions = list(solve_eight_queens())
    assert len(set(solutions)) == len(solutions)
    assert solutions == sorted(solutions)


def test_format_board_layout():
    board = next(solve_eight_queens())
    text = format_board(board, 1)
    lines = text.splitlines()
    assert lines[0] == "chessboard: 1"
    assert len(lines) == 9
    assert text.endswith("\n")
    for row, col in zip(lines[1:], board):
        cells = row.split(" ")
        assert row.endswith(" ")
        assert cells[:8].count("1") == 1
        assert cells.index("1") == col


def test_format_board_rejects_bad_board():
    with pytest.raises(ValueError):
        format_board((0, 1, 2), 1)
    with pytest.raises(ValueError):
        format_board((0, 1, 2, 3, 4, 5, 6, 8), 1)