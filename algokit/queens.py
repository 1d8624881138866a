"""The eight queens puzzle, solved by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

BOARD_SIZE = 8

Board = tuple[int, ...]


def _is_safe(placed: Board, col: int) -> bool:
    row = len(placed)
    return all(c != col and abs(c - col) != row - r for r, c in enumerate(placed))


def _place(placed: Board) -> Iterator[Board]:
    if len(placed) == BOARD_SIZE:
        yield placed
        return
    for col in range(BOARD_SIZE):
        if _is_safe(placed, col):
            yield from _place(placed + (col,))


def solve_eight_queens() -> Iterator[Board]:
    """Yield every solution as a tuple giving the queen's column in each row.

    Solutions come in lexicographic order of their columns.
    """
    yield from _place(())


def format_board(board: Sequence[int], number: int) -> str:
    """Render a numbered solution as rows of ``0``/``1`` cells."""
    if len(board) != BOARD_SIZE or not all(0 <= c < BOARD_SIZE for c in board):
        raise ValueError("board must give a column in 0..7 for each of 8 rows")
    lines = [f"chessboard: {number}"]
    for col in board:
        lines.append("".join(("1" if c == col else "0") + " " for c in range(BOARD_SIZE)))
    return "\n".join(lines) + "\n"