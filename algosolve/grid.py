"""Conway's Game of Life on a bounded board."""

from __future__ import annotations

_ALIVE = 1
_DEAD = 0


def _live_neighbours(board: list[list[int]], row: int, col: int) -> int:
    height, width = len(board), len(board[0])
    return sum(
        board[y][x]
        for y in range(max(row - 1, 0), min(row + 2, height))
        for x in range(max(col - 1, 0), min(col + 2, width))
        if (y, x) != (row, col)
    )


def _next_state(cell: int, neighbours: int) -> int:
    if neighbours == 3 or (cell == _ALIVE and neighbours == 2):
        return _ALIVE
    return _DEAD


def game_of_life(board: list[list[int]]) -> None:
    """Advance ``board`` one generation in place.

    Cells are 1 (alive) or 0 (dead); cells beyond the edge count as dead.
    """
    if not board:
        return
    width = len(board[0])
    if any(len(row) != width for row in board):
        raise ValueError("all rows must have the same length")
    if any(cell not in (_ALIVE, _DEAD) for row in board for cell in row):
        raise ValueError("cells must be 0 or 1")
    next_rows = [
        [_next_state(cell, _live_neighbours(board, r, c)) for c, cell in enumerate(row)]
        for r, row in enumerate(board)
    ]
    for row, new_row in zip(board, next_rows):
        row[:] = new_row