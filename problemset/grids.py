"""Grid problems: islands, rotting oranges and sudoku."""

from __future__ import annotations

from collections.abc import Sequence

_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))
_DIGITS = "123456789"
_EMPTY = "."


def _neighbours(row: int, col: int):
    for d_row, d_col in _DIRECTIONS:
        yield row + d_row, col + d_col


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the groups of '1' cells joined horizontally or vertically."""
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == "1"
    }
    islands = 0
    while land:
        islands += 1
        stack = [land.pop()]
        while stack:
            for neighbour in _neighbours(*stack.pop()):
                if neighbour in land:
                    land.remove(neighbour)
                    stack.append(neighbour)
    return islands


def rot_oranges(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until every fresh orange (1) is rotten (2), or -1 if some never rot."""
    fresh = set()
    rotten = []
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 1:
                fresh.add((r, c))
            elif cell == 2:
                rotten.append((r, c))
    minutes = 0
    while rotten and fresh:
        spread = []
        for cell in rotten:
            for neighbour in _neighbours(*cell):
                if neighbour in fresh:
                    fresh.remove(neighbour)
                    spread.append(neighbour)
        if spread:
            minutes += 1
        rotten = spread
    return -1 if fresh else minutes


def is_valid_placement(board: Sequence[Sequence[str]], row: int, col: int, digit: str) -> bool:
    """Return True when ``digit`` is absent from the row, column and box of the cell."""
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    return all(
        board[row][i] != digit
        and board[i][col] != digit
        and board[box_row + i // 3][box_col + i % 3] != digit
        for i in range(9)
    )


def _fill(grid: list[list[str]], empties: list[tuple[int, int]], position: int) -> bool:
    if position == len(empties):
        return True
    row, col = empties[position]
    for digit in _DIGITS:
        if is_valid_placement(grid, row, col, digit):
            grid[row][col] = digit
            if _fill(grid, empties, position + 1):
                return True
    grid[row][col] = _EMPTY
    return False


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a solved copy of a 9x9 sudoku whose empty cells are '.'."""
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("a sudoku board is 9 rows of 9 cells")
    empties: list[tuple[int, int]] = []
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == _EMPTY:
                empties.append((r, c))
                continue
            if cell not in _DIGITS or len(cell) != 1:
                raise ValueError(f"invalid cell {cell!r} at ({r}, {c})")
            row[c] = _EMPTY
            valid = is_valid_placement(grid, r, c, cell)
            row[c] = cell
            if not valid:
                raise ValueError(f"conflicting digit {cell!r} at ({r}, {c})")
    if not _fill(grid, empties, 0):
        raise ValueError("the puzzle has no solution")
    return grid