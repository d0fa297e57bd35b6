"""Backtracking drills: graph colouring, queens, permutations, mazes, sudoku, word break."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache

_MAZE_MOVES = ((1, 0, "D"), (0, -1, "L"), (0, 1, "R"), (-1, 0, "U"))
_DIGITS = "123456789"


def graph_coloring(graph: Sequence[Sequence[int]], colors: int) -> bool:
    """True if the graph, given as an adjacency matrix, can be coloured with
    at most ``colors`` colours so that no two adjacent vertices share one."""
    size = len(graph)
    assigned = [0] * size

    def allowed(node: int, color: int) -> bool:
        return not any(
            other != node and graph[other][node] and assigned[other] == color
            for other in range(size)
        )

    def solve(node: int) -> bool:
        if node == size:
            return True
        for color in range(1, colors + 1):
            if allowed(node, color):
                assigned[node] = color
                if solve(node + 1):
                    return True
                assigned[node] = 0
        return False

    return solve(0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of 'Q' and '.'."""
    if n < 0:
        raise ValueError("n must not be negative")
    results: list[list[str]] = []
    columns: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            placed != col and abs(placed - col) != row - earlier
            for earlier, placed in enumerate(columns)
        )

    def place(row: int) -> None:
        if row == n:
            results.append(["." * c + "Q" + "." * (n - c - 1) for c in columns])
            return
        for col in range(n):
            if safe(row, col):
                columns.append(col)
                place(row + 1)
                columns.pop()

    place(0)
    return results


def permute(nums: Sequence[int]) -> list[list[int]]:
    """All permutations of ``nums``, generated by successive swaps."""
    work = list(nums)
    results: list[list[int]] = []

    def explore(index: int) -> None:
        if index == len(work) - 1:
            results.append(list(work))
            return
        for i in range(index, len(work)):
            work[i], work[index] = work[index], work[i]
            explore(index + 1)
            work[i], work[index] = work[index], work[i]

    explore(0)
    return results


def find_path(maze: Sequence[Sequence[int]]) -> list[str]:
    """Every route of D/L/R/U moves from the top-left to the bottom-right of a
    square maze through open (1) cells, visiting no cell twice, in sorted order."""
    grid = [list(row) for row in maze]
    size = len(grid)
    if size == 0 or not grid[0][0] or not grid[size - 1][size - 1]:
        return []
    results: list[str] = []
    moves: list[str] = []

    def explore(row: int, col: int) -> None:
        if row == size - 1 and col == size - 1:
            results.append("".join(moves))
            return
        if row < 0 or col < 0 or row >= size or col >= size or not grid[row][col]:
            return
        grid[row][col] = 0
        for d_row, d_col, letter in _MAZE_MOVES:
            moves.append(letter)
            explore(row + d_row, col + d_col)
            moves.pop()
        grid[row][col] = 1

    explore(0, 0)
    return results


def _fits(board: list[list[str]], row: int, col: int, digit: str) -> bool:
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    for i in range(9):
        if board[i][col] == digit or board[row][i] == digit:
            return False
        if board[box_row + i // 3][box_col + i % 3] == digit:
            return False
    return True


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the '.' cells of a 9x9 board in place; False if no filling exists."""
    for row in range(9):
        for col in range(9):
            if board[row][col] != ".":
                continue
            for digit in _DIGITS:
                if _fits(board, row, col, digit):
                    board[row][col] = digit
                    if solve_sudoku(board):
                        return True
                    board[row][col] = "."
            return False
    return True


def word_break(text: str, words: Iterable[str]) -> bool:
    """True if ``text`` can be cut into pieces that are all in ``words``."""
    vocabulary = set(words)

    @lru_cache(maxsize=None)
    def breakable(start: int) -> bool:
        if start == len(text):
            return True
        return any(
            text[start:end] in vocabulary and breakable(end)
            for end in range(start + 1, len(text) + 1)
        )

    return breakable(0)