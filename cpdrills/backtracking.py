"""Backtracking searches: queen placements and paths through a square grid."""

from __future__ import annotations

from collections.abc import Iterator

_MOVES = ((-1, 0), (0, 1), (1, 0), (0, -1))


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens on an n by n board.

    Each placement gives, row by row, the column of the queen in that row.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    columns = [False] * n
    diagonals = [False] * (2 * n)
    anti_diagonals = [False] * (2 * n)
    placement: list[int] = []

    def search(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(placement)
            return
        for col in range(n):
            diag = row + col
            anti = row - col + n - 1
            if columns[col] or diagonals[diag] or anti_diagonals[anti]:
                continue
            columns[col] = diagonals[diag] = anti_diagonals[anti] = True
            placement.append(col)
            yield from search(row + 1)
            placement.pop()
            columns[col] = diagonals[diag] = anti_diagonals[anti] = False

    return search(0)


def count_grid_paths(n: int) -> int:
    """Count simple paths from the top-left to the bottom-right cell of an n by n grid."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    visited = [[False] * n for _ in range(n)]

    def search(row: int, col: int) -> int:
        if row == n - 1 and col == n - 1:
            return 1
        visited[row][col] = True
        total = 0
        for dr, dc in _MOVES:
            nr, nc = row + dr, col + dc
            if 0 <= nr < n and 0 <= nc < n and not visited[nr][nc]:
                total += search(nr, nc)
        visited[row][col] = False
        return total

    return search(0, 0)


def count_hamiltonian_paths(n: int) -> int:
    """Count paths that visit every cell of an n by n grid exactly once.

    Paths start in the top-left cell and end in the bottom-right one. Only
    paths whose first step goes right are searched; the count is doubled by
    the grid's diagonal symmetry. Branches are cut when the destination is
    reached early or when the path is blocked ahead but could turn either way,
    which splits the unvisited cells in two.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if n == 1:
        return 1
    total_cells = n * n
    visited = [[False] * n for _ in range(n)]
    visited[0][0] = visited[0][1] = True

    def free(row: int, col: int) -> bool:
        return 0 <= row < n and 0 <= col < n and not visited[row][col]

    def search(row: int, col: int, dr: int, dc: int, length: int) -> int:
        if row == n - 1 and col == n - 1:
            return 1 if length == total_cells else 0
        if (
            not free(row + dr, col + dc)
            and free(row + dc, col + dr)
            and free(row - dc, col - dr)
        ):
            return 0
        total = 0
        for ndr, ndc in _MOVES:
            nr, nc = row + ndr, col + ndc
            if free(nr, nc):
                visited[nr][nc] = True
                total += search(nr, nc, ndr, ndc, length + 1)
                visited[nr][nc] = False
        return total

    return 2 * search(0, 1, 0, 1, 2)