"""Utility helpers for the N-Queens project.

Low-level primitives shared by the search engine, the CLI and the analysis
pipeline: conflict counting for validation, board rendering, and the
reference table of known solution counts.

Representation
--------------
Boards are encoded as a 1D sequence where ``board[row] = column``.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Sequence

# Exact enumeration of N-Queens solutions, N = 0..15.
KNOWN_SOLUTION_COUNTS: Dict[int, int] = {
    0: 0,
    1: 1,
    2: 0,
    3: 0,
    4: 2,
    5: 10,
    6: 4,
    7: 40,
    8: 92,
    9: 352,
    10: 724,
    11: 2680,
    12: 14200,
    13: 73712,
    14: 365596,
    15: 2279184,
}


def conflicts(board: Sequence[int]) -> int:
    """Count attacking queen pairs in O(N).

    Tallies queens per column and per diagonal, then sums the pairs inside
    each group. Rows cannot clash since the encoding holds one queen per row.
    """
    column_count: Counter[int] = Counter()
    diag1: Counter[int] = Counter()
    diag2: Counter[int] = Counter()

    for row, column in enumerate(board):
        column_count[column] += 1
        diag1[column - row] += 1
        diag2[column + row] += 1

    return sum(
        count * (count - 1) // 2
        for counter in (column_count, diag1, diag2)
        for count in counter.values()
        if count > 1
    )


def is_valid_solution(board: Sequence[int]) -> bool:
    """Return True if ``board`` is a complete, conflict-free placement.

    Contract
    - Input: sequence of length N where board[row] = column (0-based)
    - Valid if: N >= 1, every column is an int in [0, N), and no pair of
      queens shares a column or a diagonal
    """
    n = len(board)
    if n == 0:
        return False
    for column in board:
        if not isinstance(column, int) or not 0 <= column < n:
            return False
    return conflicts(board) == 0


def render_board(positions: Sequence[int], queen: str = "Q", empty: str = "_") -> str:
    """Render a placement as text.

    Each row becomes one line; every cell is its glyph left-justified in a
    two-character field, so ``(1, 0)`` renders as ``"_ Q \\nQ _ "``.
    """
    n = len(positions)
    lines = []
    for column_of_queen in positions:
        cells = (queen if column == column_of_queen else empty for column in range(n))
        lines.append("".join(f"{cell:2}" for cell in cells))
    return "\n".join(lines)
