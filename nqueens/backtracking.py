"""Lazy backtracking enumeration of N-Queens solutions.

This module implements an iterative (non-recursive) depth-first search that
enumerates every solution whose row-0 queen sits on a fixed starting column.
The search is exposed as a plain iterator: each ``next()`` call advances the
search just far enough to produce one more solution, then suspends with its
full state kept in an explicit cursor stack.

Entry points:

- BoardSearch(size, start_column): one resumable search over the subtree
    fixed by ``start_column``.
- is_position_eligible(candidate, cursor): the conflict test used at every
    step of the search.
- first_solution(size): convenience wrapper returning the first solution of
    the column-ascending enumeration, or None.

Implementation overview
-----------------------
- State representation: the cursor is a list where ``cursor[row] = column``.
    Every entry except the last is a confirmed placement; the last entry is
    the candidate under consideration for the deepest row.
- Terminal marker: ``[start_column + 1]``. After row 0 is advanced past the
    starting column the whole subtree has been visited.
- Search strategy: at each step exactly one of four actions applies (emit,
    backtrack, descend, advance). See ``BoardSearch.__next__``.

Contract (public API)
---------------------
- Solutions are ``BoardSolution`` instances whose ``positions[row] = column``.
- Order: rows are filled top to bottom, columns tried left to right, so each
    engine yields its solutions in lexicographic order.
- Exhaustion is permanent: once ``StopIteration`` has been raised, further
    ``next()`` calls raise it again without touching the cursor.
- Nodes explored: ``BoardSearch.nodes`` counts eligibility tests performed,
    a hardware-independent proxy of search effort.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .utils import render_board


@dataclass(frozen=True)
class BoardSolution:
    """Immutable placement of N non-attacking queens (``positions[row] = column``)."""

    positions: Tuple[int, ...]

    @property
    def n(self) -> int:
        return len(self.positions)

    def render(self, queen: str = "Q", empty: str = "_") -> str:
        """Return the board as text, one line per row."""
        return render_board(self.positions, queen=queen, empty=empty)

    def print_solution(self, queen: str = "Q", empty: str = "_") -> None:
        print(self.render(queen=queen, empty=empty))


def is_position_eligible(candidate: int, cursor: Sequence[int]) -> bool:
    """Return True if ``candidate`` is safe for the deepest row of ``cursor``.

    Parameters
    ----------
    candidate : int
        Column proposed for the last row of ``cursor``.
    cursor : Sequence[int]
        Partial placement; entries ``cursor[:-1]`` are the queens already
        placed above the candidate row.

    Returns
    -------
    bool
        False when a placed queen shares the candidate's column, or when its
        column differs from the candidate by exactly its row distance
        (shared diagonal in either direction).
    """
    row = len(cursor) - 1
    for placed_row in range(row):
        queen = cursor[placed_row]
        if queen == candidate or abs(queen - candidate) == row - placed_row:
            return False
    return True


class BoardSearch:
    """Resumable depth-first search over the subtree of one starting column.

    Parameters
    ----------
    size : int
        Board dimension N (N >= 1).
    start_column : int
        Column of the row-0 queen, in ``[0, size)``.

    Raises
    ------
    ValueError
        If ``start_column`` is outside ``[0, size)``; such an engine has no
        subtree to explore.
    """

    def __init__(self, size: int, start_column: int) -> None:
        if not 0 <= start_column < size:
            raise ValueError(
                f"Starting column {start_column} is outside the board for N={size}"
            )
        self.size = size
        self.start_column = start_column
        self.nodes = 0
        self._cursor: List[int] = [start_column]
        self._end: List[int] = [start_column + 1]
        self._exhausted = False

    @property
    def cursor(self) -> Tuple[int, ...]:
        """Snapshot of the current partial placement."""
        return tuple(self._cursor)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> Iterator[BoardSolution]:
        return self

    def __next__(self) -> BoardSolution:
        """Advance the search to the next solution.

        Step rules, applied until the cursor reaches the terminal marker:

        - depth N + 1: the first N rows form a solution; emit it and
          backtrack so the following call resumes the search.
        - column >= N: every column of this row was tried; backtrack.
        - eligible column: descend to the next row, starting at column 0.
        - otherwise: try the next column on the same row.
        """
        if self._exhausted:
            raise StopIteration

        size = self.size
        cursor = self._cursor
        while cursor and cursor != self._end:
            column = cursor[-1]
            if len(cursor) == size + 1:
                solution = BoardSolution(tuple(cursor[:size]))
                self._backtrack()
                return solution
            if column >= size:
                self._backtrack()
                continue
            self.nodes += 1
            if is_position_eligible(column, cursor):
                cursor.append(0)
            else:
                cursor[-1] += 1

        self._exhausted = True
        raise StopIteration

    def _backtrack(self) -> None:
        # Drop the deepest row and move its parent to the next column.
        self._cursor.pop()
        if self._cursor:
            self._cursor[-1] += 1

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else f"cursor={self._cursor}"
        return f"BoardSearch(size={self.size}, start_column={self.start_column}, {state})"


def first_solution(size: int) -> Optional[BoardSolution]:
    """Return the first solution found scanning starting columns left to right.

    Stops pulling as soon as one solution is available, so the remaining
    subtrees are never explored. Returns None when N has no solution.
    """
    for start_column in range(size):
        for solution in BoardSearch(size, start_column):
            return solution
    return None
