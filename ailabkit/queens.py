"""N-queens solved by backtracking, with and without a bounding test."""

from __future__ import annotations

import argparse
import sys

Board = list[str]


def _solve(n: int, bounded: bool) -> list[Board]:
    if n < 0:
        raise ValueError("number of queens must be non-negative")
    board = [["."] * n for _ in range(n)]
    cols: set[int] = set()
    diags: set[int] = set()
    antidiags: set[int] = set()
    solutions: list[Board] = []

    def place(row: int) -> None:
        if row == n:
            solutions.append(["".join(line) for line in board])
            return
        if bounded and n - row > n - len(cols):
            return
        for col in range(n):
            diag, antidiag = row - col, row + col
            if col in cols or diag in diags or antidiag in antidiags:
                continue
            board[row][col] = "Q"
            cols.add(col)
            diags.add(diag)
            antidiags.add(antidiag)
            place(row + 1)
            board[row][col] = "."
            cols.discard(col)
            diags.discard(diag)
            antidiags.discard(antidiag)

    place(0)
    return solutions


def solve_n_queens(n: int) -> list[Board]:
    """All placements of ``n`` non-attacking queens, as rows of ``.``/``Q``."""
    return _solve(n, bounded=False)


def solve_n_queens_bounded(n: int) -> list[Board]:
    """Like :func:`solve_n_queens`, pruning when rows outnumber free columns."""
    return _solve(n, bounded=True)


def main(argv: list[str] | None = None) -> int:
    """Read the number of queens from standard input and print all boards."""
    parser = argparse.ArgumentParser(description="Print every N-queens solution.")
    parser.add_argument(
        "--bounded", action="store_true", help="use the branch-and-bound solver"
    )
    args = parser.parse_args(argv)
    print("Enter no of queens: ", end="")
    words = sys.stdin.read().split()
    try:
        n = int(words[0])
        solver = solve_n_queens_bounded if args.bounded else solve_n_queens
        solutions = solver(n)
    except (IndexError, ValueError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    for number, board in enumerate(solutions, start=1):
        print(f"\nSolution {number}:")
        print("\n".join(board))
    return 0


if __name__ == "__main__":
    sys.exit(main())