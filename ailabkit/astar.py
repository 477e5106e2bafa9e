"""A* search over a grid of free (0) and blocked (1) cells."""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
from collections.abc import Iterable, Iterator, Sequence

Cell = tuple[int, int]
Grid = Sequence[Sequence[int]]

_MOVES: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def is_valid(x: int, y: int, grid: Grid) -> bool:
    """Return True if ``(x, y)`` lies inside the grid on a free cell."""
    return 0 <= x < len(grid) and 0 <= y < len(grid[x]) and grid[x][y] == 0


def heuristic_distance(x1: int, x2: int, y1: int, y2: int) -> int:
    """Manhattan distance between ``(x1, y1)`` and ``(x2, y2)``."""
    return abs(x1 - x2) + abs(y1 - y2)


def a_star_search(grid: Grid, start: Cell, goal: Cell) -> list[Cell] | None:
    """Find a shortest 4-connected path from ``start`` to ``goal``.

    Returns the cells of the path, both ends included, or None when the goal
    cannot be reached.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    sx, sy = start
    gx, gy = goal
    if not (0 <= sx < len(grid) and 0 <= sy < len(grid[sx])):
        raise ValueError(f"start {start} lies outside the grid")

    tie = itertools.count()
    heap: list[tuple[int, int, int, Cell, Cell | None]] = [
        (heuristic_distance(sx, gx, sy, gy), next(tie), 0, (sx, sy), None)
    ]
    parents: dict[Cell, Cell | None] = {}
    while heap:
        _, _, cost, cell, parent = heapq.heappop(heap)
        if cell in parents:
            continue
        parents[cell] = parent
        if cell == (gx, gy):
            return _reconstruct(parents, cell)
        x, y = cell
        for dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if is_valid(nx, ny, grid) and (nx, ny) not in parents:
                g = cost + 1
                f = g + heuristic_distance(nx, gx, ny, gy)
                heapq.heappush(heap, (f, next(tie), g, (nx, ny), cell))
    return None


def _reconstruct(parents: dict[Cell, Cell | None], end: Cell) -> list[Cell]:
    path: list[Cell] = []
    node: Cell | None = end
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return path


def format_path(path: Iterable[Cell]) -> str:
    """Render a path as ``(x,y)(x,y)...``."""
    return "".join(f"({x},{y})" for x, y in path)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _read_ints(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


def main(argv: list[str] | None = None) -> int:
    """Read a grid, start and goal from standard input and run a menu."""
    parser = argparse.ArgumentParser(description="A* path search on a grid.")
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of rows and columns: ", end="")
        rows, cols = _read_ints(tokens, 2)
        print("Enter grid values (0 for free, 1 for obstacle):")
        grid = [_read_ints(tokens, cols) for _ in range(rows)]
        print("Enter start coordinates (x y): ", end="")
        start = tuple(_read_ints(tokens, 2))
        print("Enter goal coordinates (x y): ", end="")
        goal = tuple(_read_ints(tokens, 2))
    except (StopIteration, ValueError):
        print("\ninvalid or incomplete input", file=sys.stderr)
        return 1

    while True:
        print("\nMenu:\n1. Display Grid\n2. Run A* Search\n3. Exit")
        print("Enter choice: ", end="")
        try:
            choice = next(tokens)
        except StopIteration:
            print()
            return 0
        if choice == "1":
            print("Grid:")
            for row in grid:
                print(" ".join(str(value) for value in row))
        elif choice == "2":
            try:
                path = a_star_search(grid, start, goal)
            except ValueError as exc:
                print(f"error: {exc}")
                continue
            if path is None:
                print("No path found.")
            else:
                print(f"\nReached goal with cost: {len(path) - 1}")
                print(f"Path is: {format_path(path)}")
        elif choice == "3":
            print("Exiting...")
            return 0
        else:
            print("Invalid choice!")


if __name__ == "__main__":
    sys.exit(main())