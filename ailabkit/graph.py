"""Unweighted undirected graphs with level-annotated traversals."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator

Visit = tuple[int, int]


class Graph:
    """Undirected graph on the vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must be non-negative")
        self._adj: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adj):
            raise ValueError(f"vertex {node} is outside 0..{len(self._adj) - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._adj[v].append(u)

    def dfs_levels(self, start: int) -> list[Visit]:
        """Depth-first order from ``start`` as ``(node, depth)`` pairs.

        Neighbours are explored in insertion order, each node is visited once,
        and the depth is that of the recursion that first reached the node.
        """
        self._check(start)
        visited = {start}
        order: list[Visit] = [(start, 0)]
        stack: list[tuple[Iterator[int], int]] = [(iter(self._adj[start]), 0)]
        while stack:
            neighbours, level = stack[-1]
            for neigh in neighbours:
                if neigh not in visited:
                    visited.add(neigh)
                    order.append((neigh, level + 1))
                    stack.append((iter(self._adj[neigh]), level + 1))
                    break
            else:
                stack.pop()
        return order

    def dfs_levels_iterative(self, start: int) -> list[Visit]:
        """Depth-first order from ``start`` using an explicit stack.

        A node's level is the one it carried when first popped, so on graphs
        with cycles it may differ from :meth:`dfs_levels`.
        """
        self._check(start)
        visited: set[int] = set()
        order: list[Visit] = []
        stack: list[Visit] = [(start, 0)]
        while stack:
            node, level = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            order.append((node, level))
            stack.extend(
                (neigh, level + 1)
                for neigh in reversed(self._adj[node])
                if neigh not in visited
            )
        return order

    def bfs_levels(self, start: int) -> list[Visit]:
        """Breadth-first order from ``start`` as ``(node, level)`` pairs."""
        self._check(start)
        visited = {start}
        queue: deque[Visit] = deque([(start, 0)])
        order: list[Visit] = []
        while queue:
            node, level = queue.popleft()
            order.append((node, level))
            for neigh in self._adj[node]:
                if neigh not in visited:
                    visited.add(neigh)
                    queue.append((neigh, level + 1))
        return order


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _print_visits(title: str, visits: Iterable[Visit]) -> None:
    print(title)
    for node, level in visits:
        print(f"Node: {node} Level: {level}")


def main(argv: list[str] | None = None) -> int:
    """Read a tree from standard input and print its DFS and BFS levels."""
    parser = argparse.ArgumentParser(
        description="Read a graph with n-1 edges and print DFS and BFS levels."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter no of vertices: ", end="")
        count = int(next(tokens))
        graph = Graph(count)
        for _ in range(count - 1):
            print("\nEnter edge (u v): ", end="")
            graph.add_edge(int(next(tokens)), int(next(tokens)))
        print("\nEnter source node: ", end="")
        source = int(next(tokens))
        print()
        _print_visits("Recursive dfs with levels", graph.dfs_levels(source))
        _print_visits("Recursive bfs traversal", graph.bfs_levels(source))
    except StopIteration:
        print("\nunexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())