"""Weighted undirected graphs: shortest paths and minimum spanning trees."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

Edge = tuple[int, int, int]


@dataclass(frozen=True)
class SpanningTree:
    """Edges of a spanning tree as ``(parent, node, weight)`` in the order added."""

    edges: tuple[Edge, ...]

    @property
    def total_weight(self) -> int:
        return sum(weight for _, _, weight in self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)


class WeightedGraph:
    """Undirected weighted graph on the vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must be non-negative")
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adj):
            raise ValueError(f"vertex {node} is outside 0..{len(self._adj) - 1}")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v`` in both directions with ``weight``."""
        self._check(u)
        self._check(v)
        self._adj[u].append((v, weight))
        self._adj[v].append((u, weight))

    def describe(self) -> str:
        """The adjacency list, one ``Node i: (n, wt=w) ...`` line per vertex."""
        lines = []
        for node, neighbours in enumerate(self._adj):
            entries = " ".join(f"({neigh}, wt={wt})" for neigh, wt in neighbours)
            lines.append(f"Node {node}: {entries}".rstrip())
        return "\n".join(lines)

    def dijkstra(self, source: int) -> list[int | None]:
        """Shortest distances from ``source``; None marks an unreachable vertex."""
        self._check(source)
        if any(wt < 0 for neighbours in self._adj for _, wt in neighbours):
            raise ValueError("shortest paths need non-negative edge weights")
        dist: list[int | None] = [None] * len(self._adj)
        dist[source] = 0
        heap: list[tuple[int, int]] = [(0, source)]
        while heap:
            d, node = heapq.heappop(heap)
            if d != dist[node]:
                continue
            for neigh, wt in self._adj[node]:
                candidate = d + wt
                current = dist[neigh]
                if current is None or candidate < current:
                    dist[neigh] = candidate
                    heapq.heappush(heap, (candidate, neigh))
        return dist

    def prim(self, start: int = 0) -> SpanningTree:
        """Minimum spanning tree of the component holding ``start``."""
        self._check(start)
        in_tree = [False] * len(self._adj)
        heap: list[tuple[int, int, int]] = [(0, start, -1)]
        edges: list[Edge] = []
        while heap:
            wt, node, parent = heapq.heappop(heap)
            if in_tree[node]:
                continue
            in_tree[node] = True
            if parent != -1:
                edges.append((parent, node, wt))
            for neigh, edge_wt in self._adj[node]:
                if not in_tree[neigh]:
                    heapq.heappush(heap, (edge_wt, neigh, node))
        return SpanningTree(tuple(edges))


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


_MENU = (
    "\n--- MENU ---\n"
    "1. Add Edge\n"
    "2. Display Graph\n"
    "3. Run Dijkstra's Algorithm\n"
    "4. Run Prim's Algorithm (MST)\n"
    "5. Exit"
)


def _print_distances(source: int, dist: list[int | None]) -> None:
    print(f"\nShortest distances from node {source}:")
    for node, d in enumerate(dist):
        print(f"To node {node}: {'Not reachable' if d is None else d}")


def _print_tree(tree: SpanningTree) -> None:
    print("\nEdges in MST:")
    for parent, node, wt in tree:
        print(f"{parent} - {node} (weight={wt})")
    print(f"Total weight of MST: {tree.total_weight}")


def main(argv: list[str] | None = None) -> int:
    """Read a vertex count, then run the graph menu on standard input."""
    parser = argparse.ArgumentParser(
        description="Shortest paths and minimum spanning trees on a weighted graph."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of vertices: ", end="")
        graph = WeightedGraph(int(next(tokens)))
    except (StopIteration, ValueError) as exc:
        print(f"\nerror: {exc or 'unexpected end of input'}", file=sys.stderr)
        return 1

    while True:
        print(_MENU)
        print("Enter your choice: ", end="")
        try:
            choice = next(tokens)
            if choice == "1":
                print("Enter edge (u v wt): ", end="")
                u, v, wt = (int(next(tokens)) for _ in range(3))
                graph.add_edge(u, v, wt)
            elif choice == "2":
                print("\nAdjacency list:")
                print(graph.describe())
            elif choice == "3":
                print("Enter source vertex: ", end="")
                source = int(next(tokens))
                _print_distances(source, graph.dijkstra(source))
            elif choice == "4":
                print("Enter source vertex: ", end="")
                _print_tree(graph.prim(int(next(tokens))))
            elif choice == "5":
                print("Exiting...")
                return 0
            else:
                print("Invalid choice!")
        except StopIteration:
            print()
            return 0
        except ValueError as exc:
            print(f"error: {exc}")


if __name__ == "__main__":
    sys.exit(main())