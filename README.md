# ailabkit

A set of small artificial-intelligence lab exercises. Each is available as a
Python API and as an interactive console program.

## Installation

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## What is inside

| Module | Contents |
| --- | --- |
| `ailabkit.graph` | `Graph`: an undirected graph with `dfs_levels`, `dfs_levels_iterative` and `bfs_levels`, each returning `(node, level)` pairs |
| `ailabkit.astar` | `a_star_search` on a 0/1 grid with four-way moves and a Manhattan heuristic (`heuristic_distance`); `format_path` renders the result |
| `ailabkit.queens` | `solve_n_queens` (backtracking) and `solve_n_queens_bounded` (prunes when remaining rows outnumber free columns) |
| `ailabkit.sorting` | `selection_sort`, which returns a new sorted list |
| `ailabkit.weighted` | `WeightedGraph` with `describe`, `dijkstra` and `prim`; `prim` returns a `SpanningTree` with `edges` and `total_weight` |
| `ailabkit.appraisal` | Employee appraisal advisor: `Employee`, `EmployeeRegistry`, `questions_for`, `advice_for`, `validate_rating`, `format_employee` |
| `ailabkit.library` | `recommend_book` picks a book for a project type (AI, DBMS, Web, ML) |
| `ailabkit.society` | Maintenance log: `Event`, `EventLog` and `EventLog.query_why` |

Some behaviour worth knowing:

- Vertices are numbered `0 .. n-1`; an out-of-range vertex raises `ValueError`.
- `a_star_search` returns the list of cells from start to goal, or `None`
  when the goal cannot be reached.
- `WeightedGraph.dijkstra` returns one distance per vertex, `None` for an
  unreachable one, and raises `ValueError` if any edge weight is negative.
- `WeightedGraph.prim` spans only the component that holds the start vertex.
- `Employee` accepts only the positions Manager, Developer and Customer
  Support, with exactly five ratings from 1 to 10. `EmployeeRegistry` holds
  100 employees by default and raises `OverflowError` when full.

## Using the API

    from ailabkit.graph import Graph
    from ailabkit.queens import solve_n_queens
    from ailabkit.weighted import WeightedGraph

    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(2, 3)
    print(g.bfs_levels(0))      # [(0, 0), (1, 1), (2, 1), (3, 2)]

    print(len(solve_n_queens(6)))   # 4

    w = WeightedGraph(3)
    w.add_edge(0, 1, 4)
    w.add_edge(1, 2, 1)
    w.add_edge(0, 2, 7)
    print(w.dijkstra(0))        # [0, 4, 5]
    tree = w.prim(0)
    print(tree.edges, tree.total_weight)

## Console programs

Each module also has a program that reads its input from standard input:

    ailabkit-graph       # n vertices, n-1 edges and a source; prints DFS and BFS levels
    ailabkit-astar       # grid, start and goal, then a menu to show the grid or search
    ailabkit-queens      # prints every N-Queens solution (add --bounded for the pruned solver)
    ailabkit-sort        # a count and that many integers, printed in ascending order
    ailabkit-weighted    # menu: add edges, show the graph, run Dijkstra or Prim
    ailabkit-appraisal   # menu: rate employees and read advice
    ailabkit-library     # menu: book recommendations
    ailabkit-society     # menu: record maintenance events and ask why they happened

The menu programs stop on their exit choice or at end of input.

## What it does not do

The appraisal registry and the maintenance event log live in memory only:
nothing is saved to disk, and the console programs start empty each time.