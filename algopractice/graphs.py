"""Adjacency-list graphs with breadth-first, depth-first and topological orders."""

from __future__ import annotations

from collections.abc import Sequence

from algopractice.fifo import Queue

DEMO_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1),
    (0, 4),
    (1, 2),
    (1, 3),
    (1, 4),
    (2, 3),
    (3, 4),
)
DEMO_WEIGHTS: tuple[int, ...] = (10, 20, 30, 40, 50, 60, 70)
DEMO_DAG: tuple[tuple[int, ...], ...] = (
    (0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0),
    (0, 0, 0, 1, 0, 0),
    (0, 1, 0, 0, 0, 0),
    (1, 1, 0, 0, 0, 0),
    (1, 0, 1, 0, 0, 0),
)


class Graph:
    """A graph on vertices ``0 .. vertex_count - 1`` stored as adjacency lists.

    Neighbours are kept in insertion order. In an undirected graph every edge
    is recorded at both of its ends.
    """

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self.vertex_count = vertex_count
        self.directed = directed
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(
                f"vertex {vertex} outside 0..{self.vertex_count - 1}; cannot insert"
            )

    def add_edge(self, u: int, v: int, weight: int = 0) -> None:
        """Add an edge from ``u`` to ``v`` (and back, if undirected)."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append((v, weight))
        if not self.directed:
            self._adjacency[v].append((u, weight))

    def neighbours(self, u: int) -> list[tuple[int, int]]:
        """Return ``(vertex, weight)`` pairs adjacent to ``u`` in insertion order."""
        self._check(u)
        return list(self._adjacency[u])

    def bfs(self, start: int = 0) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = [False] * self.vertex_count
        visited[start] = True
        pending = Queue([start])
        order = []
        while not pending.is_empty():
            vertex = pending.dequeue()
            order.append(vertex)
            for neighbour, _ in self._adjacency[vertex]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    pending.enqueue(neighbour)
        return order

    def dfs(self) -> list[int]:
        """Return every vertex in depth-first order, trying roots in ascending order."""
        visited = [False] * self.vertex_count
        order = []
        for root in range(self.vertex_count):
            if visited[root]:
                continue
            visited[root] = True
            order.append(root)
            stack = [iter(self._adjacency[root])]
            while stack:
                for neighbour, _ in stack[-1]:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        order.append(neighbour)
                        stack.append(iter(self._adjacency[neighbour]))
                        break
                else:
                    stack.pop()
        return order

    def adjacency_lines(self) -> list[str]:
        """Return a header line and a neighbour line for each vertex."""
        lines = []
        for vertex, edges in enumerate(self._adjacency):
            lines.append(f"Adjacency list of vertex {vertex}")
            lines.append("".join(f"{neighbour} -> " for neighbour, _ in edges))
        return lines


def topological_sort(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return a topological order of the directed graph given as an adjacency matrix.

    A non-zero ``matrix[u][v]`` means an edge from ``u`` to ``v``.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    visited = [False] * size
    finished: list[int] = []
    for root in range(size):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(range(size)))]
        while stack:
            node, targets = stack[-1]
            for target in targets:
                if matrix[node][target] and not visited[target]:
                    visited[target] = True
                    stack.append((target, iter(range(size))))
                    break
            else:
                stack.pop()
                finished.append(node)
    return finished[::-1]


def _joined(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Print traversals of the demonstration graphs."""
    directed = Graph(5, directed=True)
    for u, v in DEMO_EDGES:
        directed.add_edge(u, v)
    print("BFS: " + _joined(directed.bfs(0)))
    for line in directed.adjacency_lines():
        print(line)

    undirected = Graph(5)
    for u, v in DEMO_EDGES:
        undirected.add_edge(u, v)
    print("DFS: " + _joined(undirected.dfs()))
    print("BFS: " + _joined(undirected.bfs(0)))

    weighted = Graph(5)
    for (u, v), weight in zip(DEMO_EDGES, DEMO_WEIGHTS):
        weighted.add_edge(u, v, weight)
    print("Weighted DFS: " + _joined(weighted.dfs()))

    print("Topological order: " + _joined(topological_sort(DEMO_DAG)))
    return 0