"""Directed graphs in adjacency-list form with a simple-path search."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable

MAX_VERTICES = 20

SAMPLE_VERTEX_COUNT = 9
SAMPLE_EDGES = ((0, 1), (1, 2), (3, 2), (4, 3), (2, 5), (5, 6), (6, 7), (8, 2))
SAMPLE_QUERIES = ((0, 1, 1), (0, 1, 2), (2, 7, 3), (4, 0, 4))


class Graph:
    """A directed graph on vertices 0 .. vertex_count - 1."""

    def __init__(self, vertex_count: int, edges: Iterable[tuple[int, int]]) -> None:
        if not 0 <= vertex_count <= MAX_VERTICES:
            raise ValueError(
                f"vertex count must be between 0 and {MAX_VERTICES}, got {vertex_count}"
            )
        self.vertex_count = vertex_count
        self._adjacency: list[deque[int]] = [deque() for _ in range(vertex_count)]
        for source, target in edges:
            self._check(source)
            self._check(target)
            # Each new arc goes in front of the ones already there.
            self._adjacency[source].appendleft(target)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(f"vertex {vertex} is not in the graph")

    def neighbours(self, vertex: int) -> list[int]:
        """Targets of the arcs leaving vertex, most recently added first."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def has_path(self, start: int, end: int, length: int) -> bool:
        """Whether a simple path of exactly `length` arcs leads from start to end."""
        self._check(start)
        self._check(end)
        visited: set[int] = set()

        def search(vertex: int, remaining: int) -> bool:
            if vertex == end and remaining == 0:
                return True
            if remaining <= 0:
                return False
            visited.add(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited and search(neighbour, remaining - 1):
                    return True
            visited.discard(vertex)
            return False

        return search(start, length)


def main(argv: list[str] | None = None) -> int:
    """Run the sample path queries and print whether each path exists."""
    parser = argparse.ArgumentParser(
        prog="graph", description="Look for simple paths of a given length."
    )
    parser.parse_args(argv)

    graph = Graph(SAMPLE_VERTEX_COUNT, SAMPLE_EDGES)
    for start, end, length in SAMPLE_QUERIES:
        verdict = "exists" if graph.has_path(start, end, length) else "does not exist"
        print(f"{start} -> {end}: a path of length {length} {verdict}")
    return 0


if __name__ == "__main__":
    sys.exit(main())