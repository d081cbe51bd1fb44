"""
Single-source shortest paths with Dijkstra's algorithm.

The engine works on any Graph; it only reads adjacency lists. Two
frontier strategies are available:

- "linear": scan the whole frontier for the closest vertex (O(V^2)
  overall). The first minimum found wins ties.
- "heap": binary heap keyed by (distance, insertion order). Ties go to
  the earliest inserted entry, stale entries are skipped when popped.

Usage:
    paths = ShortestPaths(graph)
    paths.calculate_paths_from(start)
    paths.get_path(finish)
"""

from __future__ import annotations

import heapq
import logging
import math
from collections.abc import Sequence

import numpy as np

from gridpath.config import FRONTIER_STRATEGIES, FRONTIER_STRATEGY
from gridpath.graph.errors import UnconnectedVerticesError
from gridpath.graph.model import Graph, Vertex
from gridpath.pathfinding.state import RunState

logger = logging.getLogger(__name__)


class ShortestPaths:
    """
    Dijkstra engine bound to one graph.

    The graph must not change while calculate_paths_from() runs. Results
    of the latest run stay queryable until the next run replaces them.
    """

    def __init__(self, graph: Graph, frontier: str | None = None) -> None:
        """
        Args:
            graph: Graph to search
            frontier: "linear" or "heap" (default: config.FRONTIER_STRATEGY)
        """
        frontier = frontier or FRONTIER_STRATEGY
        if frontier not in FRONTIER_STRATEGIES:
            raise ValueError(
                f"Unknown frontier strategy {frontier!r}, expected one of {FRONTIER_STRATEGIES}"
            )
        self._graph = graph
        self._frontier = frontier
        self._state = RunState()
        # heap strategy only: (distance, sequence, vertex id)
        self._heap: list[tuple[float, int, str]] = []
        self._sequence = 0

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def frontier(self) -> str:
        return self._frontier

    @property
    def state(self) -> RunState:
        """State of the latest run."""
        return self._state

    # =========================================================================
    # Public API
    # =========================================================================

    def calculate_paths_from(self, source: Vertex) -> None:
        """Compute shortest distances and predecessors from source to every reachable vertex."""
        source = self._graph.require(source)
        self._state.reset(source)
        self._heap = []
        self._sequence = 0
        if self._frontier == "heap":
            # reset() already put the source on the frontier list
            heapq.heappush(self._heap, (0.0, self._sequence, source.id))
            self._sequence += 1

        while True:
            vid = self._pop_closest()
            if vid is None:
                break
            self._state.finalize(vid)
            self._relax_from(self._graph.vertices[vid])

        logger.info(
            f"Shortest paths from {source}: {self._state.visited_count} vertices reached "
            f"({self._frontier} frontier)"
        )

    def get_path(self, destination: Vertex) -> list[Vertex] | None:
        """
        Shortest path from the last run's source to destination.

        Returns:
            Vertices from source to destination (just [source] when
            destination is the source), or None if destination was not reached
        """
        source = self._state.source
        if source is None:
            return None
        if destination == source:
            return [source]
        if destination.id not in self._state.predecessors:
            return None

        step = self._graph.vertices.get(destination.id, destination)
        path = [step]
        while step.id in self._state.predecessors:
            step = self._state.predecessors[step.id]
            path.append(step)
        path.reverse()
        return path

    def distance_to(self, destination: Vertex) -> float:
        """Shortest distance from the last run's source, infinity if unreached."""
        return self._state.distance_to(destination.id)

    def distance_between(self, source: Vertex, destination: Vertex) -> float:
        """
        Weight of the direct edge source -> destination.

        Raises:
            UnconnectedVerticesError: If no such edge exists
        """
        edge = self._graph.get_edge(source, destination)
        if edge is None:
            raise UnconnectedVerticesError(
                f"distance_between called with unconnected vertices {source} and {destination}"
            )
        return edge.weight

    def reachable(self) -> list[Vertex]:
        """Vertices finalized by the last run, in finalization order."""
        return [self._graph.vertices[vid] for vid in self._state.settled]

    def distance_array(self, shape: tuple[int, int] | None = None) -> np.ndarray:
        """
        Distances of the last run laid out on the grid.

        Args:
            shape: (height, width); inferred from the largest coordinates if omitted

        Returns:
            Float array indexed [y, x], infinity where unreached
        """
        if shape is None:
            height = max((v.position.y for v in self._graph), default=-1) + 1
            width = max((v.position.x for v in self._graph), default=-1) + 1
            shape = (height, width)

        grid = np.full(shape, np.inf, dtype=np.float64)
        for vid, distance in self._state.distances.items():
            position = self._graph.vertices[vid].position
            if 0 <= position.y < shape[0] and 0 <= position.x < shape[1]:
                grid[position.y, position.x] = distance
        return grid

    # =========================================================================
    # Internals
    # =========================================================================

    def _neighbors_of(self, vertex: Vertex) -> list[Vertex]:
        """Destinations of vertex's outgoing edges that are not finalized yet."""
        return [
            edge.destination
            for edge in self._graph.outgoing(vertex)
            if edge.source == vertex and edge.destination.id not in self._state.visited
        ]

    def _relax_from(self, vertex: Vertex) -> None:
        base = self._state.distance_to(vertex.id)
        for neighbor in self._neighbors_of(vertex):
            candidate = base + self.distance_between(vertex, neighbor)
            if candidate < self._state.distance_to(neighbor.id):
                self._state.distances[neighbor.id] = candidate
                self._state.predecessors[neighbor.id] = vertex
                if self._frontier == "heap":
                    self._push(neighbor.id, candidate)
                else:
                    self._state.unvisited.append(neighbor.id)

    def _pop_closest(self) -> str | None:
        if self._frontier == "heap":
            return self._pop_heap()
        return self._pop_linear()

    def _pop_linear(self) -> str | None:
        unvisited = self._state.unvisited
        while unvisited:
            best_index = 0
            best_distance = self._state.distance_to(unvisited[0])
            for index in range(1, len(unvisited)):
                distance = self._state.distance_to(unvisited[index])
                if distance < best_distance:
                    best_index, best_distance = index, distance
            vid = unvisited.pop(best_index)
            if vid not in self._state.visited:
                return vid
        return None

    def _push(self, vid: str, distance: float) -> None:
        heapq.heappush(self._heap, (distance, self._sequence, vid))
        self._sequence += 1
        self._state.unvisited.append(vid)

    def _pop_heap(self) -> str | None:
        while self._heap:
            distance, _, vid = heapq.heappop(self._heap)
            self._state.unvisited.remove(vid)
            if vid in self._state.visited or distance > self._state.distance_to(vid):
                continue
            return vid
        return None


def path_weight(graph: Graph, path: Sequence[Vertex]) -> float:
    """
    Sum of edge weights along consecutive vertices of path.

    Raises:
        UnconnectedVerticesError: If two consecutive vertices share no edge
    """
    total = 0.0
    for source, destination in zip(path, path[1:]):
        edge = graph.get_edge(source, destination)
        if edge is None:
            raise UnconnectedVerticesError(f"No edge from {source} to {destination}")
        total += edge.weight
    return total


def shortest_path(
    graph: Graph,
    source: Vertex,
    destination: Vertex,
    frontier: str | None = None,
) -> tuple[float, list[Vertex] | None]:
    """
    One-shot search from source to destination.

    Returns:
        (distance, path); (inf, None) if destination is unreachable
    """
    paths = ShortestPaths(graph, frontier=frontier)
    paths.calculate_paths_from(source)
    path = paths.get_path(destination)
    if path is None:
        return math.inf, None
    return paths.distance_to(destination), path
