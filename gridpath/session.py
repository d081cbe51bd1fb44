"""
Grid session: one grid, a start, a finish, and serialized access.

Wall toggles and path computations on the same session never overlap;
a toggle issued during a solve waits for the solve to finish.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from gridpath.config import DEFAULT_GRID_HEIGHT, DEFAULT_GRID_WIDTH
from gridpath.graph import Graph, UnknownVertexError, Vertex, build_grid, toggle_wall
from gridpath.pathfinding import ShortestPaths

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    """
    Outcome of a solve.

    Attributes:
        start: Source vertex
        finish: Destination vertex
        path: Vertices from start to finish, or None if unreachable
        distance: Shortest distance (inf if unreachable)
        visited_count: Vertices finalized during the run
    """

    start: Vertex
    finish: Vertex
    path: list[Vertex] | None
    distance: float
    visited_count: int

    @property
    def found(self) -> bool:
        return self.path is not None

    def coordinates(self) -> list[tuple[int, int]]:
        """Path as (x, y) pairs; empty when there is no path."""
        if self.path is None:
            return []
        return [(v.position.x, v.position.y) for v in self.path]


class GridSession:
    """Owns a grid graph and serializes wall edits against path computations."""

    def __init__(
        self,
        width: int = DEFAULT_GRID_WIDTH,
        height: int = DEFAULT_GRID_HEIGHT,
        frontier: str | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.graph: Graph = build_grid(width, height)
        self.start: Vertex | None = None
        self.finish: Vertex | None = None
        self._paths = ShortestPaths(self.graph, frontier=frontier)
        self._lock = threading.RLock()
        # select() alternates, starting with the start cell
        self._last_selected = "finish"

    def _cell(self, x: int, y: int) -> Vertex:
        vertex = self.graph.vertex_at(x, y)
        if vertex is None:
            raise UnknownVertexError(f"({x}, {y}) is outside the {self.width}x{self.height} grid")
        return vertex

    def set_start(self, x: int, y: int) -> Vertex:
        with self._lock:
            self.start = self._cell(x, y)
            return self.start

    def set_finish(self, x: int, y: int) -> Vertex:
        with self._lock:
            self.finish = self._cell(x, y)
            return self.finish

    def select(self, x: int, y: int) -> Vertex:
        """Set the start, then the finish, then the start again, and so on."""
        with self._lock:
            if self._last_selected == "finish":
                self._last_selected = "start"
                return self.set_start(x, y)
            self._last_selected = "finish"
            return self.set_finish(x, y)

    def toggle_wall(self, x: int, y: int) -> bool:
        """Flip the wall at (x, y). Returns True if the cell is open afterwards."""
        with self._lock:
            return toggle_wall(self.graph, self._cell(x, y))

    def is_wall(self, x: int, y: int) -> bool:
        return not self._cell(x, y).active

    def solve(self) -> SolveResult:
        """
        Shortest path from start to finish on the current grid.

        Raises:
            ValueError: If start or finish has not been chosen
        """
        with self._lock:
            if self.start is None or self.finish is None:
                raise ValueError("Choose a start and a finish before solving")

            self._paths.calculate_paths_from(self.start)
            path = self._paths.get_path(self.finish)
            result = SolveResult(
                start=self.start,
                finish=self.finish,
                path=path,
                distance=self._paths.distance_to(self.finish),
                visited_count=self._paths.state.visited_count,
            )

        if result.found:
            logger.info(
                f"Path {result.start} -> {result.finish}: {len(result.path) - 1} steps, "
                f"distance {result.distance:.3f}"
            )
        else:
            logger.info(f"No path from {result.start} to {result.finish}")
        return result
