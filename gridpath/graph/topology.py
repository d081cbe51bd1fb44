"""
Grid topology: 8-direction neighbor discovery and the grid graph builder.

Neighbors are found purely by grid bounds. Vertex activity is never
consulted here; the wall mutator applies it when it edits edges.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from gridpath.config import CARDINAL_WEIGHT, DIAGONAL_WEIGHT
from gridpath.graph.errors import MalformedTopologyError
from gridpath.graph.model import Edge, Graph, Vertex, vertex_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Direction:
    """Offset to a neighboring cell."""

    name: str
    dx: int
    dy: int

    @property
    def diagonal(self) -> bool:
        return self.dx != 0 and self.dy != 0


# Clockwise from up; y grows downward
DIRECTIONS: tuple[Direction, ...] = (
    Direction("up", 0, -1),
    Direction("up_right", 1, -1),
    Direction("right", 1, 0),
    Direction("down_right", 1, 1),
    Direction("down", 0, 1),
    Direction("down_left", -1, 1),
    Direction("left", -1, 0),
    Direction("up_left", -1, -1),
)


@dataclass(frozen=True)
class GridNeighbor:
    """A vertex adjacent to another on the grid."""

    vertex: Vertex
    diagonal: bool

    @property
    def weight(self) -> float:
        return edge_weight(self.diagonal)


def edge_weight(diagonal: bool) -> float:
    """Weight of a single grid step."""
    return DIAGONAL_WEIGHT if diagonal else CARDINAL_WEIGHT


def grid_neighbors(graph: Graph, vertex: Vertex) -> list[GridNeighbor]:
    """
    Return the vertices around vertex, in DIRECTIONS order.

    Only grid bounds matter: walls are included.
    """
    x, y = vertex.position.x, vertex.position.y
    neighbors = []
    for direction in DIRECTIONS:
        cell = graph.vertex_at(x + direction.dx, y + direction.dy)
        if cell is not None:
            neighbors.append(GridNeighbor(cell, direction.diagonal))
    return neighbors


def _check_dimension(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise MalformedTopologyError(f"Grid {name} must be a positive integer, got {value!r}")


def create_vertices(width: int, height: int) -> dict[str, Vertex]:
    """Create one active vertex per cell of a width x height grid, row by row."""
    _check_dimension("width", width)
    _check_dimension("height", height)

    vertices: dict[str, Vertex] = {}
    for row in range(height):
        for column in range(width):
            vertex = Vertex.at(column, row)
            vertices[vertex.id] = vertex
    return vertices


def create_edges(vertices: dict[str, Vertex]) -> dict[str, list[Edge]]:
    """Connect every vertex to each in-bounds neighbor, one directed edge per pair."""
    edges: dict[str, list[Edge]] = {}
    for vertex in vertices.values():
        x, y = vertex.position.x, vertex.position.y
        for direction in DIRECTIONS:
            neighbor = vertices.get(vertex_id(x + direction.dx, y + direction.dy))
            if neighbor is None:
                continue
            edge = Edge.between(vertex, neighbor, edge_weight(direction.diagonal))
            edges.setdefault(vertex.id, []).append(edge)
    return edges


def build_grid(
    width: int,
    height: int,
    walls: Iterable[tuple[int, int]] = (),
) -> Graph:
    """
    Build the 8-connected grid graph.

    Args:
        width: Number of columns
        height: Number of rows
        walls: Optional (x, y) cells to deactivate once the graph exists

    Returns:
        Graph with cardinal edges of weight 1 and diagonal edges of weight sqrt(2)
    """
    # Imported here: walls depends on this module for neighbor discovery
    from gridpath.graph.walls import deactivate

    vertices = create_vertices(width, height)
    graph = Graph(vertices, create_edges(vertices))
    logger.debug(f"Built {width}x{height} grid: {graph!r}")

    for x, y in walls:
        vertex = graph.vertex_at(x, y)
        if vertex is None:
            raise MalformedTopologyError(f"Wall ({x}, {y}) is outside the {width}x{height} grid")
        deactivate(graph, vertex)

    return graph
