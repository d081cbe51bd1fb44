"""
Vertex, edge and graph types.

Vertex identity is a pure function of its grid position, edges are
directed and weighted, and the graph keeps outgoing edges in per-vertex
adjacency lists.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from gridpath.graph.errors import MalformedTopologyError, UnknownVertexError


def vertex_id(x: int, y: int) -> str:
    """Identity of the vertex at grid position (x, y)."""
    return f"Vertex_{x}x{y}"


def edge_id(source: Vertex, destination: Vertex) -> str:
    """Identity of the directed edge source -> destination."""
    return f"Edge_{source.id}to{destination.id}"


@dataclass(frozen=True)
class Position:
    """Integer grid coordinates. x grows to the right, y grows down."""

    x: int
    y: int


@dataclass(eq=False)
class Vertex:
    """
    A graph node.

    Attributes:
        id: Identity derived from position (see vertex_id)
        position: Grid coordinates
        active: False when the vertex is a wall
    """

    id: str
    position: Position
    active: bool = True

    @classmethod
    def at(cls, x: int, y: int, active: bool = True) -> Vertex:
        """Create the vertex for grid position (x, y)."""
        return cls(vertex_id(x, y), Position(x, y), active)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.id


@dataclass(frozen=True)
class Edge:
    """
    A directed, weighted connection.

    Attributes:
        id: Identity derived from the endpoints (see edge_id)
        source: Vertex the edge leaves
        destination: Vertex the edge enters
        weight: Non-negative traversal cost
    """

    id: str
    source: Vertex
    destination: Vertex
    weight: float

    def __post_init__(self) -> None:
        if self.weight < 0:
            raise MalformedTopologyError(f"Edge {self.id} has negative weight {self.weight}")
        if self.source == self.destination:
            raise MalformedTopologyError(f"Edge {self.id} loops on {self.source}")

    @classmethod
    def between(cls, source: Vertex, destination: Vertex, weight: float) -> Edge:
        """Create the edge source -> destination."""
        return cls(edge_id(source, destination), source, destination, weight)

    def __str__(self) -> str:
        return f"{self.source} to {self.destination}"


class Graph:
    """
    Vertex set plus adjacency lists.

    Attributes:
        vertices: Dict mapping vertex id to Vertex
        edges: Dict mapping source vertex id to its ordered outgoing edges

    The structure is validated on construction. Edge membership should
    afterwards change only through gridpath.graph.walls.
    """

    def __init__(
        self,
        vertices: dict[str, Vertex],
        edges: dict[str, list[Edge]] | None = None,
    ) -> None:
        self.vertices = vertices
        self.edges = edges if edges is not None else {}
        self._by_position: dict[Position, Vertex] = {}
        self.validate()

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self) -> None:
        """Check every structural invariant, raising MalformedTopologyError."""
        self._by_position = {}
        for key, vertex in self.vertices.items():
            if key != vertex.id:
                raise MalformedTopologyError(f"Vertex {vertex.id} stored under key {key!r}")
            if vertex.id != vertex_id(vertex.position.x, vertex.position.y):
                raise MalformedTopologyError(
                    f"Vertex {vertex.id} does not match position {vertex.position}"
                )
            if vertex.position in self._by_position:
                raise MalformedTopologyError(f"Duplicate vertex at {vertex.position}")
            self._by_position[vertex.position] = vertex

        for key, edge_list in self.edges.items():
            if key not in self.vertices:
                raise MalformedTopologyError(f"Adjacency list for unknown vertex {key!r}")
            seen: set[str] = set()
            for edge in edge_list:
                if edge.source.id != key:
                    raise MalformedTopologyError(f"Edge {edge.id} stored under {key!r}")
                self._check_endpoints(edge)
                if edge.destination.id in seen:
                    raise MalformedTopologyError(f"Duplicate edge {edge.id}")
                seen.add(edge.destination.id)

    def _check_endpoints(self, edge: Edge) -> None:
        for end in (edge.source, edge.destination):
            if self.vertices.get(end.id) is not end:
                raise MalformedTopologyError(f"Edge {edge.id} references unknown vertex {end.id}")

    # =========================================================================
    # Vertex Accessors
    # =========================================================================

    def vertex(self, vid: str) -> Vertex:
        """Get vertex by id."""
        try:
            return self.vertices[vid]
        except KeyError:
            raise UnknownVertexError(f"Unknown vertex {vid!r}") from None

    def vertex_at(self, x: int, y: int) -> Vertex | None:
        """Get the vertex at (x, y), or None outside the graph."""
        return self._by_position.get(Position(x, y))

    def require(self, vertex: Vertex) -> Vertex:
        """Return the graph's own instance of vertex, or raise UnknownVertexError."""
        return self.vertex(vertex.id)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Vertex):
            return item.id in self.vertices
        return item in self.vertices

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices.values())

    # =========================================================================
    # Edge Accessors
    # =========================================================================

    def outgoing(self, vertex: Vertex) -> list[Edge]:
        """Outgoing edges of vertex, in insertion order."""
        return self.edges.get(vertex.id, [])

    def get_edge(self, source: Vertex, destination: Vertex) -> Edge | None:
        """Get the edge source -> destination if it exists."""
        for edge in self.edges.get(source.id, []):
            if edge.destination == destination:
                return edge
        return None

    def has_edge(self, source: Vertex, destination: Vertex) -> bool:
        return self.get_edge(source, destination) is not None

    def edge_count(self) -> int:
        """Total number of directed edges."""
        return sum(len(edge_list) for edge_list in self.edges.values())

    # =========================================================================
    # Edge Mutation
    # =========================================================================

    def add_edge(self, edge: Edge) -> None:
        """Append edge to its source's list. Duplicates are rejected."""
        self._check_endpoints(edge)
        if self.has_edge(edge.source, edge.destination):
            raise MalformedTopologyError(f"Duplicate edge {edge.id}")
        self.edges.setdefault(edge.source.id, []).append(edge)

    def remove_edges_to(self, source: Vertex, destination: Vertex) -> int:
        """Remove every edge source -> destination. Returns how many were removed."""
        edge_list = self.edges.get(source.id)
        if not edge_list:
            return 0
        kept = [edge for edge in edge_list if edge.destination != destination]
        self.edges[source.id] = kept
        return len(edge_list) - len(kept)

    def clear_outgoing(self, vertex: Vertex) -> int:
        """Remove all outgoing edges of vertex. Returns how many were removed."""
        removed = len(self.edges.get(vertex.id, []))
        if vertex.id in self.edges:
            self.edges[vertex.id] = []
        return removed

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self.vertices)}, edges={self.edge_count()})"
