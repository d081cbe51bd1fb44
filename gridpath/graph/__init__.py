"""
Graph module.

Provides the grid graph model and its mutators:
- Vertex, Edge, Graph: Data model
- build_grid: 8-connected grid builder
- activate / deactivate / toggle_wall: Wall placement
"""

from gridpath.graph.errors import (
    GraphError,
    MalformedTopologyError,
    UnconnectedVerticesError,
    UnknownVertexError,
)
from gridpath.graph.model import Edge, Graph, Position, Vertex, edge_id, vertex_id
from gridpath.graph.topology import build_grid, grid_neighbors
from gridpath.graph.walls import activate, deactivate, toggle_wall

__all__ = [
    "Edge",
    "Graph",
    "Position",
    "Vertex",
    "edge_id",
    "vertex_id",
    "build_grid",
    "grid_neighbors",
    "activate",
    "deactivate",
    "toggle_wall",
    "GraphError",
    "MalformedTopologyError",
    "UnconnectedVerticesError",
    "UnknownVertexError",
]
