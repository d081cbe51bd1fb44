"""
Wall toggling.

Deactivating a vertex turns it into a wall: every edge into it and every
edge out of it is removed. Reactivating it reconnects it, in both
directions, to each active neighbor with the usual grid weights.

These functions mutate the graph in place and must not run while a
shortest-path computation over the same graph is in progress.
"""

from __future__ import annotations

import logging

from gridpath.graph.model import Edge, Graph, Vertex
from gridpath.graph.topology import grid_neighbors

logger = logging.getLogger(__name__)


def deactivate(graph: Graph, vertex: Vertex) -> None:
    """Place a wall on vertex."""
    vertex = graph.require(vertex)
    if not vertex.active:
        logger.warning(f"{vertex} is already a wall")
        return

    vertex.active = False
    removed = 0
    for neighbor in grid_neighbors(graph, vertex):
        removed += graph.remove_edges_to(neighbor.vertex, vertex)
    removed += graph.clear_outgoing(vertex)
    logger.debug(f"Wall placed on {vertex}, removed {removed} edges")


def activate(graph: Graph, vertex: Vertex) -> None:
    """Remove the wall from vertex."""
    vertex = graph.require(vertex)
    if vertex.active:
        logger.warning(f"{vertex} is not a wall")
        return

    vertex.active = True
    added = 0
    for neighbor in grid_neighbors(graph, vertex):
        if not neighbor.vertex.active:
            continue
        if not graph.has_edge(neighbor.vertex, vertex):
            graph.add_edge(Edge.between(neighbor.vertex, vertex, neighbor.weight))
            added += 1
        if not graph.has_edge(vertex, neighbor.vertex):
            graph.add_edge(Edge.between(vertex, neighbor.vertex, neighbor.weight))
            added += 1
    logger.debug(f"Wall removed from {vertex}, added {added} edges")


def toggle_wall(graph: Graph, vertex: Vertex) -> bool:
    """
    Flip vertex between wall and open cell.

    Returns:
        The vertex's new active flag
    """
    vertex = graph.require(vertex)
    if vertex.active:
        deactivate(graph, vertex)
    else:
        activate(graph, vertex)
    return vertex.active
