"""
Exceptions raised by the graph model, the wall mutator and the path engine.

A missing path is never an exception: path queries return None instead.
"""


class GraphError(Exception):
    """Base class for all graph errors."""


class MalformedTopologyError(GraphError, ValueError):
    """Graph structure violates the vertex/edge invariants."""


class UnknownVertexError(GraphError, KeyError):
    """Vertex (or coordinate) is not part of the graph."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class UnconnectedVerticesError(GraphError, AssertionError):
    """
    Weight requested for two vertices that share no direct edge.

    Neighbor discovery and weight lookup disagree, so any distance
    computed from here on would be wrong. Treat as fatal.
    """
