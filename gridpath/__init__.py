"""
Grid shortest-path engine.

Builds 8-connected weighted grid graphs, toggles walls on them, and
computes single-source shortest paths with Dijkstra's algorithm.
"""

__version__ = "0.1.0"
