"""
Pathfinding module.

Provides shortest paths over a Graph:
- ShortestPaths: Dijkstra engine (calculate_paths_from / get_path)
- RunState: Per-run distances and predecessors
- shortest_path: One-shot search helper
"""

from gridpath.pathfinding.dijkstra import ShortestPaths, path_weight, shortest_path
from gridpath.pathfinding.state import RunState

__all__ = ["ShortestPaths", "RunState", "path_weight", "shortest_path"]
