"""
Per-run state of a shortest-path computation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from gridpath.graph.model import Vertex


@dataclass
class RunState:
    """
    Mutable state owned by one calculate_paths_from() call.

    Attributes:
        source: Vertex the run started from (None before the first run)
        visited: Ids of finalized vertices
        settled: Finalized vertex ids in the order they were finalized
        unvisited: Frontier entries; a vertex may appear more than once
        distances: Best known distance per vertex id
        predecessors: Previous vertex on the best known path, per vertex id
    """

    source: Vertex | None = None
    visited: set[str] = field(default_factory=set)
    settled: list[str] = field(default_factory=list)
    unvisited: list[str] = field(default_factory=list)
    distances: dict[str, float] = field(default_factory=dict)
    predecessors: dict[str, Vertex] = field(default_factory=dict)

    def reset(self, source: Vertex | None = None) -> None:
        """Clear everything and optionally seed a new source."""
        self.source = source
        self.visited.clear()
        self.settled.clear()
        self.unvisited.clear()
        self.distances.clear()
        self.predecessors.clear()
        if source is not None:
            self.distances[source.id] = 0.0
            self.unvisited.append(source.id)

    def distance_to(self, vid: str) -> float:
        """Best known distance, or infinity if never reached."""
        return self.distances.get(vid, math.inf)

    def finalize(self, vid: str) -> None:
        self.visited.add(vid)
        self.settled.append(vid)

    @property
    def visited_count(self) -> int:
        return len(self.settled)
