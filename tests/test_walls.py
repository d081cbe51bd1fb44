"""
Unit tests for wall placement and removal.
"""

import math

import pytest

from gridpath.graph import UnknownVertexError, Vertex, activate, deactivate, toggle_wall


def incoming(graph, vertex):
    """All edges whose destination is vertex."""
    return [e for edges in graph.edges.values() for e in edges if e.destination == vertex]


class TestDeactivate:
    """Placing a wall should disconnect the cell in both directions."""

    def test_marks_inactive(self, grid_3x3):
        wall = grid_3x3.vertex_at(1, 0)
        deactivate(grid_3x3, wall)
        assert wall.active is False

    def test_removes_incoming_edges(self, grid_3x3):
        wall = grid_3x3.vertex_at(1, 0)
        deactivate(grid_3x3, wall)
        assert incoming(grid_3x3, wall) == []

    def test_removes_outgoing_edges(self, grid_3x3):
        wall = grid_3x3.vertex_at(1, 0)
        deactivate(grid_3x3, wall)
        assert grid_3x3.outgoing(wall) == []

    def test_edge_count(self, grid_3x3):
        """A side cell has 5 neighbors: 5 edges in and 5 edges out disappear."""
        deactivate(grid_3x3, grid_3x3.vertex_at(1, 0))
        assert grid_3x3.edge_count() == 40 - 10

    def test_other_edges_untouched(self, grid_3x3):
        deactivate(grid_3x3, grid_3x3.vertex_at(1, 0))
        assert grid_3x3.has_edge(grid_3x3.vertex_at(0, 0), grid_3x3.vertex_at(1, 1))
        assert grid_3x3.has_edge(grid_3x3.vertex_at(1, 1), grid_3x3.vertex_at(2, 0))

    def test_no_holes_left_in_lists(self, grid_3x3):
        deactivate(grid_3x3, grid_3x3.vertex_at(1, 1))
        for edge_list in grid_3x3.edges.values():
            assert all(edge is not None for edge in edge_list)

    def test_twice_is_noop(self, grid_3x3):
        wall = grid_3x3.vertex_at(1, 0)
        deactivate(grid_3x3, wall)
        deactivate(grid_3x3, wall)
        assert grid_3x3.edge_count() == 30

    def test_accepts_equal_vertex_copy(self, grid_3x3):
        """An equal vertex from outside the graph resolves to the graph's own."""
        deactivate(grid_3x3, Vertex.at(1, 0))
        assert not grid_3x3.vertex_at(1, 0).active

    def test_unknown_vertex(self, grid_3x3):
        with pytest.raises(UnknownVertexError):
            deactivate(grid_3x3, Vertex.at(5, 5))


class TestActivate:
    """Removing a wall should reconnect the cell to its open neighbors."""

    def test_restores_edges_with_weights(self, grid_3x3):
        wall = grid_3x3.vertex_at(1, 0)
        deactivate(grid_3x3, wall)
        activate(grid_3x3, wall)

        assert wall.active is True
        weights = {
            (e.source.position.x, e.source.position.y): e.weight for e in incoming(grid_3x3, wall)
        }
        assert weights == {
            (0, 0): 1.0,
            (2, 0): 1.0,
            (1, 1): 1.0,
            (0, 1): pytest.approx(math.sqrt(2)),
            (2, 1): pytest.approx(math.sqrt(2)),
        }
        assert len(grid_3x3.outgoing(wall)) == 5
        assert grid_3x3.edge_count() == 40

    def test_skips_wall_neighbors(self, grid_3x1):
        middle, right = grid_3x1.vertex_at(1, 0), grid_3x1.vertex_at(2, 0)
        deactivate(grid_3x1, middle)
        deactivate(grid_3x1, right)
        activate(grid_3x1, middle)

        left = grid_3x1.vertex_at(0, 0)
        assert grid_3x1.has_edge(left, middle)
        assert grid_3x1.has_edge(middle, left)
        assert not grid_3x1.has_edge(middle, right)
        assert not grid_3x1.has_edge(right, middle)

    def test_no_duplicate_edges(self, grid_3x3):
        wall = grid_3x3.vertex_at(1, 1)
        deactivate(grid_3x3, wall)
        activate(grid_3x3, wall)
        for edge_list in grid_3x3.edges.values():
            destinations = [e.destination.id for e in edge_list]
            assert len(destinations) == len(set(destinations))
        grid_3x3.validate()

    def test_active_is_noop(self, grid_3x3):
        activate(grid_3x3, grid_3x3.vertex_at(1, 1))
        assert grid_3x3.edge_count() == 40


class TestToggle:
    """Test toggle_wall."""

    def test_round_trip(self, grid_3x3):
        cell = grid_3x3.vertex_at(2, 2)
        assert toggle_wall(grid_3x3, cell) is False
        assert grid_3x3.edge_count() == 40 - 6
        assert toggle_wall(grid_3x3, cell) is True
        assert grid_3x3.edge_count() == 40
