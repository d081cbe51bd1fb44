"""
Unit tests for GridSession.
"""

import math
import threading

import pytest

from gridpath.graph import UnknownVertexError
from gridpath.session import GridSession


@pytest.fixture
def session() -> GridSession:
    """Return a 5x5 session."""
    return GridSession(5, 5)


class TestSelection:
    """Test start/finish selection."""

    def test_select_alternates(self, session):
        session.select(0, 0)
        session.select(4, 4)
        assert session.start.id == "Vertex_0x0"
        assert session.finish.id == "Vertex_4x4"

        session.select(1, 1)
        assert session.start.id == "Vertex_1x1"
        assert session.finish.id == "Vertex_4x4"

    def test_out_of_bounds(self, session):
        with pytest.raises(UnknownVertexError):
            session.set_start(5, 0)

    def test_solve_requires_both_ends(self, session):
        session.set_start(0, 0)
        with pytest.raises(ValueError):
            session.solve()


class TestSolve:
    """Test solving through the session."""

    def test_open_grid(self, session):
        session.set_start(0, 0)
        session.set_finish(4, 0)
        result = session.solve()
        assert result.found
        assert result.distance == pytest.approx(4.0)
        assert result.coordinates() == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]
        assert result.visited_count == 25

    def test_walls_block(self, session):
        for y in range(5):
            session.toggle_wall(2, y)
        session.set_start(0, 0)
        session.set_finish(4, 0)
        result = session.solve()
        assert not result.found
        assert result.distance == math.inf
        assert result.coordinates() == []
        assert result.visited_count == 10

    def test_toggle_reports_state(self, session):
        assert session.toggle_wall(2, 2) is False
        assert session.is_wall(2, 2)
        assert session.toggle_wall(2, 2) is True
        assert not session.is_wall(2, 2)

    def test_same_start_and_finish(self, session):
        session.set_start(3, 3)
        session.set_finish(3, 3)
        result = session.solve()
        assert result.coordinates() == [(3, 3)]
        assert result.distance == 0.0

    def test_heap_frontier(self):
        session = GridSession(5, 5, frontier="heap")
        session.set_start(0, 0)
        session.set_finish(4, 4)
        assert session.solve().distance == pytest.approx(4 * math.sqrt(2))


class TestSerialization:
    """Wall edits must wait for an in-progress computation."""

    def test_toggle_waits_for_lock(self, session):
        done = threading.Event()

        def toggle():
            session.toggle_wall(1, 1)
            done.set()

        with session._lock:
            worker = threading.Thread(target=toggle)
            worker.start()
            assert not done.wait(timeout=0.1)
            assert not session.is_wall(1, 1)

        worker.join(timeout=5)
        assert done.is_set()
        assert session.is_wall(1, 1)
