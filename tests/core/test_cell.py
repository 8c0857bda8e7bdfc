"""Tests for the Cell class."""

import numpy as np

from settlers.core.agent import Agent
from settlers.core.cell import EMPTY, Cell, Empty, Filled, Rect
from settlers.core.constants import MAX_TIMES


def make_cell(row=0, col=0):
    return Cell(row, col, Rect(0.0, 0.0, 16.0, 16.0))


def make_lookup(n_rows, n_cols):
    return np.arange(n_rows * n_cols, dtype=np.int64).reshape(n_rows, n_cols)


class TestCellFill:
    """Test cases for the fill state machine."""

    def test_initial_state(self):
        """Test a new cell is empty."""
        cell = make_cell(3, 4)
        assert cell.row == 3
        assert cell.col == 4
        assert cell.state == EMPTY
        assert isinstance(cell.state, Empty)
        assert cell.is_empty
        assert not cell.is_filled
        assert not cell.is_blocked
        assert cell.occupant is None
        assert cell.times == 0

    def test_fill_empty(self):
        """Test filling an empty cell claims it once."""
        cell = make_cell()
        cell.fill(Agent(id=7, row=0, col=0))

        assert cell.state == Filled(by=7, times=1, blocked=False)
        assert cell.occupant == 7
        assert cell.times == 1

    def test_same_agent_intensifies_up_to_max(self):
        """Test repeated fills by the same agent count up to MAX_TIMES."""
        cell = make_cell()
        agent = Agent(id=1, row=0, col=0)

        for expected in range(1, MAX_TIMES + 1):
            cell.fill(agent)
            assert cell.state == Filled(by=1, times=expected, blocked=False)

        assert MAX_TIMES == 6
        assert cell.times == 6
        assert not cell.is_blocked

    def test_fill_past_max_blocks(self):
        """Test the fill after MAX_TIMES locks the cell without counting."""
        cell = make_cell()
        agent = Agent(id=1, row=0, col=0)

        for _ in range(7):
            cell.fill(agent)

        assert cell.state == Filled(by=1, times=6, blocked=True)
        assert cell.is_blocked

    def test_blocked_is_idempotent(self):
        """Test further same-agent fills leave a blocked cell unchanged."""
        cell = make_cell()
        agent = Agent(id=1, row=0, col=0)

        for _ in range(7):
            cell.fill(agent)
        blocked_state = cell.state

        for _ in range(5):
            cell.fill(agent)
            assert cell.state == blocked_state

    def test_other_agent_never_displaces(self):
        """Test a different agent cannot overwrite or intensify a cell."""
        cell = make_cell()
        first = Agent(id=1, row=0, col=0)
        second = Agent(id=2, row=0, col=0)

        cell.fill(first)
        cell.fill(first)
        cell.fill(second)

        assert cell.state == Filled(by=1, times=2, blocked=False)

    def test_other_agent_on_blocked_cell(self):
        """Test a different agent leaves a blocked cell untouched."""
        cell = make_cell()
        first = Agent(id=1, row=0, col=0)

        for _ in range(7):
            cell.fill(first)
        cell.fill(Agent(id=2, row=0, col=0))

        assert cell.state == Filled(by=1, times=6, blocked=True)

    def test_identity_is_by_id(self):
        """Test two Agent objects with the same id count as one occupant."""
        cell = make_cell()
        cell.fill(Agent(id=5, row=0, col=0, settle=True))
        cell.fill(Agent(id=5, row=9, col=9, settle=False))

        assert cell.state == Filled(by=5, times=2, blocked=False)

    def test_times_non_decreasing(self):
        """Test fill count never drops under mixed fills."""
        cell = make_cell()
        a = Agent(id=1, row=0, col=0)
        b = Agent(id=2, row=0, col=0)
        previous = 0

        for agent in [a, b, a, a, b, a, a, a, a, b, a]:
            cell.fill(agent)
            assert cell.times >= previous
            assert cell.times >= 1
            previous = cell.times


class TestCellNeighbors:
    """Test cases for neighbor lookup."""

    def test_interior_cell(self):
        """Test an interior cell has four neighbors in up, down, left, right order."""
        lookup = make_lookup(10, 10)
        cell = make_cell(5, 5)

        neighbors = cell.get_neighbors(lookup)

        assert neighbors == [
            int(lookup[4, 5]),
            int(lookup[6, 5]),
            int(lookup[5, 4]),
            int(lookup[5, 6]),
        ]

    def test_corner_cell(self):
        """Test the origin corner only has down and right neighbors."""
        lookup = make_lookup(10, 10)
        cell = make_cell(0, 0)

        neighbors = cell.get_neighbors(lookup)

        assert neighbors == [int(lookup[1, 0]), int(lookup[0, 1])]

    def test_far_corner_cell(self):
        """Test the far corner only has up and left neighbors."""
        lookup = make_lookup(4, 6)
        cell = make_cell(3, 5)

        assert cell.get_neighbors(lookup) == [int(lookup[2, 5]), int(lookup[3, 4])]

    def test_negative_coordinates_do_not_wrap(self):
        """Test row/col -1 is excluded instead of wrapping to the far edge."""
        lookup = make_lookup(3, 3)
        cell = make_cell(0, 1)

        neighbors = cell.get_neighbors(lookup)

        assert int(lookup[2, 1]) not in neighbors
        assert neighbors == [int(lookup[1, 1]), int(lookup[0, 0]), int(lookup[0, 2])]

    def test_single_cell_grid(self):
        """Test a 1x1 grid has no neighbors."""
        lookup = make_lookup(1, 1)
        assert make_cell(0, 0).get_neighbors(lookup) == []

    def test_non_square_lookup(self):
        """Test neighbor bounds follow the lookup shape on non-square grids."""
        lookup = make_lookup(2, 5)
        cell = make_cell(1, 4)

        assert cell.get_neighbors(lookup) == [int(lookup[0, 4]), int(lookup[1, 3])]
