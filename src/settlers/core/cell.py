"""Grid cell and its occupancy state machine."""

from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np

from .agent import Agent
from .constants import MAX_TIMES


@dataclass(frozen=True)
class Rect:
    """Screen-space rectangle given by its centre and size."""

    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class Empty:
    """No agent has claimed the cell."""


@dataclass(frozen=True)
class Filled:
    """Cell claimed by agent ``by``.

    Attributes:
        by: Id of the occupying agent
        times: How many times the occupant has filled the cell (>= 1)
        blocked: Whether further fills are refused
    """

    by: int
    times: int = 1
    blocked: bool = False


EMPTY = Empty()

CellState = Union[Empty, Filled]


class Cell:
    """One addressable grid position."""

    def __init__(self, row: int, col: int, rect: Rect) -> None:
        """Initialize an empty cell.

        Args:
            row: Row coordinate
            col: Column coordinate
            rect: Screen rectangle the cell occupies
        """
        self.row = row
        self.col = col
        self.rect = rect
        self.state: CellState = EMPTY

    @property
    def is_empty(self) -> bool:
        """Whether no agent holds the cell."""
        return isinstance(self.state, Empty)

    @property
    def is_filled(self) -> bool:
        """Whether some agent holds the cell."""
        return isinstance(self.state, Filled)

    @property
    def is_blocked(self) -> bool:
        """Whether the cell refuses further fills."""
        return isinstance(self.state, Filled) and self.state.blocked

    @property
    def occupant(self) -> Optional[int]:
        """Id of the occupying agent, or None."""
        if isinstance(self.state, Filled):
            return self.state.by
        return None

    @property
    def times(self) -> int:
        """Fill count of the current occupant (0 when empty)."""
        if isinstance(self.state, Filled):
            return self.state.times
        return 0

    def fill(self, agent: Agent) -> None:
        """Apply a fill request from ``agent``.

        The first agent to claim a cell keeps it. Repeated fills by the
        same agent raise ``times`` up to MAX_TIMES; the next fill after
        that (or any fill once blocked) locks the cell. Fills by any other
        agent leave the state untouched.

        Args:
            agent: Agent requesting the fill
        """
        state = self.state

        if isinstance(state, Empty):
            self.state = Filled(by=agent.id, times=1, blocked=False)
            return

        if state.by != agent.id:
            return

        if not state.blocked and state.times < MAX_TIMES:
            self.state = Filled(by=agent.id, times=state.times + 1, blocked=False)
        else:
            self.state = Filled(by=agent.id, times=state.times, blocked=True)

    def get_neighbors(self, index_lookup: np.ndarray) -> List[int]:
        """Linear indices of the orthogonal neighbors.

        Args:
            index_lookup: Array of shape (n_rows, n_cols) holding the linear
                index of every cell

        Returns:
            Indices in up, down, left, right order, omitting any that fall
            outside the grid
        """
        n_rows, n_cols = index_lookup.shape
        neighbors = []

        for row, col in (
            (self.row - 1, self.col),
            (self.row + 1, self.col),
            (self.row, self.col - 1),
            (self.row, self.col + 1),
        ):
            # numpy would wrap -1 to the last row/column, so test bounds first
            if 0 <= row < n_rows and 0 <= col < n_cols:
                neighbors.append(int(index_lookup[row, col]))

        return neighbors

    def __repr__(self) -> str:
        return f"Cell(row={self.row}, col={self.col}, state={self.state!r})"
