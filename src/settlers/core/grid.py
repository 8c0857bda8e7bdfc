"""Grid data structure owning every cell of the automaton."""

from typing import List, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .agent import Agent
from .cell import Cell, Rect


class Grid:
    """Dense 2D grid of cells sized to a viewport.

    Cells live in a flat list at index ``row * n_cols + col``. The grid is
    never resized in place; a new viewport means a new Grid.
    """

    def __init__(self, n_cols: int, n_rows: int, cell_size: float, cell_spacing: float) -> None:
        """Build a grid of empty cells.

        Args:
            n_cols: Number of columns
            n_rows: Number of rows
            cell_size: Side length of each cell rectangle
            cell_spacing: Gap between neighboring cells

        Raises:
            ValueError: If a dimension is not a positive integer, the cell
                size is not positive or the spacing is negative
        """
        for name, value in (("n_cols", n_cols), ("n_rows", n_rows)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size!r}")
        if cell_spacing < 0:
            raise ValueError(f"cell_spacing must be non-negative, got {cell_spacing!r}")

        self.n_cols = int(n_cols)
        self.n_rows = int(n_rows)
        self.cell_size = float(cell_size)
        self.cell_spacing = float(cell_spacing)

        # Cells are created column by column but stored row-major so that
        # fill(row, col) lands on the cell with those coordinates.
        cells: List[Cell] = [None] * (self.n_cols * self.n_rows)  # type: ignore[list-item]
        cells_map = np.empty((self.n_rows, self.n_cols), dtype=np.int64)
        pitch = self.cell_size + self.cell_spacing
        x_offset = self.n_cols * self.cell_size / 2.0
        y_offset = self.n_rows * self.cell_size / 2.0

        for col in range(self.n_cols):
            for row in range(self.n_rows):
                x = col * pitch - x_offset
                y = row * pitch - y_offset
                index = row * self.n_cols + col
                cells[index] = Cell(row, col, Rect(x, y, self.cell_size, self.cell_size))
                cells_map[row, col] = index

        self.cells = cells
        self.cells_map = cells_map

        # 4-neighbor kernel for counting filled neighbors
        self._torch_kernel = (
            torch.tensor([[0, 1, 0], [1, 0, 1], [0, 1, 0]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (n_cols, n_rows)."""
        return (self.n_cols, self.n_rows)

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.n_rows and 0 <= col < self.n_cols):
            raise IndexError(f"Coordinates (row={row}, col={col}) out of bounds for {self.n_rows}x{self.n_cols} grid")

    def index_of(self, row: int, col: int) -> int:
        """Linear index of the cell at (row, col).

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return row * self.n_cols + col

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col).

        Raises:
            IndexError: If coordinates are out of bounds
        """
        return self.cells[self.index_of(row, col)]

    def fill(self, row: int, col: int, agent: Agent) -> None:
        """Fill the cell at (row, col) on behalf of ``agent``.

        Args:
            row: Row coordinate
            col: Column coordinate
            agent: Agent claiming the cell

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self.get_cell(row, col).fill(agent)

    def neighbors_of(self, row: int, col: int) -> List[int]:
        """Linear indices of the orthogonal neighbors of (row, col)."""
        return self.get_cell(row, col).get_neighbors(self.cells_map)

    def occupancy_array(self) -> np.ndarray:
        """Fill counts as an (n_rows, n_cols) array, 0 for empty cells."""
        times = np.fromiter((cell.times for cell in self.cells), dtype=np.int64, count=len(self.cells))
        return times.reshape(self.n_rows, self.n_cols)

    def blocked_array(self) -> np.ndarray:
        """Blocked flags as an (n_rows, n_cols) boolean array."""
        blocked = np.fromiter((cell.is_blocked for cell in self.cells), dtype=bool, count=len(self.cells))
        return blocked.reshape(self.n_rows, self.n_cols)

    @property
    def filled_count(self) -> int:
        """Number of cells held by some agent."""
        return int(np.count_nonzero(self.occupancy_array()))

    @property
    def blocked_count(self) -> int:
        """Number of blocked cells."""
        return int(np.count_nonzero(self.blocked_array()))

    def count_filled_neighbors(self) -> np.ndarray:
        """Count filled orthogonal neighbors for every cell.

        Returns:
            (n_rows, n_cols) array with counts in 0-4
        """
        mask = torch.from_numpy((self.occupancy_array() > 0).astype(np.float32))
        neighbors = F.conv2d(mask.unsqueeze(0).unsqueeze(0), self._torch_kernel, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def __str__(self) -> str:
        """Text rendering: '.' empty, '1'-'6' fill count, '#' blocked."""
        result = []
        for row in range(self.n_rows):
            line = []
            for col in range(self.n_cols):
                cell = self.cells[row * self.n_cols + col]
                if cell.is_blocked:
                    line.append("#")
                elif cell.is_filled:
                    line.append(str(cell.times))
                else:
                    line.append(".")
            result.append("".join(line))
        return "\n".join(result)
