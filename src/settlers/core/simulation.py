"""Driving loop for the explorers-and-settlers automaton."""

from typing import Dict, Optional

import numpy as np

from .constants import DEFAULT_CELL_SIZE, DEFAULT_CELL_SPACING
from .grid import Grid
from .population import Population


class Simulation:
    """Owns the viewport, the grid and the agents living on it.

    Each tick issues one fill per agent, in creation order, at the agent's
    coordinates. A resize throws the grid and population away and builds
    new ones.
    """

    def __init__(
        self,
        width: float,
        height: float,
        cell_size: float = DEFAULT_CELL_SIZE,
        cell_spacing: float = DEFAULT_CELL_SPACING,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        agent_count: Optional[int] = None,
    ) -> None:
        """Initialize the simulation for a viewport.

        Args:
            width: Viewport width in screen units
            height: Viewport height in screen units
            cell_size: Side length of each cell
            cell_spacing: Gap between cells
            seed: Seed for a fresh random generator (ignored if rng given)
            rng: Random generator to draw positions and dispositions from
            agent_count: Fixed number of agents per build (default: one
                per AGENT_DENSITY cells)

        Raises:
            ValueError: If the viewport cannot hold a single cell
        """
        self.cell_size = cell_size
        self.cell_spacing = cell_spacing
        self.agent_count = agent_count
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._epoch = 0
        self.resize(width, height)

    @property
    def epoch(self) -> int:
        """Number of ticks since the last build."""
        return self._epoch

    @property
    def agents(self) -> list:
        """Agents in creation order."""
        return self.population.agents

    def resize(self, width: float, height: float) -> None:
        """Rebuild the grid and population for a new viewport size.

        Args:
            width: Viewport width in screen units
            height: Viewport height in screen units

        Raises:
            ValueError: If the viewport cannot hold a single cell
        """
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size!r}")

        n_cols = int(width // self.cell_size)
        n_rows = int(height // self.cell_size)

        grid = Grid(n_cols, n_rows, self.cell_size, self.cell_spacing)
        population = Population()
        population.spawn(grid, self.rng, self.agent_count)

        self.width = width
        self.height = height
        self.grid = grid
        self.population = population
        self._epoch = 0

    def tick(self) -> None:
        """Advance the simulation by one epoch."""
        self._epoch += 1
        for agent in self.population:
            self.grid.fill(agent.row, agent.col, agent)

    def run(self, ticks: int) -> int:
        """Run a number of ticks.

        Args:
            ticks: Number of epochs to advance

        Returns:
            Epoch after the last tick

        Raises:
            ValueError: If ticks is negative
        """
        if ticks < 0:
            raise ValueError(f"ticks must be non-negative, got {ticks}")

        for _ in range(ticks):
            self.tick()

        return self._epoch

    def get_statistics(self) -> Dict:
        """Summarize the current grid and population.

        Returns:
            Dictionary with occupancy and population statistics
        """
        occupancy = self.grid.occupancy_array()
        filled_mask = occupancy > 0
        filled = int(np.count_nonzero(filled_mask))
        total = self.grid.n_cols * self.grid.n_rows

        if filled:
            mean_times = float(occupancy[filled_mask].mean())
            max_times = int(occupancy.max())
            mean_filled_neighbors = float(self.grid.count_filled_neighbors()[filled_mask].mean())
        else:
            mean_times = 0.0
            max_times = 0
            mean_filled_neighbors = 0.0

        return {
            "epoch": self._epoch,
            "grid_size": self.grid.shape,
            "agents": len(self.population),
            "settlers": self.population.settlers,
            "explorers": self.population.explorers,
            "filled_cells": filled,
            "blocked_cells": self.grid.blocked_count,
            "occupancy_density": filled / total,
            "mean_times": mean_times,
            "max_times": max_times,
            "mean_filled_neighbors": mean_filled_neighbors,
        }
