"""Spawning and bookkeeping for a population of agents."""

from typing import Iterator, List, Optional

import numpy as np

from .agent import Agent, choose_disposition
from .constants import AGENT_DENSITY
from .grid import Grid


class Population:
    """Ordered collection of agents living on one grid.

    Agents keep their creation order; ids are assigned sequentially from 0.
    """

    def __init__(self) -> None:
        self._agents: List[Agent] = []

    @property
    def agents(self) -> List[Agent]:
        """Agents in creation order."""
        return list(self._agents)

    @property
    def settlers(self) -> int:
        """Number of agents currently disposed to settle."""
        return sum(1 for agent in self._agents if agent.settle)

    @property
    def explorers(self) -> int:
        """Number of agents currently disposed to roam."""
        return len(self._agents) - self.settlers

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(self._agents)

    def spawn(self, grid: Grid, rng: np.random.Generator, count: Optional[int] = None) -> List[Agent]:
        """Create agents at random coordinates and claim their spawn cells.

        Each new agent fills the cell it spawns on once.

        Args:
            grid: Grid the agents live on
            rng: Random generator for positions and dispositions
            count: Number of agents to create (default: one per
                AGENT_DENSITY cells)

        Returns:
            The newly created agents

        Raises:
            ValueError: If count is negative
        """
        if count is None:
            count = (grid.n_cols * grid.n_rows) // AGENT_DENSITY
        if count < 0:
            raise ValueError(f"Agent count must be non-negative, got {count}")

        spawned = []
        for _ in range(count):
            row = int(rng.integers(0, grid.n_rows))
            col = int(rng.integers(0, grid.n_cols))
            settle, direction, intensity = choose_disposition(rng)

            agent = Agent(
                id=len(self._agents),
                row=row,
                col=col,
                settle=settle,
                direction=direction,
                intensity=intensity,
            )
            # settle is re-rolled by the population after construction
            agent.settle = bool(rng.random() < 0.5)

            grid.fill(row, col, agent)

            self._agents.append(agent)
            spawned.append(agent)

        return spawned

    def clear(self) -> None:
        """Forget every agent."""
        self._agents.clear()
