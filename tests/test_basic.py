"""Basic tests for the settlers package."""

import numpy as np

from settlers import Agent, Filled, Grid, Simulation
from settlers.core.population import Population


def test_grid_creation():
    """Test basic grid creation and fill."""
    grid = Grid(10, 10, 16.0, 2.0)
    assert grid.n_cols == 10
    assert grid.n_rows == 10
    assert grid.get_cell(0, 0).is_empty

    grid.fill(5, 5, Agent(id=1, row=5, col=5))
    assert grid.get_cell(5, 5).state == Filled(by=1)


def test_population_spawn():
    """Test spawning a population onto a grid."""
    grid = Grid(10, 10, 16.0, 2.0)
    population = Population()
    population.spawn(grid, np.random.default_rng(0))

    assert len(population) == 10
    assert 1 <= grid.filled_count <= 10


def test_simulation_run():
    """Test a short simulation run."""
    sim = Simulation(160, 160, seed=0)
    assert sim.run(5) == 5
    assert sim.get_statistics()["epoch"] == 5
