"""Explorers-and-settlers grid automaton."""

__version__ = "0.1.0"

from .core.agent import Agent, Direction
from .core.cell import Cell, Empty, Filled
from .core.grid import Grid
from .core.simulation import Simulation

__all__ = ["Agent", "Direction", "Cell", "Empty", "Filled", "Grid", "Simulation"]
