"""Core automaton logic."""

from .agent import Agent, Direction, choose_disposition
from .cell import EMPTY, Cell, CellState, Empty, Filled, Rect
from .grid import Grid
from .population import Population
from .simulation import Simulation

__all__ = [
    "Agent",
    "Direction",
    "choose_disposition",
    "EMPTY",
    "Cell",
    "CellState",
    "Empty",
    "Filled",
    "Rect",
    "Grid",
    "Population",
    "Simulation",
]
