"""Agents that claim cells on the grid."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import numpy as np

from .constants import MAX_INTENSITY


class Direction(Enum):
    """Heading an agent holds while its disposition lasts."""

    SETTLE = "settle"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass
class Agent:
    """A single actor with an identity and a settle/explore disposition.

    Agents carry no automaton behavior of their own. The grid fills cells
    on their behalf and compares them by ``id`` only, so two Agent objects
    with the same id are the same occupant.

    Attributes:
        id: Unique identifier, stable for the agent's lifetime
        row: Spawn row on the grid
        col: Spawn column on the grid
        settle: True if the agent tends to hold cells, False if it roams
        direction: Heading drawn together with ``settle``
        intensity: Number of epochs the disposition is meant to hold
    """

    id: int
    row: int
    col: int
    settle: bool = False
    direction: Direction = Direction.SETTLE
    intensity: int = 1

    @property
    def position(self) -> Tuple[int, int]:
        """Spawn coordinates as (row, col)."""
        return (self.row, self.col)


def choose_disposition(rng: np.random.Generator) -> Tuple[bool, Direction, int]:
    """Draw a settle flag, direction and intensity from ``rng``.

    Args:
        rng: Random generator supplied by the caller

    Returns:
        Tuple of (settle, direction, intensity)
    """
    settle = bool(rng.random() < 0.5)

    if settle:
        direction = Direction.SETTLE
    else:
        u = rng.random()
        if u < 0.25:
            direction = Direction.LEFT
        elif u < 0.5:
            direction = Direction.RIGHT
        elif u < 0.75:
            direction = Direction.UP
        else:
            direction = Direction.DOWN

    intensity = int(rng.integers(1, MAX_INTENSITY))

    return settle, direction, intensity
