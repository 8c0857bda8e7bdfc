"""Tunable constants for the settlers automaton."""

# Number of times the same agent may fill a cell before it locks.
MAX_TIMES = 6

# Default cell geometry in screen units.
DEFAULT_CELL_SIZE = 16.0
DEFAULT_CELL_SPACING = 2.0

# One agent is spawned per this many cells.
AGENT_DENSITY = 10

# Upper bound (exclusive) for an agent's disposition intensity.
MAX_INTENSITY = 10
