"""Frontend interfaces for the settlers automaton."""

from .cli import CLISimulation

__all__ = ["CLISimulation"]
