#!/usr/bin/env python3
"""
Example usage of the settlers package.
"""

from settlers import Simulation


def main():
    """Demonstrate programmatic usage of the settlers package."""
    # A small viewport so the grid fits in a terminal
    sim = Simulation(320, 160, cell_size=16.0, cell_spacing=2.0, seed=7)

    print("Initial state:")
    print(sim.grid)
    print(f"Agents: {len(sim.population)}, filled cells: {sim.grid.filled_count}")
    print()

    for _ in range(8):
        sim.tick()
        print(f"Epoch {sim.epoch}:")
        print(sim.grid)
        print(f"Blocked cells: {sim.grid.blocked_count}")
        print()

    # Resizing throws the old grid away
    sim.resize(480, 160)
    print(f"After resize: {sim.grid.n_cols}x{sim.grid.n_rows}, epoch {sim.epoch}")

    stats = sim.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
