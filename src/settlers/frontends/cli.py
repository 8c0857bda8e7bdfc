"""Command-line interface for the explorers-and-settlers automaton."""

import argparse
import sys
import time
from typing import Optional, Tuple

from ..core.constants import DEFAULT_CELL_SIZE, DEFAULT_CELL_SPACING
from ..core.grid import Grid
from ..core.simulation import Simulation


class CLISimulation:
    """Command-line interface for running headless simulations."""

    def run_simulation(
        self,
        width: float,
        height: float,
        ticks: int,
        cell_size: float = DEFAULT_CELL_SIZE,
        cell_spacing: float = DEFAULT_CELL_SPACING,
        seed: Optional[int] = None,
        agents: Optional[int] = None,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, dict]:
        """Run a simulation for a viewport.

        Args:
            width: Viewport width
            height: Viewport height
            ticks: Number of epochs to run
            cell_size: Side length of each cell
            cell_spacing: Gap between cells
            seed: Random seed for reproducible runs
            agents: Fixed agent count (default: derived from grid size)
            verbose: Print progress updates
            show_grid: Show initial and final grid states

        Returns:
            Tuple of (final_epoch, statistics)
        """
        simulation = Simulation(
            width,
            height,
            cell_size=cell_size,
            cell_spacing=cell_spacing,
            seed=seed,
            agent_count=agents,
        )
        grid = simulation.grid

        if verbose:
            print(f"Viewport {width}x{height} -> {grid.n_cols}x{grid.n_rows} grid (cell size {cell_size})")
            print(f"Spawned {len(simulation.population)} agents (seed: {seed})")

        initial_filled = grid.filled_count

        if show_grid:
            print("\nInitial grid:")
            print(format_grid(grid))

        start_time = time.time()

        if verbose:
            print(f"\nRunning simulation ({ticks} ticks)...")

        final_epoch = simulation.run(ticks)

        duration = time.time() - start_time

        stats = simulation.get_statistics()
        stats["initial_filled_cells"] = initial_filled
        stats["duration_seconds"] = duration
        stats["ticks_per_second"] = final_epoch / duration if duration > 0 else 0

        if show_grid:
            print(f"\nFinal grid (epoch {final_epoch}):")
            print(format_grid(grid))

        return final_epoch, stats


def format_grid(grid: Grid, max_size: int = 50) -> str:
    """Render a grid as text, or a notice if it is too large.

    Args:
        grid: Grid to render
        max_size: Largest row or column count rendered

    Returns:
        Text rendering of the grid
    """
    if grid.n_cols > max_size or grid.n_rows > max_size:
        return f"Grid too large to display ({grid.n_cols}x{grid.n_rows})"
    return str(grid)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run explorers-and-settlers grid simulations from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a 640x480 viewport for 100 ticks
  settlers-cli --width 640 --height 480 --ticks 100

  # Small reproducible run showing the grid
  settlers-cli -W 320 -H 160 -n 10 --seed 42 --show-grid

  # Fixed number of agents with verbose output
  settlers-cli --agents 20 --verbose
        """,
    )

    # Viewport configuration
    parser.add_argument("-W", "--width", type=float, default=640.0, help="Viewport width (default: 640)")

    parser.add_argument("-H", "--height", type=float, default=480.0, help="Viewport height (default: 480)")

    parser.add_argument(
        "--cell-size",
        type=float,
        default=DEFAULT_CELL_SIZE,
        help=f"Cell side length (default: {DEFAULT_CELL_SIZE:g})",
    )

    parser.add_argument(
        "--cell-spacing",
        type=float,
        default=DEFAULT_CELL_SPACING,
        help=f"Gap between cells (default: {DEFAULT_CELL_SPACING:g})",
    )

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--ticks",
        type=int,
        default=100,
        help="Number of epochs to simulate (default: 100)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible runs",
    )

    parser.add_argument(
        "--agents",
        type=int,
        help="Number of agents to spawn (default: one per 10 cells)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states (small grids only)",
    )

    return parser


def print_results(final_epoch: int, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_epoch: Final epoch number
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {final_epoch} ticks")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Agents: {stats['agents']} ({stats['settlers']} settlers, {stats['explorers']} explorers)")
        print(f"  Initial filled cells: {stats['initial_filled_cells']}")
        print(f"  Filled cells: {stats['filled_cells']}")
        print(f"  Blocked cells: {stats['blocked_cells']}")
        print(f"  Occupancy density: {stats['occupancy_density']:.2%}")
        print(f"  Mean fill count: {stats['mean_times']:.2f} (max {stats['max_times']})")
        print(f"  Mean filled neighbors: {stats['mean_filled_neighbors']:.2f}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
            print(f"  Speed: {stats['ticks_per_second']:.0f} ticks/second")
    else:
        print(
            "Filled: {}, Blocked: {}, Duration: {:.3f}s".format(
                stats["filled_cells"], stats["blocked_cells"], stats.get("duration_seconds", 0)
            )
        )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.cell_size <= 0:
        errors.append("Cell size must be positive")
    elif args.width < args.cell_size or args.height < args.cell_size:
        errors.append("Viewport must be at least one cell wide and tall")

    if args.cell_spacing < 0:
        errors.append("Cell spacing must be non-negative")

    if args.ticks < 0:
        errors.append("Ticks must be non-negative")

    if args.agents is not None and args.agents < 0:
        errors.append("Agent count must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    if not validate_args(args):
        return 1

    cli = CLISimulation()

    try:
        final_epoch, stats = cli.run_simulation(
            width=args.width,
            height=args.height,
            ticks=args.ticks,
            cell_size=args.cell_size,
            cell_spacing=args.cell_spacing,
            seed=args.seed,
            agents=args.agents,
            verbose=args.verbose,
            show_grid=args.show_grid,
        )

        print_results(final_epoch, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
