"""Main entry point for the Game of Life visualizer."""

import argparse
import sys
import time
from typing import List, Optional

from life_visualizer.config import (
    DEFAULT_CELL_SIZE,
    DEFAULT_DIMENSION,
    DEFAULT_FPS,
    DEFAULT_LIFETIME,
    DEFAULT_PROBABILITY,
    DEFAULT_TICK_RATE_MS,
    PATTERNS,
    VisualizerConfig,
)
from life_visualizer.renderers.pygame_grid import PygameGridRenderer
from life_visualizer.simulation.simulator import LifeSimulator


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Conway's Game of Life",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 100x100 grid, starts paused
  python -m life_visualizer

  # Denser grid that starts running and reseeds every 500 generations
  python -m life_visualizer --probability 0.3 --start-running --lifetime 500

  # Empty grid to draw on with the mouse
  python -m life_visualizer --no-random

  # Glider gun with the neighbor-count overlay
  python -m life_visualizer --pattern glider_gun --dimension 60 --debug
        """,
    )

    # Grid options
    parser.add_argument(
        "--dimension",
        "-d",
        type=int,
        default=DEFAULT_DIMENSION,
        help="Number of rows and columns in the grid",
    )
    parser.add_argument(
        "--probability",
        "-p",
        type=float,
        default=DEFAULT_PROBABILITY,
        help="Chance of each cell starting alive (0.0-1.0)",
    )
    parser.add_argument(
        "--no-random",
        action="store_true",
        help="Start with every cell dead instead of seeding randomly",
    )
    parser.add_argument(
        "--pattern",
        type=str,
        default="random",
        choices=PATTERNS,
        help="Initial pattern for the grid",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible grids",
    )

    # Driver options
    parser.add_argument(
        "--start-running",
        action="store_true",
        help="Start the simulation running instead of paused",
    )
    parser.add_argument(
        "--lifetime",
        type=int,
        default=DEFAULT_LIFETIME,
        help="Generations to run before the grid is reseeded",
    )
    parser.add_argument(
        "--tick-rate",
        type=int,
        default=DEFAULT_TICK_RATE_MS,
        help="Delay between frames in milliseconds",
    )

    # Display options
    parser.add_argument(
        "--cell-size",
        type=int,
        default=DEFAULT_CELL_SIZE,
        help="Size of each cell in pixels",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=DEFAULT_FPS,
        help="Frame rate cap",
    )
    parser.add_argument(
        "--no-stats",
        action="store_true",
        help="Hide the stats panel",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Draw each live cell's neighbor count",
    )

    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> VisualizerConfig:
    """Create a VisualizerConfig from parsed arguments."""
    return VisualizerConfig(
        dimension=args.dimension,
        probability=args.probability,
        use_random=not args.no_random,
        pattern=args.pattern,
        random_seed=args.seed,
        start_paused=not args.start_running,
        lifetime=args.lifetime,
        tick_rate_ms=args.tick_rate,
        cell_size=args.cell_size,
        fps=args.fps,
        show_stats=not args.no_stats,
        debug=args.debug,
    )


def run(config: VisualizerConfig) -> None:
    """
    Run the simulation window until the user quits.

    Args:
        config: Visualizer configuration.
    """
    print("=" * 60)
    print("Game of Life")
    print("=" * 60)
    print(f"Grid: {config.dimension}x{config.dimension}")
    if config.pattern == "random":
        seeding = f"random (p={config.probability})" if config.use_random else "empty"
    else:
        seeding = config.pattern
    print(f"Seeding: {seeding}")
    print(f"Lifetime: {config.lifetime} generations")
    print(f"Tick rate: {config.tick_rate_ms} ms")
    print("=" * 60)
    print("Controls:")
    print("  SPACE     - Pause/Resume")
    print("  N / →     - Step once (when paused)")
    print("  R         - Reset simulation")
    print("  Click     - Toggle a cell")
    print("  = / ↑     - Speed up")
    print("  - / ↓     - Slow down")
    print("  Q / ESC   - Quit")
    print("=" * 60)

    # Create simulator
    simulator = LifeSimulator(config)

    # Create renderer
    renderer = PygameGridRenderer(config)

    running = True

    try:
        while running:
            # Render current state
            result = renderer.render(
                simulator.get_grid(),
                simulator.get_generation(),
                simulator.lifetime,
                simulator.paused,
                simulator.tick_rate_ms,
            )

            # Handle user input
            if result.should_quit:
                running = False
                continue

            message = simulator.apply_input(result)
            if message:
                print(message)

            time.sleep(simulator.tick_rate_ms / 1000)

            reseeds = simulator.auto_reseeds
            simulator.tick()
            if simulator.auto_reseeds != reseeds:
                print("Lifetime expired, reseeding grid")

    except KeyboardInterrupt:
        print("\nInterrupted by user")
    finally:
        renderer.cleanup()

    print(f"\nSimulation ended at generation {simulator.get_generation()}")
    print(f"Live cells: {simulator.get_grid().count_live_cells()}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    try:
        config = create_config_from_args(args)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    run(config)


if __name__ == "__main__":
    main()
