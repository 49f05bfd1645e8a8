#!/usr/bin/env python3
"""
Script to count the solutions of a zip path clue set.

Usage:
    python scripts/run_solver.py puzzle.json --visualize
    python scripts/run_solver.py --clues 5:1,30:2 --size 6 --max-solutions 5
"""

import click
import sys
from pathlib import Path
import json

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from zippath.core.puzzle import PuzzleSpec, PuzzleResult
from zippath.core.utils import PuzzleConverter, setup_logger
from zippath.solvers import UniquenessSolver, SolverConfig
from zippath.visualization.static_viz import PuzzleVisualizer
from zippath import config as defaults


def parse_clues(text: str):
    """Parse 'INDEX:VALUE,INDEX:VALUE,...' into (index, value) pairs"""
    clues = []
    for item in text.split(','):
        item = item.strip()
        if not item:
            continue
        index, value = item.split(':')
        clues.append((int(index), int(value)))
    return clues


@click.command()
@click.argument('puzzle_file', required=False, type=click.Path())
@click.option('--clues', type=str,
              help='Clue set instead of a file (format: INDEX:VALUE,INDEX:VALUE,...)')
@click.option('--size', '-s', type=click.IntRange(min=1), default=defaults.DEFAULT_GRID_SIZE,
              help='Grid size for --clues')
@click.option('--max-solutions', '-m', type=int, default=defaults.MAX_SOLUTIONS,
              help='Stop after this many solutions')
@click.option('--max-iterations', type=int, default=defaults.SOLVER_MAX_ITERATIONS,
              help='Search node budget')
@click.option('--visualize', '-v', is_flag=True,
              help='Render the first solution found')
@click.option('--save-solution', type=click.Path(),
              help='Save solutions to a JSON file')
@click.option('--verbose', is_flag=True, help='Enable verbose output')
@click.option('--output-dir', '-o', type=click.Path(), default=str(defaults.RESULTS_VIZ_DIR),
              help='Output directory for visualizations')
def main(puzzle_file, clues, size, max_solutions, max_iterations, visualize,
         save_solution, verbose, output_dir):
    """Count solutions of a clue set (up to --max-solutions)."""

    logger = setup_logger("ClueSolver", level="DEBUG" if verbose else "INFO")

    if clues:
        try:
            spec = PuzzleSpec.from_clues(parse_clues(clues), size)
        except ValueError:
            click.echo("Error: Clues format should be INDEX:VALUE,INDEX:VALUE (e.g., 5:1,30:2)")
            sys.exit(1)

    elif puzzle_file:
        puzzle_path = Path(puzzle_file)
        if not puzzle_path.exists():
            click.echo(f"Error: Puzzle file '{puzzle_file}' not found")
            sys.exit(1)

        try:
            spec = PuzzleResult.load(puzzle_path).to_spec()
            logger.info(f"Loaded puzzle from {puzzle_path}")
        except (OSError, ValueError, KeyError) as e:
            click.echo(f"Error loading puzzle: {e}")
            sys.exit(1)
    else:
        click.echo("Error: Either provide a puzzle file or use --clues")
        sys.exit(1)

    logger.info(f"Clue set: {spec.grid_size}x{spec.grid_size} with {len(spec.clues)} clues")

    solver = UniquenessSolver(SolverConfig(
        max_solutions=max_solutions,
        max_iterations=max_iterations,
        verbose=verbose
    ))

    if verbose:
        def progress_callback(iteration, solutions_found):
            logger.debug(f"Iteration {iteration}: {solutions_found} solution(s) so far")

        solver.add_progress_callback(progress_callback)

    result = solver.solve(spec)

    click.echo("\n" + "=" * 50)
    click.echo(f"Solutions: {result.count}{'+' if result.search_limited else ''}")
    click.echo(f"Unique: {'YES' if result.is_unique else 'NO'}")
    click.echo(f"Time: {result.solve_time:.3f} seconds")
    click.echo(f"Iterations: {result.iterations}")

    if result.message:
        click.echo(f"Message: {result.message}")

    click.echo("=" * 50 + "\n")

    if not result.solutions:
        click.echo("No solution found.")
        return

    first = PuzzleResult(
        clues=spec.clues,
        solution=tuple(result.solutions[0]),
        clue_count=len(spec.clues),
        attempts=1,
        grid_size=spec.grid_size
    )

    click.echo("First solution (visiting order):")
    click.echo(PuzzleConverter.to_string(first, show_solution=True))

    if save_solution:
        save_path = Path(save_solution)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        with open(save_path, 'w') as f:
            json.dump({
                'gridSize': spec.grid_size,
                'clues': [c.to_dict() for c in spec.clues],
                'count': result.count,
                'searchLimited': result.search_limited,
                'solutions': result.solutions
            }, f, indent=2)
        click.echo(f"\nSolutions saved to {save_path}")

    if visualize:
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        viz = PuzzleVisualizer()
        image_path = output_path / f"solution_{spec.grid_size}x{spec.grid_size}.png"
        viz.visualize(
            first,
            show_solution=True,
            title=f"{result.count} solution(s) found",
            save_path=image_path,
            show_plot=False
        )
        click.echo(f"\nVisualization saved to {image_path}")


if __name__ == '__main__':
    main()
