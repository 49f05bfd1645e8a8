#!/usr/bin/env python3
"""
Script to generate zip path puzzles.

Usage:
    python scripts/generate_puzzles.py --count 10 --size 6
    python scripts/generate_puzzles.py --count 20 --size 7 --seed 42 --workers 4
    python scripts/generate_puzzles.py --config builder.yaml --visualize --create-sheet
"""

import click
import sys
from pathlib import Path
from datetime import datetime
import json
import random

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from zippath.core.utils import PuzzleConverter, save_puzzle_batch
from zippath.core.validator import PuzzleValidator
from zippath.generators.puzzle_builder import PuzzleBuilder, PuzzleBuilderConfig
from zippath.worker import PuzzleWorker
from zippath.visualization.static_viz import PuzzleVisualizer
from zippath import config as defaults


@click.command()
@click.option('--count', '-n', type=int, default=10,
              help='Number of puzzles to generate')
@click.option('--size', '-s', type=click.IntRange(min=1), default=defaults.DEFAULT_GRID_SIZE,
              help='Grid size (puzzles are SIZE x SIZE)')
@click.option('--seed', type=int, default=None,
              help='Base random seed; puzzle i uses seed + i')
@click.option('--workers', '-w', type=int, default=1,
              help='Generate on a process pool of this many workers')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True), default=None,
              help='YAML file with builder settings')
@click.option('--output-dir', '-o', type=click.Path(), default=str(defaults.PUZZLES_DIR),
              help='Output directory for puzzles')
@click.option('--visualize', '-v', is_flag=True,
              help='Render each puzzle with its solution')
@click.option('--create-sheet', is_flag=True,
              help='Create printable puzzle sheets')
@click.option('--verbose', is_flag=True, help='Log every attempt and repair')
def main(count, size, seed, workers, config_file, output_dir, visualize,
         create_sheet, verbose):
    """Generate zip path puzzles with unique solutions."""

    click.echo("=" * 60)
    click.echo("Zip Path Puzzle Generator")
    click.echo("=" * 60)

    defaults.ensure_directories()
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    builder_config = PuzzleBuilderConfig.from_yaml(config_file) if config_file else PuzzleBuilderConfig()
    if verbose:
        builder_config.verbose = True

    if seed is None:
        seed = random.SystemRandom().randrange(2 ** 31)
    seeds = [seed + i for i in range(count)]

    click.echo(f"\nGenerating {count} puzzles at {size}x{size} (base seed {seed})")

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    if workers > 1:
        with PuzzleWorker(max_workers=workers, config=builder_config) as worker:
            results = worker.generate_many(size, seeds)
    else:
        builder = PuzzleBuilder(builder_config)
        results = []
        with click.progressbar(seeds, label='Generating puzzles') as bar:
            for puzzle_seed in bar:
                results.append(builder.build(size, puzzle_seed))

    puzzles = [p for p in results if p is not None]
    failed_seeds = [s for s, p in zip(seeds, results) if p is None]

    batch_dir = output_path / f"{size}x{size}_{timestamp}"
    save_puzzle_batch(puzzles, batch_dir, prefix=f"zip_{size}x{size}")

    click.echo(f"\n\nGeneration complete!")
    click.echo(f"Successfully generated {len(puzzles)}/{count} puzzles")
    if failed_seeds:
        click.echo(f"Exhausted attempts for seeds: {failed_seeds}")
    click.echo(f"Puzzles saved to: {batch_dir}")

    if puzzles and (visualize or create_sheet):
        viz_dir = batch_dir / "visualizations"
        viz_dir.mkdir(exist_ok=True)

        viz = PuzzleVisualizer()

        if visualize:
            click.echo("\nCreating visualizations...")
            for i, puzzle in enumerate(puzzles):
                viz.visualize(
                    puzzle,
                    show_solution=True,
                    title=f"{size}x{size} #{i + 1} ({puzzle.clue_count} clues)",
                    save_path=viz_dir / f"puzzle_{i:04d}.png",
                    show_plot=False
                )
            click.echo(f"Visualizations saved to: {viz_dir}")

        if create_sheet:
            # 6 puzzles per sheet (2x3 grid)
            puzzles_per_sheet = 6
            sheets_created = 0
            for sheet_num, i in enumerate(range(0, len(puzzles), puzzles_per_sheet)):
                viz.create_puzzle_sheet(
                    puzzles[i:i + puzzles_per_sheet],
                    rows=2,
                    cols=3,
                    save_path=viz_dir / f"puzzle_sheet_{sheet_num + 1}.png"
                )
                sheets_created += 1
            click.echo(f"Created {sheets_created} puzzle sheets in: {viz_dir}")

    summary = {
        'timestamp': timestamp,
        'grid_size': size,
        'requested': count,
        'generated': len(puzzles),
        'base_seed': seed,
        'failed_seeds': failed_seeds,
        'avg_clues': (sum(p.clue_count for p in puzzles) / len(puzzles)) if puzzles else 0.0,
        'avg_attempts': (sum(p.attempts for p in puzzles) / len(puzzles)) if puzzles else 0.0,
        'builder_config': builder_config.to_dict()
    }

    summary_path = batch_dir / "generation_summary.json"
    with open(summary_path, 'w') as f:
        json.dump(summary, f, indent=2)

    click.echo(f"\nGeneration summary saved to: {summary_path}")

    if puzzles:
        sample = puzzles[0]
        click.echo(f"\nSample puzzle:")
        click.echo(PuzzleConverter.to_string(sample))

        stats = PuzzleValidator.get_puzzle_statistics(sample)
        click.echo(f"\nPuzzle statistics:")
        click.echo(f"  Clues: {stats['clue_count']}")
        click.echo(f"  Density: {stats['clue_density']:.2%}")
        click.echo(f"  Average clue gap: {stats['avg_clue_gap']:.1f}")
        click.echo(f"  Turns in solution: {stats['turns']}")


if __name__ == '__main__':
    main()
