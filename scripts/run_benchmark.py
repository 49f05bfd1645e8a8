#!/usr/bin/env python3
"""
Script to benchmark puzzle generation across grid sizes.

Usage:
    python scripts/run_benchmark.py --sizes 5 6 7 --seeds 20
    python scripts/run_benchmark.py --suite quick
    python scripts/run_benchmark.py --suite full --workers 8
"""

import click
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from zippath.analysis.benchmark import Benchmark, BenchmarkConfig, BenchmarkAnalyzer
from zippath.generators.puzzle_builder import PuzzleBuilderConfig
from zippath import config as defaults


# Predefined benchmark suites
BENCHMARK_SUITES = {
    'quick': {
        'grid_sizes': [4, 5, 6],
        'seeds_per_size': 5,
    },
    'standard': {
        'grid_sizes': [5, 6, 7],
        'seeds_per_size': 20,
    },
    'full': {
        'grid_sizes': [4, 5, 6, 7, 8],
        'seeds_per_size': 50,
    },
}


@click.command()
@click.option('--suite', type=click.Choice(list(BENCHMARK_SUITES)),
              help='Use predefined benchmark suite')
@click.option('--sizes', '-s', multiple=True, type=click.IntRange(min=1),
              help='Grid sizes to benchmark')
@click.option('--seeds', '-n', type=int, default=10,
              help='Number of seeds per grid size')
@click.option('--base-seed', type=int, default=0,
              help='First seed; runs use base-seed .. base-seed + seeds - 1')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True), default=None,
              help='YAML file with builder settings')
@click.option('--parallel/--sequential', default=True,
              help='Run benchmarks in parallel')
@click.option('--workers', '-w', type=int, default=None,
              help='Number of parallel workers')
@click.option('--output-dir', '-o', type=click.Path(), default=str(defaults.BENCHMARKS_DIR),
              help='Output directory for results')
@click.option('--save-puzzles', is_flag=True,
              help='Save every generated puzzle')
def main(suite, sizes, seeds, base_seed, config_file, parallel, workers,
         output_dir, save_puzzles):
    """Benchmark zip path puzzle generation."""

    click.echo("=" * 60)
    click.echo("Zip Path Generation Benchmark")
    click.echo("=" * 60)

    defaults.ensure_directories()

    if suite:
        config_dict = dict(BENCHMARK_SUITES[suite])
        click.echo(f"\nUsing {suite} benchmark suite:")
    else:
        config_dict = {
            'grid_sizes': list(sizes) or [5, 6, 7],
            'seeds_per_size': seeds,
        }

    click.echo(f"  Grid sizes: {config_dict['grid_sizes']}")
    click.echo(f"  Seeds per size: {config_dict['seeds_per_size']}")

    config_dict.update({
        'base_seed': base_seed,
        'parallel': parallel,
        'output_dir': output_dir,
        'save_puzzles': save_puzzles,
    })
    if workers:
        config_dict['num_workers'] = workers
    if config_file:
        config_dict['builder_config'] = PuzzleBuilderConfig.from_yaml(config_file)

    benchmark = Benchmark(BenchmarkConfig(**config_dict))
    results_df = benchmark.run()

    click.echo(f"\nBenchmark completed! Results summary:")
    click.echo(f"  Total runs: {len(results_df)}")
    click.echo(f"  Successful: {results_df['success'].sum()}")
    click.echo(f"  Failed: {(~results_df['success']).sum()}")
    click.echo(f"  Success rate: {results_df['success'].mean() * 100:.1f}%")

    analyzer = BenchmarkAnalyzer.from_dataframe(results_df)

    click.echo("\nBy grid size:")
    click.echo(analyzer.get_summary_statistics().to_string())

    click.echo("\nFailed attempts:")
    click.echo(analyzer.get_failure_breakdown().to_string())

    click.echo("\n" + "=" * 60)
    click.echo("Benchmark complete!")
    click.echo("=" * 60)


if __name__ == '__main__':
    main()
