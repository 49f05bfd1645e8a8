"""
Benchmark system for measuring puzzle generation.
"""

import time
import json
import pandas as pd
from pathlib import Path
from typing import List, Dict, Any, Optional, Tuple
from dataclasses import dataclass, asdict, field
from datetime import datetime
import multiprocessing as mp
from functools import partial
from tqdm import tqdm

from ..core.puzzle import FailureKind
from ..core.validator import PuzzleValidator
from ..core.utils import setup_logger, memory_usage
from ..generators.puzzle_builder import PuzzleBuilder, PuzzleBuilderConfig


@dataclass
class BenchmarkResult:
    """Result from a single generation run"""
    grid_size: int
    seed: int
    success: bool
    generate_time: float
    memory_mb: float

    # Puzzle characteristics
    attempts: int = 0
    clue_count: int = 0
    clue_density: float = 0.0

    # Failure breakdown
    path_failures: int = 0
    uniqueness_failures: int = 0

    is_valid: bool = False
    error_message: str = ""
    timestamp: str = ""
    extra_stats: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return asdict(self)


class BenchmarkConfig:
    """Configuration for benchmark runs"""

    def __init__(self, **kwargs):
        # Test parameters
        self.grid_sizes: List[int] = kwargs.get('grid_sizes', [5, 6, 7])
        self.seeds_per_size: int = kwargs.get('seeds_per_size', 10)
        self.base_seed: int = kwargs.get('base_seed', 0)
        self.builder_config: Optional[PuzzleBuilderConfig] = kwargs.get('builder_config', None)

        # Execution parameters
        self.parallel: bool = kwargs.get('parallel', True)
        self.num_workers: int = kwargs.get('num_workers', max(1, mp.cpu_count() - 1))
        self.save_puzzles: bool = kwargs.get('save_puzzles', False)

        # Output parameters
        self.output_dir: Path = Path(kwargs.get('output_dir', 'results/benchmarks'))


class Benchmark:
    """Run generation benchmarks over grid sizes and seeds"""

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.logger = setup_logger(self.__class__.__name__)

        # Create output directory
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        # Results storage
        self.results: List[BenchmarkResult] = []

    def test_cases(self) -> List[Tuple[int, int]]:
        return [
            (size, self.config.base_seed + i)
            for size in self.config.grid_sizes
            for i in range(self.config.seeds_per_size)
        ]

    def run(self) -> pd.DataFrame:
        """
        Run complete benchmark suite.

        Returns:
            DataFrame with all benchmark results
        """
        self.logger.info("Starting benchmark suite")
        start_time = time.time()

        test_cases = self.test_cases()
        self.logger.info(f"Prepared {len(test_cases)} generation runs")

        if self.config.parallel and self.config.num_workers > 1:
            self._run_parallel(test_cases)
        else:
            self._run_sequential(test_cases)

        # Convert results to DataFrame
        results_df = pd.DataFrame([r.to_dict() for r in self.results])

        # Save results
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        results_file = self.config.output_dir / f"benchmark_results_{timestamp}.csv"
        results_df.to_csv(results_file, index=False)

        # Save detailed JSON
        json_file = self.config.output_dir / f"benchmark_results_{timestamp}.json"
        with open(json_file, 'w') as f:
            json.dump({
                'config': {
                    'grid_sizes': self.config.grid_sizes,
                    'seeds_per_size': self.config.seeds_per_size,
                    'base_seed': self.config.base_seed
                },
                'results': [r.to_dict() for r in self.results],
                'summary': self._compute_summary(results_df)
            }, f, indent=2, default=float)

        total_time = time.time() - start_time
        self.logger.info(f"Benchmark completed in {total_time:.2f} seconds")
        self.logger.info(f"Results saved to {results_file}")

        return results_df

    def _run_sequential(self, test_cases: List[Tuple[int, int]]):
        """Run benchmarks sequentially"""
        with tqdm(total=len(test_cases), desc="Generating puzzles") as pbar:
            for grid_size, seed in test_cases:
                self.results.append(self._run_single_test(grid_size, seed))
                pbar.update(1)

    def _run_parallel(self, test_cases: List[Tuple[int, int]]):
        """Run benchmarks in parallel"""
        self.logger.info(f"Running {len(test_cases)} runs with {self.config.num_workers} workers")

        with mp.Pool(processes=self.config.num_workers) as pool:
            worker_func = partial(run_single_test_wrapper, self.config)

            with tqdm(total=len(test_cases), desc="Generating puzzles") as pbar:
                for result in pool.imap_unordered(worker_func, test_cases):
                    self.results.append(result)
                    pbar.update(1)

    def _run_single_test(self, grid_size: int, seed: int) -> BenchmarkResult:
        """Run a single generation"""
        result = BenchmarkResult(
            grid_size=grid_size,
            seed=seed,
            success=False,
            generate_time=0.0,
            memory_mb=0.0,
            timestamp=datetime.now().isoformat()
        )

        builder = PuzzleBuilder(self.config.builder_config)
        initial_memory = memory_usage()
        start_time = time.time()

        puzzle = builder.build(grid_size, seed)

        result.generate_time = time.time() - start_time
        result.memory_mb = memory_usage() - initial_memory
        result.path_failures = builder.failures.get(FailureKind.PATH_GENERATION, 0)
        result.uniqueness_failures = builder.failures.get(FailureKind.UNIQUENESS, 0)

        if puzzle is None:
            result.error_message = f"No puzzle after {builder.config.max_attempts} attempts"
            return result

        validation = PuzzleValidator.validate_result(puzzle)
        stats = PuzzleValidator.get_puzzle_statistics(puzzle)

        result.success = True
        result.attempts = puzzle.attempts
        result.clue_count = puzzle.clue_count
        result.clue_density = stats['clue_density']
        result.is_valid = validation.is_valid
        result.extra_stats = stats
        if not validation.is_valid:
            result.error_message = "; ".join(validation.errors)

        if self.config.save_puzzles:
            puzzle_dir = self.config.output_dir / "puzzles"
            puzzle_dir.mkdir(parents=True, exist_ok=True)
            puzzle.save(puzzle_dir / f"{grid_size}x{grid_size}_{seed:04d}.json")

        return result

    def _compute_summary(self, results_df: pd.DataFrame) -> dict:
        """Compute summary statistics"""
        summary = {}
        if results_df.empty:
            return summary

        summary['total_runs'] = len(results_df)
        summary['successful_runs'] = int(results_df['success'].sum())
        summary['success_rate'] = float(results_df['success'].mean())

        summary['by_size'] = {}
        for size in sorted(results_df['grid_size'].unique()):
            size_data = results_df[results_df['grid_size'] == size]
            succeeded = size_data[size_data['success']]
            summary['by_size'][int(size)] = {
                'success_rate': float(size_data['success'].mean()),
                'avg_time': float(size_data['generate_time'].mean()),
                'avg_attempts': float(succeeded['attempts'].mean()) if len(succeeded) else 0.0,
                'avg_clues': float(succeeded['clue_count'].mean()) if len(succeeded) else 0.0,
            }

        return summary


def run_single_test_wrapper(config: BenchmarkConfig,
                            test_case: Tuple[int, int]) -> BenchmarkResult:
    """Wrapper function for parallel execution"""
    grid_size, seed = test_case
    benchmark = Benchmark(config)
    return benchmark._run_single_test(grid_size, seed)


class BenchmarkAnalyzer:
    """Analyze benchmark results"""

    def __init__(self, results_file: Path):
        """Load benchmark results from file"""
        self.results_df = pd.read_csv(results_file)
        self.logger = setup_logger(self.__class__.__name__)

    @classmethod
    def from_dataframe(cls, results_df: pd.DataFrame) -> 'BenchmarkAnalyzer':
        analyzer = cls.__new__(cls)
        analyzer.results_df = results_df
        analyzer.logger = setup_logger(cls.__name__)
        return analyzer

    def get_summary_statistics(self) -> pd.DataFrame:
        """Get summary statistics by grid size"""
        summary = self.results_df.groupby('grid_size').agg({
            'success': ['count', 'sum', 'mean'],
            'generate_time': ['mean', 'median', 'std', 'min', 'max'],
            'attempts': ['mean', 'max'],
            'clue_count': ['mean', 'min', 'max'],
            'memory_mb': ['mean', 'max']
        }).round(3)

        # Flatten column names
        summary.columns = ['_'.join(col).strip() for col in summary.columns.values]

        return summary

    def get_failure_breakdown(self) -> pd.DataFrame:
        """Path-construction versus uniqueness failures per grid size"""
        return self.results_df.groupby('grid_size')[
            ['path_failures', 'uniqueness_failures']
        ].sum()
