"""
Background puzzle generation.

Generation is CPU bound and synchronous; this module runs it on a worker
pool so that callers (a UI thread, an event loop) never block on it. Each
job builds its own PuzzleBuilder, so concurrent jobs share no state.
"""

import asyncio
import random
from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor
from functools import partial
from typing import Iterable, List, Optional, Union

from .core.puzzle import PuzzleResult
from .core.utils import setup_logger
from .generators.puzzle_builder import PuzzleBuilderConfig, generate_puzzle
from . import config as defaults

Seed = Union[None, int, random.Random]


def _generate_job(grid_size: int, seed: Seed,
                  config: Optional[PuzzleBuilderConfig]) -> Optional[PuzzleResult]:
    """Module-level so it can be pickled into a worker process"""
    return generate_puzzle(grid_size, seed, config)


class PuzzleWorker:
    """
    Runs puzzle generation on a process (or thread) pool.

    Usage:
        with PuzzleWorker(max_workers=2) as worker:
            future = worker.submit(6, seed=42)
            puzzle = future.result()   # PuzzleResult or None
    """

    def __init__(self, max_workers: Optional[int] = None, use_processes: bool = True,
                 config: Optional[PuzzleBuilderConfig] = None):
        self.config = config
        self.use_processes = use_processes
        self.logger = setup_logger(self.__class__.__name__)

        if use_processes:
            self._executor: Executor = ProcessPoolExecutor(max_workers=max_workers)
        else:
            self._executor = ThreadPoolExecutor(max_workers=max_workers)

    @property
    def executor(self) -> Executor:
        return self._executor

    def submit(self, grid_size: int = defaults.DEFAULT_GRID_SIZE, seed: Seed = None) -> Future:
        """Schedule one generation; the future resolves to a PuzzleResult or None."""
        self.logger.debug(f"Submitting {grid_size}x{grid_size} generation (seed={seed})")
        return self._executor.submit(_generate_job, grid_size, seed, self.config)

    def generate_many(self, grid_size: int, seeds: Iterable[Seed]) -> List[Optional[PuzzleResult]]:
        """Generate one puzzle per seed in parallel, results in seed order."""
        futures = [self.submit(grid_size, seed) for seed in seeds]
        results = [f.result() for f in futures]
        self.logger.info(f"Generated {sum(r is not None for r in results)}/{len(results)} puzzles")
        return results

    def shutdown(self, wait: bool = True):
        self._executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()


async def generate_puzzle_async(grid_size: int = defaults.DEFAULT_GRID_SIZE,
                                seed: Seed = None,
                                executor: Optional[Executor] = None,
                                config: Optional[PuzzleBuilderConfig] = None) -> Optional[PuzzleResult]:
    """
    Generate a puzzle without blocking the running event loop.

    Args:
        grid_size: Size of the square grid
        seed: Random source or int seed
        executor: Executor to run on; the loop's default executor if None
        config: Optional builder configuration

    Returns:
        The puzzle, or None if generation ran out of attempts
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, partial(_generate_job, grid_size, seed, config))
