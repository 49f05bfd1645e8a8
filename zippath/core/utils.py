"""
Utility functions for zip path puzzles.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union
import random
import time
from functools import wraps
import numpy as np

from ..core.puzzle import PuzzleResult
from .. import config as defaults


def setup_logger(name: str, log_file: Optional[Path] = None,
                 level: str = defaults.LOG_LEVEL) -> logging.Logger:
    """
    Set up a logger with console and optional file output.

    Args:
        name: Logger name
        log_file: Optional log file path
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    logger.handlers = []

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper()))

    # Formatter
    formatter = logging.Formatter(
        defaults.LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, level.upper()))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def timer(func):
    """Decorator to time function execution"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        execution_time = time.time() - start_time

        # Try to get logger from first argument (usually self)
        if args and hasattr(args[0], 'logger'):
            args[0].logger.debug(f"{func.__name__} took {execution_time:.3f} seconds")

        return result
    return wrapper


def memory_usage():
    """Get current memory usage in MB"""
    import psutil
    import os
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def make_rng(seed: Union[None, int, random.Random] = None) -> random.Random:
    """
    Resolve a seed into a private random source.

    A ``random.Random`` is used as is, an int seeds a new generator and
    None gives an OS-seeded one. The module-level generator is never used.
    """
    if isinstance(seed, random.Random):
        return seed
    if seed is None:
        return random.Random()
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"Seed must be an int or random.Random, got {seed!r}")
    return random.Random(seed)


class PuzzleConverter:
    """Convert puzzles between different formats"""

    @staticmethod
    def to_grid(puzzle: PuzzleResult) -> np.ndarray:
        """
        Convert puzzle clues to a 2D grid.
        0: unclued cell, k > 0: clue k
        """
        grid = np.zeros((puzzle.grid_size, puzzle.grid_size), dtype=int)
        for clue in puzzle.clues:
            grid[clue.index // puzzle.grid_size, clue.index % puzzle.grid_size] = clue.value
        return grid

    @staticmethod
    def solution_grid(puzzle: PuzzleResult) -> np.ndarray:
        """2D grid holding the 1-based step at which the solution visits each cell"""
        grid = np.zeros((puzzle.grid_size, puzzle.grid_size), dtype=int)
        for step, idx in enumerate(puzzle.solution, 1):
            grid[idx // puzzle.grid_size, idx % puzzle.grid_size] = step
        return grid

    @staticmethod
    def to_string(puzzle: PuzzleResult, show_solution: bool = False) -> str:
        """
        Convert puzzle to string representation.

        Args:
            puzzle: The puzzle to convert
            show_solution: Print the visiting step of every cell instead of clues only

        Returns:
            String representation of the puzzle
        """
        if show_solution:
            grid = PuzzleConverter.solution_grid(puzzle)
        else:
            grid = PuzzleConverter.to_grid(puzzle)

        width = len(str(int(grid.max()))) if grid.size else 1
        lines = []
        for row in grid:
            lines.append(' '.join(str(v).rjust(width) if v else '.'.rjust(width)
                                  for v in row))
        return '\n'.join(lines)


def save_puzzle_batch(puzzles: List[PuzzleResult], directory: Path, prefix: str = "puzzle"):
    """Save multiple puzzles to a directory"""
    directory.mkdir(parents=True, exist_ok=True)

    for i, puzzle in enumerate(puzzles):
        filename = directory / f"{prefix}_{i:04d}.json"
        puzzle.save(filename)


def load_puzzle_batch(directory: Path, pattern: str = "*.json") -> List[PuzzleResult]:
    """Load multiple puzzles from a directory"""
    puzzles = []
    logger = logging.getLogger(__name__)

    for filepath in sorted(directory.glob(pattern)):
        try:
            puzzles.append(PuzzleResult.load(filepath))
        except (OSError, ValueError, KeyError) as e:
            logger.warning(f"Error loading {filepath}: {e}")

    return puzzles
