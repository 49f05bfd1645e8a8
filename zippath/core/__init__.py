"""
Core data structures and utilities for zip path puzzles.
"""

from .puzzle import Grid, Clue, PuzzleSpec, PuzzleResult, FailureKind
from .validator import PuzzleValidator, ValidationResult
from .utils import (
    setup_logger, timer, memory_usage, make_rng,
    PuzzleConverter, save_puzzle_batch, load_puzzle_batch
)

__all__ = [
    # Data structures
    'Grid', 'Clue', 'PuzzleSpec', 'PuzzleResult', 'FailureKind',

    # Validation
    'PuzzleValidator', 'ValidationResult',

    # Utilities
    'setup_logger', 'timer', 'memory_usage', 'make_rng',
    'PuzzleConverter', 'save_puzzle_batch', 'load_puzzle_batch'
]
