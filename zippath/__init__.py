"""
Zip path puzzle generation.

Builds Hamiltonian paths on square grids, reveals a handful of numbered
cells as clues, and keeps only clue sets with exactly one solution.
"""

from .core import Grid, Clue, PuzzleSpec, PuzzleResult, FailureKind, PuzzleValidator
from .solvers import UniquenessSolver, SolverConfig, SolverResult, solve_clues
from .generators import (
    PathGenerator, CluePlacer, PuzzleBuilder, PuzzleBuilderConfig, generate_puzzle
)
from .worker import PuzzleWorker, generate_puzzle_async

__version__ = "0.1.0"

__all__ = [
    # Entry points
    'generate_puzzle', 'generate_puzzle_async', 'solve_clues',

    # Data structures
    'Grid', 'Clue', 'PuzzleSpec', 'PuzzleResult', 'FailureKind',

    # Components
    'PathGenerator', 'CluePlacer', 'UniquenessSolver', 'PuzzleBuilder',
    'PuzzleBuilderConfig', 'SolverConfig', 'SolverResult', 'PuzzleValidator',
    'PuzzleWorker',
]
