"""
Solvers for zip path clue sets.
"""

from .base_solver import BaseSolver, SolverConfig, SolverResult, SearchLimitExceeded
from .uniqueness_solver import UniquenessSolver, solve_clues

__all__ = [
    # Base classes
    'BaseSolver',
    'SolverConfig',
    'SolverResult',
    'SearchLimitExceeded',

    # Solution counting
    'UniquenessSolver',
    'solve_clues',
]
