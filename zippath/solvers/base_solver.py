"""
Base solver class for zip path puzzles.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List, Callable
from dataclasses import dataclass, field
import time
from pathlib import Path

from ..core.puzzle import Grid, PuzzleSpec
from ..core.validator import PuzzleValidator
from ..core.utils import setup_logger
from .. import config as defaults


class SearchLimitExceeded(RuntimeError):
    """Raised inside a search when its iteration budget runs out"""


@dataclass
class SolverConfig:
    """Configuration for puzzle solvers"""
    max_solutions: int = defaults.MAX_SOLUTIONS
    max_iterations: Optional[int] = defaults.SOLVER_MAX_ITERATIONS
    use_pruning: bool = True  # Skip branches that strand an unvisited cell
    verbose: bool = False
    log_file: Optional[Path] = None

    # Algorithm-specific parameters
    extra_params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SolverResult:
    """Result from a solution count"""
    count: int = 0
    solutions: List[List[int]] = field(default_factory=list)
    search_limited: bool = False  # Iteration budget ran out before the search finished
    iterations: int = 0
    solve_time: float = 0.0
    message: str = ""

    @property
    def is_unique(self) -> bool:
        """Exactly one solution, confirmed by a finished search"""
        return self.count == 1 and not self.search_limited

    def __repr__(self):
        limited = ", limited" if self.search_limited else ""
        return (f"SolverResult(count={self.count}{limited}, time={self.solve_time:.3f}s, "
                f"iterations={self.iterations})")


class BaseSolver(ABC):
    """Abstract base class for clue-set solvers"""

    def __init__(self, config: Optional[SolverConfig] = None):
        """Initialize solver with configuration."""
        self.config = config or SolverConfig()
        self.logger = setup_logger(
            self.__class__.__name__,
            self.config.log_file,
            "DEBUG" if self.config.verbose else "INFO"
        )

        # Callbacks for monitoring progress
        self._progress_callbacks: List[Callable] = []

        # Statistics tracking
        self._start_time: Optional[float] = None
        self._iterations: int = 0

    def add_progress_callback(self, callback: Callable):
        """Add a callback called with (iterations, solutions_found) for every solution."""
        self._progress_callbacks.append(callback)

    def solve(self, spec: PuzzleSpec) -> SolverResult:
        """Count the solutions of a clue set."""
        self.logger.debug(f"Starting {self.__class__.__name__} on {spec}")

        validation = PuzzleValidator.validate_clues(spec.clues, Grid(spec.grid_size),
                                                    require_sequence=False)
        if not validation:
            return SolverResult(message=f"Invalid clue set: {'; '.join(validation.errors)}")

        self._start_time = time.time()
        self._iterations = 0

        result = self._solve(spec)

        result.solve_time = time.time() - self._start_time
        result.iterations = self._iterations

        if result.search_limited:
            self.logger.warning(
                f"Search stopped after {result.iterations} iterations with {result.count} solution(s)"
            )
        else:
            self.logger.debug(
                f"Found {result.count} solution(s) in {result.solve_time:.3f}s "
                f"with {result.iterations} iterations"
            )

        return result

    @abstractmethod
    def _solve(self, spec: PuzzleSpec) -> SolverResult:
        """Implement the specific search."""
        pass

    def _increment_iteration(self):
        """Increment iteration counter and check limits"""
        self._iterations += 1

        if self.config.max_iterations is not None and self._iterations > self.config.max_iterations:
            raise SearchLimitExceeded(f"Maximum iterations ({self.config.max_iterations}) exceeded")

    def _call_progress_callbacks(self, solutions_found: int):
        """Call all registered progress callbacks"""
        for callback in self._progress_callbacks:
            callback(self._iterations, solutions_found)
