"""
Puzzle builder: generate a path, reveal clues, verify uniqueness, repair.
"""

import random
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Iterable, Union
import yaml

from ..core.puzzle import Grid, PuzzleSpec, PuzzleResult, FailureKind
from ..core.validator import PuzzleValidator
from ..core.utils import setup_logger, timer, make_rng
from ..solvers import UniquenessSolver, SolverConfig, SolverResult
from .path_generator import PathGenerator, PathGeneratorConfig
from .clue_placer import CluePlacer, desired_count_for
from .. import config as defaults


class PuzzleBuilderConfig:
    """Configuration for puzzle builder"""

    def __init__(self, **kwargs):
        # Budgets
        self.max_attempts: int = kwargs.get('max_attempts', defaults.MAX_ATTEMPTS)
        self.max_repair_attempts: int = kwargs.get('max_repair_attempts', defaults.MAX_REPAIR_ATTEMPTS)
        self.use_fallback: bool = kwargs.get('use_fallback', True)

        # Clue counts keyed by total cells
        self.clue_counts: dict = dict(kwargs.get('clue_counts', defaults.CLUE_COUNT_TABLE))
        self.default_clue_count: int = kwargs.get('default_clue_count', defaults.DEFAULT_CLUE_COUNT)

        # Search limits
        self.path_max_steps: int = kwargs.get('path_max_steps', defaults.PATH_MAX_STEPS)
        self.max_solutions: int = kwargs.get('max_solutions', defaults.MAX_SOLUTIONS)
        self.solver_max_iterations: Optional[int] = kwargs.get('solver_max_iterations',
                                                               defaults.SOLVER_MAX_ITERATIONS)

        # Logging
        self.verbose: bool = kwargs.get('verbose', False)
        self.log_file: Optional[Path] = kwargs.get('log_file', None)

    def desired_count(self, total_cells: int) -> int:
        return desired_count_for(total_cells, self.clue_counts, self.default_clue_count)

    def to_dict(self) -> dict:
        data = dict(vars(self))
        data['log_file'] = str(self.log_file) if self.log_file else None
        return data

    @classmethod
    def from_yaml(cls, filepath: Union[str, Path]) -> 'PuzzleBuilderConfig':
        """Load builder settings from a YAML file (top level or under a 'builder' key)"""
        with open(filepath, 'r') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping in {filepath}")
        return cls(**data.get('builder', data))


@dataclass
class RepairOutcome:
    """State after the repair loop and fallback"""
    positions: List[int]
    spec: PuzzleSpec
    result: SolverResult
    repairs: int = 0
    used_fallback: bool = False


def first_divergence(path: Sequence[int], other: Sequence[int]) -> Optional[int]:
    """First step position where two paths visit different cells"""
    for step, (a, b) in enumerate(zip(path, other)):
        if a != b:
            return step
    if len(path) != len(other):
        return min(len(path), len(other))
    return None


class PuzzleBuilder:
    """Generate zip path puzzles with a verified unique solution"""

    def __init__(self, config: Optional[PuzzleBuilderConfig] = None):
        self.config = config or PuzzleBuilderConfig()
        self.logger = setup_logger(
            self.__class__.__name__,
            self.config.log_file,
            "DEBUG" if self.config.verbose else "INFO"
        )

        self.path_generator = PathGenerator(PathGeneratorConfig(
            max_steps=self.config.path_max_steps,
            verbose=self.config.verbose
        ))
        self.solver = UniquenessSolver(SolverConfig(
            max_solutions=self.config.max_solutions,
            max_iterations=self.config.solver_max_iterations,
            log_file=self.config.log_file
        ))

        # Outcome of the last build call
        self.last_failure: Optional[FailureKind] = None
        self.failures: Counter = Counter()

    @timer
    def build(self, grid_size: int = defaults.DEFAULT_GRID_SIZE,
              rng: Union[None, int, random.Random] = None) -> Optional[PuzzleResult]:
        """
        Generate a puzzle.

        Args:
            grid_size: Size of the square grid
            rng: Random source (or int seed); a fresh one if None

        Returns:
            The puzzle, or None once the attempt budget is spent
        """
        rng = make_rng(rng)
        grid = Grid(grid_size)
        placer = CluePlacer(grid)
        desired = self.config.desired_count(grid.total_cells)

        self.last_failure = None
        self.failures = Counter()

        self.logger.info(f"Generating {grid.size}x{grid.size} puzzle with {desired} initial clues")

        for attempt in range(1, self.config.max_attempts + 1):
            path = self.path_generator.generate_path(grid, rng)
            if path is None:
                self.failures[FailureKind.PATH_GENERATION] += 1
                self.logger.debug(f"Attempt {attempt}: no path found")
                continue

            positions = placer.place_clues(path, desired)
            spec = PuzzleSpec.from_positions(path, positions, grid.size)
            result = self.solver.solve(spec)
            self.logger.info(f"Attempt {attempt} initial: {result.count} solution(s)")

            if not result.is_unique:
                outcome = self.resolve_ambiguity(path, positions, grid.size, result)
                spec, result = outcome.spec, outcome.result

            if not result.is_unique:
                self.failures[FailureKind.UNIQUENESS] += 1
                self.logger.info(f"Attempt {attempt}: still {result.count} solution(s), restarting")
                continue

            puzzle = PuzzleResult(
                clues=spec.clues,
                solution=tuple(result.solutions[0]),
                clue_count=len(spec.clues),
                attempts=attempt,
                grid_size=grid.size
            )

            validation = PuzzleValidator.validate_result(puzzle)
            if not validation:
                self.failures[FailureKind.UNIQUENESS] += 1
                self.logger.warning(f"Generated invalid puzzle: {validation.errors}")
                continue

            self.logger.info(f"Found unique puzzle with {puzzle.clue_count} clues on attempt {attempt}")
            return puzzle

        self.last_failure = FailureKind.EXHAUSTED
        self.logger.warning(
            f"Could not find a unique puzzle after {self.config.max_attempts} attempts "
            f"({dict((k.value, v) for k, v in self.failures.items())})"
        )
        return None

    def resolve_ambiguity(self, path: Sequence[int], positions: Iterable[int],
                          grid_size: int, result: Optional[SolverResult] = None) -> RepairOutcome:
        """
        Reveal more path positions until the clue set is unique or the
        repair budget and fallback are spent.

        Each round contrasts the generating path with one alternate solution
        and reveals the first step position where they part.

        Args:
            path: The generating path
            positions: Currently revealed step positions
            grid_size: Grid size
            result: Solver result for ``positions`` if already known

        Returns:
            Repair outcome holding the final positions, spec and solver result
        """
        path = list(path)
        total = len(path)
        revealed = set(positions)
        spec = PuzzleSpec.from_positions(path, revealed, grid_size)
        if result is None:
            result = self.solver.solve(spec)

        repairs = 0
        while result.count > 1 and repairs < self.config.max_repair_attempts:
            alternate = self._pick_alternate(path, result.solutions)
            if alternate is None:
                break

            step = first_divergence(path, alternate)
            if step is not None and step < total and step not in revealed:
                revealed.add(step)
                spec = PuzzleSpec.from_positions(path, revealed, grid_size)
                self.logger.info(f"Fix {repairs + 1}: added clue at step {step + 1}")
                result = self.solver.solve(spec)

            repairs += 1

        used_fallback = False
        if (self.config.use_fallback and result.count > 1
                and repairs >= self.config.max_repair_attempts):
            self.logger.info("Fallback: adding 2 extra clues")
            revealed.update((total // 3, total * 2 // 3))
            spec = PuzzleSpec.from_positions(path, revealed, grid_size)
            result = self.solver.solve(spec)
            used_fallback = True
            self.logger.info(f"After fallback: {result.count} solution(s), {len(revealed)} total clues")

        return RepairOutcome(
            positions=sorted(revealed),
            spec=spec,
            result=result,
            repairs=repairs,
            used_fallback=used_fallback
        )

    @staticmethod
    def _pick_alternate(path: List[int], solutions: List[List[int]]) -> Optional[List[int]]:
        """A solution other than the generating path: the second if the first is the path"""
        if not solutions:
            return None
        if solutions[0] == path:
            return solutions[1] if len(solutions) > 1 else None
        return solutions[0]


def generate_puzzle(grid_size: int = defaults.DEFAULT_GRID_SIZE,
                    rng: Union[None, int, random.Random] = None,
                    config: Optional[PuzzleBuilderConfig] = None) -> Optional[PuzzleResult]:
    """
    Generate a puzzle whose clues admit exactly one solution.

    Args:
        grid_size: Size of the square grid
        rng: Random source or int seed; identical seeds give identical puzzles
        config: Optional builder configuration

    Returns:
        The puzzle, or None if the attempt budget ran out
    """
    return PuzzleBuilder(config).build(grid_size, rng)
