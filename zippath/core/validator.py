"""
Validator for zip path puzzle constraints.
"""

from functools import lru_cache
from typing import List, Optional, Sequence, Iterable
import networkx as nx

from .puzzle import Grid, Clue, PuzzleResult


class ValidationResult:
    """Result of puzzle validation"""

    def __init__(self):
        self.is_valid = True
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def add_error(self, error: str):
        """Add an error message"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)

    def merge(self, other: 'ValidationResult'):
        for error in other.errors:
            self.add_error(error)
        self.warnings.extend(other.warnings)

    def __bool__(self):
        return self.is_valid

    def __repr__(self):
        status = "Valid" if self.is_valid else "Invalid"
        return f"ValidationResult({status}, {len(self.errors)} errors, {len(self.warnings)} warnings)"


@lru_cache(maxsize=16)
def _grid_graph(size: int) -> nx.Graph:
    """Lattice graph of a grid, nodes are (row, col)"""
    return nx.grid_2d_graph(size, size)


class PuzzleValidator:
    """Validates paths, clue sets and finished puzzles"""

    @staticmethod
    def validate_path(path: Sequence[int], grid: Grid) -> ValidationResult:
        """Check the Hamiltonian invariant: every cell once, consecutive cells adjacent"""
        result = ValidationResult()

        if len(path) != grid.total_cells:
            result.add_error(f"Path has {len(path)} cells, grid has {grid.total_cells}")

        seen = set()
        for idx in path:
            if not grid.contains(idx):
                result.add_error(f"Path cell {idx} is outside the grid")
            elif idx in seen:
                result.add_error(f"Path visits cell {idx} more than once")
            seen.add(idx)

        if not result:
            return result

        graph = _grid_graph(grid.size)
        for step, (a, b) in enumerate(zip(path, path[1:]), 1):
            if not graph.has_edge(grid.row_col(a), grid.row_col(b)):
                result.add_error(f"Step {step}: cells {a} and {b} are not adjacent")

        return result

    @staticmethod
    def validate_clues(clues: Iterable[Clue], grid: Grid,
                       require_sequence: bool = True) -> ValidationResult:
        """
        Validate a clue set.

        Args:
            clues: Clues to check
            grid: Grid the clues live on
            require_sequence: Whether values must be exactly 1..K

        Returns:
            Validation result
        """
        result = ValidationResult()
        clues = list(clues)

        cells = set()
        values = set()
        for clue in clues:
            if not grid.contains(clue.index):
                result.add_error(f"Clue {clue.value} references cell {clue.index} outside the grid")
            if clue.index in cells:
                result.add_error(f"Cell {clue.index} carries more than one clue")
            if clue.value in values:
                result.add_error(f"Clue value {clue.value} is used more than once")
            cells.add(clue.index)
            values.add(clue.value)

        if require_sequence and values != set(range(1, len(clues) + 1)):
            result.add_error(f"Clue values {sorted(values)} are not exactly 1..{len(clues)}")

        if not clues:
            result.add_warning("Clue set is empty")

        return result

    @staticmethod
    def validate_solution(path: Sequence[int], clues: Iterable[Clue],
                          grid: Grid) -> ValidationResult:
        """Validate that a path is a full solution of a clue set"""
        result = PuzzleValidator.validate_path(path, grid)
        if not result:
            return result

        clue_at = {c.index: c.value for c in clues}
        if path and clue_at.get(path[0]) != 1:
            result.add_error(f"Path starts at cell {path[0]}, which is not clue 1")

        expected = 1
        for step, idx in enumerate(path):
            value = clue_at.get(idx)
            if value is None:
                continue
            if value != expected:
                result.add_error(f"Step {step}: reached clue {value} while expecting {expected}")
                break
            expected += 1

        return result

    @staticmethod
    def validate_result(puzzle: PuzzleResult) -> ValidationResult:
        """Validate every structural property of a finished puzzle"""
        grid = Grid(puzzle.grid_size)
        result = ValidationResult()

        result.merge(PuzzleValidator.validate_clues(puzzle.clues, grid))
        result.merge(PuzzleValidator.validate_solution(puzzle.solution, puzzle.clues, grid))

        if puzzle.clue_count != len(puzzle.clues):
            result.add_error(f"clue_count {puzzle.clue_count} != {len(puzzle.clues)} clues")

        if puzzle.clues and puzzle.solution:
            clue_at = {c.index: c.value for c in puzzle.clues}
            if clue_at.get(puzzle.solution[-1]) != puzzle.clue_count:
                result.add_error("Last clue does not sit on the final cell of the solution")

        if puzzle.attempts < 1:
            result.add_warning(f"Unusual attempt count: {puzzle.attempts}")

        return result

    @staticmethod
    def next_expected_value(path: Sequence[int], clues: Iterable[Clue]) -> int:
        """Clue value a partial path must reach next"""
        clue_at = {c.index: c.value for c in clues}
        expected = 1
        for idx in path:
            if clue_at.get(idx) == expected:
                expected += 1
        return expected

    @staticmethod
    def can_extend(path: Sequence[int], cell: int, clues: Iterable[Clue],
                   grid: Grid) -> bool:
        """
        Check whether a partial path may be extended into a cell.

        This is the rule the solver enumerates with; an interactive editor
        re-applies it to every proposed extension.
        """
        clues = list(clues)
        if not grid.contains(cell) or cell in path:
            return False

        clue_at = {c.index: c.value for c in clues}
        if not path:
            return clue_at.get(cell) == 1

        if not grid.is_adjacent(path[-1], cell):
            return False

        value = clue_at.get(cell)
        return value is None or value == PuzzleValidator.next_expected_value(path, clues)

    @staticmethod
    def get_puzzle_statistics(puzzle: PuzzleResult) -> dict:
        """Get various statistics about a finished puzzle"""
        grid = Grid(puzzle.grid_size)
        solution = list(puzzle.solution)
        position = {idx: step for step, idx in enumerate(solution)}

        steps = sorted(position[c.index] for c in puzzle.clues if c.index in position)
        gaps = [b - a for a, b in zip(steps, steps[1:])]

        turns = 0
        for a, b, c in zip(solution, solution[1:], solution[2:]):
            if (b - a) != (c - b):
                turns += 1

        stats = {
            'grid_size': puzzle.grid_size,
            'total_cells': grid.total_cells,
            'clue_count': puzzle.clue_count,
            'attempts': puzzle.attempts,
            'clue_density': puzzle.clue_count / grid.total_cells,
            'avg_clue_gap': sum(gaps) / len(gaps) if gaps else 0,
            'max_clue_gap': max(gaps) if gaps else 0,
            'turns': turns,
        }
        return stats
