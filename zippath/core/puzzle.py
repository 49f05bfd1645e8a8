"""
Core data structures for zip path puzzles.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Iterable, Sequence, Union
from enum import Enum
import json
from pathlib import Path


class FailureKind(Enum):
    """Reasons a generation attempt produced no puzzle"""
    PATH_GENERATION = "path_generation"
    UNIQUENESS = "uniqueness"
    EXHAUSTED = "exhausted"


class Grid:
    """Square grid of cells addressed by row-major index"""

    def __init__(self, size: int):
        """
        Initialize a grid.

        Args:
            size: Number of rows (and columns) of the grid
        """
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"Grid size must be a positive integer, got {size!r}")

        self.size = size
        self.total_cells = size * size

        # Precompute neighbourhoods, ascending by index
        self._neighbors: List[Tuple[int, ...]] = [
            self._compute_neighbors(idx) for idx in range(self.total_cells)
        ]

    def _compute_neighbors(self, idx: int) -> Tuple[int, ...]:
        row, col = self.row_col(idx)
        neighbors = []
        if row > 0:
            neighbors.append(idx - self.size)
        if col > 0:
            neighbors.append(idx - 1)
        if col < self.size - 1:
            neighbors.append(idx + 1)
        if row < self.size - 1:
            neighbors.append(idx + self.size)
        return tuple(neighbors)

    def row_col(self, idx: int) -> Tuple[int, int]:
        return idx // self.size, idx % self.size

    def index(self, row: int, col: int) -> int:
        return row * self.size + col

    def contains(self, idx: int) -> bool:
        return 0 <= idx < self.total_cells

    def neighbors(self, idx: int) -> Tuple[int, ...]:
        """Orthogonal neighbours of a cell in ascending index order"""
        return self._neighbors[idx]

    def is_adjacent(self, idx1: int, idx2: int) -> bool:
        """Check if two cells share an edge (no wraparound)"""
        return self.manhattan(idx1, idx2) == 1

    def manhattan(self, idx1: int, idx2: int) -> int:
        row1, col1 = self.row_col(idx1)
        row2, col2 = self.row_col(idx2)
        return abs(row1 - row2) + abs(col1 - col2)

    def color(self, idx: int) -> int:
        """Checkerboard colour of a cell (0 or 1)"""
        row, col = self.row_col(idx)
        return (row + col) % 2

    def __eq__(self, other):
        if isinstance(other, Grid):
            return self.size == other.size
        return False

    def __hash__(self):
        return hash(self.size)

    def __repr__(self):
        return f"Grid({self.size}x{self.size})"


@dataclass(frozen=True)
class Clue:
    """A revealed cell and the ordinal the solution path must reach it at"""
    index: int
    value: int

    def to_dict(self) -> dict:
        return {'index': self.index, 'value': self.value}

    @classmethod
    def coerce(cls, item: Union['Clue', dict, Sequence[int]]) -> 'Clue':
        """Build a clue from a Clue, an {index, value} dict or an (index, value) pair"""
        if isinstance(item, Clue):
            return item
        if isinstance(item, dict):
            try:
                return cls(int(item['index']), int(item['value']))
            except KeyError as e:
                raise ValueError(f"Clue record {item!r} is missing {e}")
        try:
            index, value = item
        except (TypeError, ValueError):
            raise ValueError(f"Cannot interpret {item!r} as a clue")
        return cls(int(index), int(value))

    def __repr__(self):
        return f"Clue({self.index}, value={self.value})"


@dataclass(frozen=True)
class PuzzleSpec:
    """A clue set on a grid, as handed to the uniqueness solver"""
    clues: Tuple[Clue, ...]
    grid_size: int

    @property
    def total_cells(self) -> int:
        return self.grid_size * self.grid_size

    @classmethod
    def from_clues(cls, clues: Iterable, grid_size: int) -> 'PuzzleSpec':
        """Create a spec from clue-like records, ordered by value"""
        coerced = sorted((Clue.coerce(c) for c in clues), key=lambda c: c.value)
        return cls(tuple(coerced), grid_size)

    @classmethod
    def from_positions(cls, path: Sequence[int], positions: Iterable[int],
                       grid_size: int) -> 'PuzzleSpec':
        """
        Materialize revealed path positions into numbered clues.

        Positions are step indices into ``path``, not grid cells. Values
        1..K are assigned in ascending position order and the clue cell is
        ``path[position]``.

        Args:
            path: The generating path
            positions: Revealed step positions
            grid_size: Grid size the path lives on

        Returns:
            A new spec; the mapping is rebuilt from scratch on every call
        """
        ordered = sorted(set(positions))
        clues = tuple(Clue(path[pos], value) for value, pos in enumerate(ordered, 1))
        return cls(clues, grid_size)

    def clue_map(self) -> Dict[int, int]:
        """Cell index -> clue value"""
        return {clue.index: clue.value for clue in self.clues}

    def start_cell(self) -> Optional[int]:
        for clue in self.clues:
            if clue.value == 1:
                return clue.index
        return None

    def __repr__(self):
        return f"PuzzleSpec({self.grid_size}x{self.grid_size}, {len(self.clues)} clues)"


@dataclass(frozen=True)
class PuzzleResult:
    """A finished puzzle whose clue set has exactly one solution"""
    clues: Tuple[Clue, ...]
    solution: Tuple[int, ...]
    clue_count: int
    attempts: int
    grid_size: int = field(default=6)

    @property
    def total_cells(self) -> int:
        return self.grid_size * self.grid_size

    def to_spec(self) -> PuzzleSpec:
        return PuzzleSpec(self.clues, self.grid_size)

    def to_dict(self) -> dict:
        """Convert result to dictionary for serialization"""
        return {
            'gridSize': self.grid_size,
            'clues': [c.to_dict() for c in self.clues],
            'solution': list(self.solution),
            'clueCount': self.clue_count,
            'attempts': self.attempts
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'PuzzleResult':
        """Create result from dictionary"""
        clues = tuple(sorted((Clue.coerce(c) for c in data['clues']),
                             key=lambda c: c.value))
        return cls(
            clues=clues,
            solution=tuple(int(i) for i in data['solution']),
            clue_count=int(data.get('clueCount', len(clues))),
            attempts=int(data.get('attempts', 0)),
            grid_size=int(data.get('gridSize', 6))
        )

    def save(self, filepath: Path):
        """Save result to JSON file"""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path) -> 'PuzzleResult':
        """Load result from JSON file"""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def __str__(self):
        """Clue grid (useful for debugging)"""
        clue_at = {c.index: c.value for c in self.clues}
        width = len(str(self.clue_count))
        rows = []
        for row in range(self.grid_size):
            cells = []
            for col in range(self.grid_size):
                value = clue_at.get(row * self.grid_size + col)
                cells.append(str(value).rjust(width) if value else '.'.rjust(width))
            rows.append(' '.join(cells))
        return '\n'.join(rows)

    def __repr__(self):
        return (f"PuzzleResult({self.grid_size}x{self.grid_size}, "
                f"{self.clue_count} clues, attempts={self.attempts})")
