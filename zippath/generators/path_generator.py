"""
Random Hamiltonian path construction.
"""

import random
from typing import List, Optional, Union

from ..core.puzzle import Grid
from ..core.utils import setup_logger
from .. import config as defaults


class PathGeneratorConfig:
    """Configuration for path generator"""

    def __init__(self, **kwargs):
        self.max_steps: int = kwargs.get('max_steps', defaults.PATH_MAX_STEPS)
        self.use_parity_check: bool = kwargs.get('use_parity_check', True)
        self.verbose: bool = kwargs.get('verbose', False)


class PathGenerator:
    """
    Build a random path that visits every grid cell exactly once.

    Randomized depth-first search from a random start. Candidates are
    shuffled, then ordered by Warnsdorff's rule (fewest unvisited
    neighbours first) so that cells about to become dead ends are
    visited early.
    """

    def __init__(self, config: Optional[PathGeneratorConfig] = None):
        self.config = config or PathGeneratorConfig()
        self.logger = setup_logger(self.__class__.__name__,
                                   level="DEBUG" if self.config.verbose else "INFO")
        self.steps = 0

    def generate_path(self, grid_size: Union[int, Grid],
                      rng: random.Random) -> Optional[List[int]]:
        """
        Generate one Hamiltonian path.

        Args:
            grid_size: Grid size (or a Grid)
            rng: Random source used for the start cell and tie shuffling

        Returns:
            List of cell indices, or None if this start led nowhere
        """
        grid = grid_size if isinstance(grid_size, Grid) else Grid(grid_size)
        total = grid.total_cells
        start = rng.randrange(total)
        self.steps = 0

        if self.config.use_parity_check and not self._can_start_at(grid, start):
            self.logger.debug(f"No Hamiltonian path can start at cell {start} on {grid}")
            return None

        visited = [False] * total
        visited[start] = True
        path = [start]
        stack = [iter(self._ordered_candidates(grid, start, visited, rng))]

        while stack:
            if len(path) == total:
                return path

            cell = next(stack[-1], None)
            if cell is None:
                # Exhausted this branch: backtrack
                stack.pop()
                visited[path.pop()] = False
                continue

            if visited[cell]:
                continue

            self.steps += 1
            if self.steps > self.config.max_steps:
                self.logger.debug(f"Gave up after {self.config.max_steps} steps from cell {start}")
                return None

            visited[cell] = True
            path.append(cell)
            stack.append(iter(self._ordered_candidates(grid, cell, visited, rng)))

        self.logger.debug(f"Search from cell {start} exhausted all branches")
        return None

    def _ordered_candidates(self, grid: Grid, cell: int, visited: List[bool],
                            rng: random.Random) -> List[int]:
        """Unvisited neighbours, shuffled, then by ascending onward degree"""
        candidates = [n for n in grid.neighbors(cell) if not visited[n]]
        rng.shuffle(candidates)
        candidates.sort(key=lambda n: sum(1 for m in grid.neighbors(n) if not visited[m]))
        return candidates

    def _can_start_at(self, grid: Grid, start: int) -> bool:
        """
        On a grid with an odd cell count a Hamiltonian path alternates
        colours and must start on the majority colour (that of cell 0).
        """
        if grid.total_cells % 2 == 0:
            return True
        return grid.color(start) == grid.color(0)
