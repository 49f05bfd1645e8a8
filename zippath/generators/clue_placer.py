"""
Clue placement along a generated path.
"""

from typing import List, Sequence, Union, Optional, Dict
import numpy as np

from ..core.puzzle import Grid
from .. import config as defaults


def desired_count_for(total_cells: int, table: Optional[Dict[int, int]] = None,
                      default: int = defaults.DEFAULT_CLUE_COUNT) -> int:
    """Total clue count (endpoints included) for a grid of ``total_cells`` cells"""
    table = defaults.CLUE_COUNT_TABLE if table is None else table
    return table.get(total_cells, default)


class CluePlacer:
    """
    Choose which path positions to reveal as clues.

    Both endpoints are always revealed. Further positions are added
    greedily: each round picks the interior position farthest (Manhattan)
    from every revealed cell, with a small bonus for being far along the
    path from revealed steps. Ties go to the lowest position.
    """

    def __init__(self, grid_size: Union[int, Grid],
                 path_weight: float = defaults.PATH_DISTANCE_WEIGHT):
        self.grid = grid_size if isinstance(grid_size, Grid) else Grid(grid_size)
        self.path_weight = path_weight

    def place_clues(self, path: Sequence[int], desired_count: int) -> List[int]:
        """
        Select revealed positions.

        Args:
            path: The generating path (cell indices)
            desired_count: Total number of positions wanted

        Returns:
            Sorted list of positions into ``path``
        """
        length = len(path)
        if length == 0:
            return []

        selected = sorted({0, length - 1})
        if length <= 2:
            return selected

        cells = np.asarray(path)
        rows = cells // self.grid.size
        cols = cells % self.grid.size
        steps = np.arange(length)

        # Distances to the nearest revealed position, kept up to date per pick
        min_manhattan = np.full(length, np.inf)
        min_path = np.full(length, np.inf)
        available = np.ones(length, dtype=bool)

        def reveal(pos):
            np.minimum(min_manhattan, np.abs(rows - rows[pos]) + np.abs(cols - cols[pos]),
                       out=min_manhattan)
            np.minimum(min_path, np.abs(steps - pos), out=min_path)
            available[pos] = False

        for pos in selected:
            reveal(pos)

        while len(selected) < desired_count and available.any():
            scores = min_manhattan + (min_path / length) * self.path_weight
            scores[~available] = -np.inf
            best = int(np.argmax(scores))
            reveal(best)
            selected.append(best)

        return sorted(selected)
