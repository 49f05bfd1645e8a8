"""
Backtracking solution counter for zip path clue sets.

The search starts on clue 1 and extends the path one orthogonal step at a
time. A clued cell may only be entered when its value is the next expected
one; unclued cells are always open. Every complete path is recorded, up to
``max_solutions``, so the result tells apart "no solution", "unique" and
"ambiguous" without enumerating every solution of a loose clue set.
"""

from typing import Optional, Iterable

from .base_solver import BaseSolver, SolverConfig, SolverResult, SearchLimitExceeded
from ..core.puzzle import Grid, PuzzleSpec
from .. import config as defaults


class UniquenessSolver(BaseSolver):
    """
    Enumerate solutions of a clue set in a fixed order.

    Candidates are tried in ascending cell index, so the order of
    ``solutions`` depends only on the clue set. Pruning only cuts branches
    that cannot be completed and never changes which solutions are found
    or their order.
    """

    def _solve(self, spec: PuzzleSpec) -> SolverResult:
        grid = Grid(spec.grid_size)
        total = grid.total_cells
        clue_at = spec.clue_map()

        start = spec.start_cell()
        if start is None:
            return SolverResult(message="No clue with value 1")

        neighbors = [grid.neighbors(idx) for idx in range(total)]
        visited = [False] * total
        free = [len(n) for n in neighbors]  # unvisited neighbours per cell
        path = []
        solutions = []
        cap = self.config.max_solutions
        prune = self.config.use_pruning

        def enter(cell):
            visited[cell] = True
            path.append(cell)
            for n in neighbors[cell]:
                free[n] -= 1

        def leave(cell):
            path.pop()
            visited[cell] = False
            for n in neighbors[cell]:
                free[n] += 1

        def connected():
            # Every unvisited cell must stay reachable from the head
            remaining = total - len(path)
            if remaining == 0:
                return True
            seen = set()
            stack = [n for n in neighbors[path[-1]] if not visited[n]]
            seen.update(stack)
            while stack:
                cell = stack.pop()
                for n in neighbors[cell]:
                    if not visited[n] and n not in seen:
                        seen.add(n)
                        stack.append(n)
            return len(seen) == remaining

        def stranded(previous):
            # Neighbours of the old head just lost their last ways in
            dead_ends = 0
            for n in neighbors[previous]:
                if visited[n]:
                    continue
                if free[n] == 0:
                    return True
                if free[n] == 1:
                    dead_ends += 1
                    if dead_ends > 1:
                        return True
            return not connected()

        def search(next_value):
            if len(solutions) >= cap:
                return
            if len(path) == total:
                solutions.append(list(path))
                self._call_progress_callbacks(len(solutions))
                return

            self._increment_iteration()
            head = path[-1]

            for cell in neighbors[head]:
                if visited[cell]:
                    continue
                value = clue_at.get(cell)
                if value is not None and value != next_value:
                    continue

                enter(cell)
                if not (prune and stranded(head)):
                    search(next_value + 1 if value is not None else next_value)
                leave(cell)

                if len(solutions) >= cap:
                    return

        enter(start)
        search_limited = False
        try:
            search(2)
        except SearchLimitExceeded:
            search_limited = True

        return SolverResult(
            count=len(solutions),
            solutions=solutions,
            search_limited=search_limited
        )


def solve_clues(clues: Iterable, grid_size: int = defaults.DEFAULT_GRID_SIZE,
                config: Optional[SolverConfig] = None) -> SolverResult:
    """
    Count the solutions of a clue set.

    Args:
        clues: Clue objects, {index, value} dicts or (index, value) pairs
        grid_size: Size of the square grid
        config: Optional solver configuration

    Returns:
        Solver result with ``count`` (capped) and ``solutions``
    """
    spec = PuzzleSpec.from_clues(clues, grid_size)
    return UniquenessSolver(config).solve(spec)
