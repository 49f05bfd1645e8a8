"""
Static visualization for zip path puzzles.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
from typing import Optional, Tuple, List
from pathlib import Path

from ..core.puzzle import PuzzleResult
from .. import config as defaults


class PuzzleVisualizer:
    """Visualize zip path puzzles"""

    def __init__(self, figsize: Tuple[int, int] = defaults.VIZ_FIGSIZE, dpi: int = defaults.VIZ_DPI):
        """
        Initialize visualizer.

        Args:
            figsize: Figure size in inches
            dpi: Dots per inch for saved images
        """
        self.figsize = figsize
        self.dpi = dpi

        # Visual parameters
        self.clue_radius = 0.3
        self.path_width = 6
        self.grid_color = '#E0E0E0'
        self.clue_color = '#2E86AB'
        self.path_color = '#F18F01'
        self.number_color = 'white'
        self.background_color = '#F7F7F7'

    def visualize(self, puzzle: PuzzleResult,
                  show_solution: bool = True,
                  show_grid: bool = True,
                  title: Optional[str] = None,
                  save_path: Optional[Path] = None,
                  show_plot: bool = False) -> plt.Figure:
        """
        Create visualization of puzzle.

        Args:
            puzzle: The puzzle to visualize
            show_solution: Whether to draw the solution path
            show_grid: Whether to show grid lines
            title: Optional title for the plot
            save_path: Optional path to save the image
            show_plot: Whether to display the plot

        Returns:
            The matplotlib figure
        """
        fig, ax = plt.subplots(figsize=self.figsize)
        fig.patch.set_facecolor(self.background_color)
        ax.set_facecolor(self.background_color)

        self._setup_axis(ax, puzzle.grid_size)

        if show_grid:
            self._draw_grid(ax, puzzle.grid_size)

        # Path first so clues sit on top of it
        if show_solution and puzzle.solution:
            self._draw_path(ax, puzzle)

        self._draw_clues(ax, puzzle)

        if title:
            ax.set_title(title, fontsize=16, pad=20)

        if save_path:
            save_path = Path(save_path)
            save_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(save_path, dpi=self.dpi, bbox_inches='tight',
                        facecolor=self.background_color)

        if show_plot:
            plt.show()
        else:
            plt.close(fig)

        return fig

    def _setup_axis(self, ax, size: int):
        ax.set_xlim(-0.5, size - 0.5)
        ax.set_ylim(-0.5, size - 0.5)
        ax.set_aspect('equal')

        # Row 0 at the top
        ax.invert_yaxis()

        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)

    def _draw_grid(self, ax, size: int):
        """Draw cell borders"""
        for k in np.arange(-0.5, size, 1.0):
            ax.axvline(k, color=self.grid_color, linewidth=1)
            ax.axhline(k, color=self.grid_color, linewidth=1)

    def _draw_path(self, ax, puzzle: PuzzleResult):
        """Draw the solution path as one polyline through cell centres"""
        cells = np.asarray(puzzle.solution)
        rows = cells // puzzle.grid_size
        cols = cells % puzzle.grid_size
        ax.plot(cols, rows, color=self.path_color, linewidth=self.path_width,
                solid_capstyle='round', solid_joinstyle='round', zorder=1)

    def _draw_clues(self, ax, puzzle: PuzzleResult):
        """Draw numbered clue cells"""
        for clue in puzzle.clues:
            row, col = divmod(clue.index, puzzle.grid_size)
            circle = plt.Circle((col, row), self.clue_radius,
                                color=self.clue_color, zorder=2)
            ax.add_patch(circle)
            ax.text(col, row, str(clue.value),
                    ha='center', va='center', fontsize=14, fontweight='bold',
                    color=self.number_color, zorder=3)

    def create_puzzle_sheet(self, puzzles: List[PuzzleResult],
                            rows: int, cols: int,
                            save_path: Optional[Path] = None) -> plt.Figure:
        """Create a sheet of multiple puzzles (for printing)"""
        fig, axes = plt.subplots(rows, cols, figsize=(cols * 3, rows * 3), squeeze=False)

        puzzle_idx = 0

        for i in range(rows):
            for j in range(cols):
                ax = axes[i][j]

                if puzzle_idx < len(puzzles):
                    puzzle = puzzles[puzzle_idx]
                    self._setup_axis(ax, puzzle.grid_size)
                    self._draw_grid(ax, puzzle.grid_size)

                    # Clues only, no solution
                    self._draw_clues(ax, puzzle)

                    ax.text(0.02, 0.98, f"#{puzzle_idx + 1}",
                            transform=ax.transAxes,
                            ha='left', va='top',
                            fontsize=10)

                    puzzle_idx += 1
                else:
                    ax.set_visible(False)

        plt.tight_layout()

        if save_path:
            save_path = Path(save_path)
            save_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(save_path, dpi=self.dpi, bbox_inches='tight')

        plt.close(fig)
        return fig
