import unittest
import sys
import os
import random
import tempfile
from pathlib import Path

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from zippath.generators.puzzle_builder import generate_puzzle
from zippath.visualization import PuzzleVisualizer


class TestPuzzleVisualizer(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.puzzles = [generate_puzzle(4, random.Random(seed)) for seed in range(3)]

    def test_visualize_saves_image(self):
        viz = PuzzleVisualizer(figsize=(3, 3), dpi=50)
        with tempfile.TemporaryDirectory() as tmp:
            save_path = Path(tmp) / "nested" / "puzzle.png"
            fig = viz.visualize(self.puzzles[0], title="4x4", save_path=save_path)
            self.assertTrue(save_path.exists())
        self.assertEqual(len(fig.axes), 1)

    def test_puzzle_sheet(self):
        viz = PuzzleVisualizer(dpi=50)
        with tempfile.TemporaryDirectory() as tmp:
            save_path = Path(tmp) / "sheet.png"
            fig = viz.create_puzzle_sheet(self.puzzles, rows=2, cols=2, save_path=save_path)
            self.assertTrue(save_path.exists())
        # One unused slot is hidden
        self.assertEqual(sum(ax.get_visible() for ax in fig.axes), 3)


if __name__ == '__main__':
    unittest.main()
