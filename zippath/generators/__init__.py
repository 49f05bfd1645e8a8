"""
Puzzle generators for zip path puzzles.
"""

from .path_generator import PathGenerator, PathGeneratorConfig
from .clue_placer import CluePlacer, desired_count_for
from .puzzle_builder import (
    PuzzleBuilder, PuzzleBuilderConfig, RepairOutcome,
    first_divergence, generate_puzzle
)

__all__ = [
    # Main builder
    'PuzzleBuilder', 'PuzzleBuilderConfig', 'RepairOutcome',
    'generate_puzzle',

    # Building blocks
    'PathGenerator', 'PathGeneratorConfig',
    'CluePlacer', 'desired_count_for',
    'first_divergence'
]
