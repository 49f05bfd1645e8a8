from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
PUZZLES_DIR = DATA_DIR / "puzzles"
SOLUTIONS_DIR = DATA_DIR / "solutions"
BENCHMARKS_DIR = DATA_DIR / "benchmarks"

# Results directories
RESULTS_DIR = PROJECT_ROOT / "results"
RESULTS_VIZ_DIR = RESULTS_DIR / "visualizations"
RESULTS_LOGS_DIR = RESULTS_DIR / "logs"

# Grid parameters
DEFAULT_GRID_SIZE = 6

# Generation budgets
MAX_ATTEMPTS = 50
MAX_REPAIR_ATTEMPTS = 15
PATH_MAX_STEPS = 200000

# Solver parameters
MAX_SOLUTIONS = 5
SOLVER_MAX_ITERATIONS = 2000000

# Total clues (endpoints included) keyed by cell count
CLUE_COUNT_TABLE = {
    25: 6,   # 5x5: 24%
    36: 8,   # 6x6: 22%
    49: 10,  # 7x7: 20%
    64: 12,  # 8x8: 19%
}
DEFAULT_CLUE_COUNT = 8

# Clue placement: weight of sequential spread against spatial spread
PATH_DISTANCE_WEIGHT = 0.15

# Visualization settings
VIZ_DPI = 300
VIZ_FIGSIZE = (8, 8)

# Logging configuration
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def ensure_directories():
    """Create the data and results directories if they don't exist"""
    for dir_path in [PUZZLES_DIR, SOLUTIONS_DIR, BENCHMARKS_DIR,
                     RESULTS_VIZ_DIR, RESULTS_LOGS_DIR]:
        dir_path.mkdir(parents=True, exist_ok=True)
