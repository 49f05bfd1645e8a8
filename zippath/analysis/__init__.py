"""
Benchmarking tools for zip path puzzle generation.
"""

from .benchmark import (
    Benchmark, BenchmarkConfig, BenchmarkResult,
    BenchmarkAnalyzer
)

__all__ = [
    'Benchmark', 'BenchmarkConfig', 'BenchmarkResult',
    'BenchmarkAnalyzer'
]
