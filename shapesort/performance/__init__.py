"""Multi-run benchmarking of the sorting algorithms."""

from .benchmark_system import (
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkStatus,
    DataGenerator,
    PerformanceBenchmark,
    PerformanceMetrics,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkStatus",
    "DataGenerator",
    "PerformanceBenchmark",
    "PerformanceMetrics",
]
