"""
Sorting benchmark system

Runs the sorting algorithms repeatedly over generated data of growing size,
aggregates the timings and stores the results as JSON so later runs can be
compared against a baseline.
"""

import json
import logging
import statistics
import time
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from ..comparators import Comparator, ascending
from ..config import SorterConfig, load_config
from ..logging_config import LOG_FORMAT
from ..sort_manager import SortAlgorithm, get_sort_function

SortFunction = Callable[[List[Any], Comparator], None]


def _identity(value: Any) -> Any:
    return value


NATURAL_ORDER: Comparator = ascending(_identity)


class BenchmarkStatus(Enum):
    """Benchmark run status."""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class DataPattern(Enum):
    """Shape of the generated input data."""
    RANDOM = "random"
    SORTED = "sorted"
    REVERSED = "reversed"
    NEARLY_SORTED = "nearly_sorted"
    DUPLICATE_HEAVY = "duplicate_heavy"


@dataclass
class BenchmarkConfig:
    """Benchmark configuration."""
    algorithm_name: str
    test_sizes: List[int]
    iterations: int = 3
    warmup_iterations: int = 1
    data_pattern: str = DataPattern.RANDOM.value
    seed: Optional[int] = None


@dataclass
class PerformanceMetrics:
    """Timing of a single sort run."""
    algorithm_name: str
    input_size: int
    execution_time: float
    throughput: Optional[float] = None
    timestamp: Optional[str] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now().isoformat()

        # elements per second
        if self.throughput is None and self.execution_time > 0:
            self.throughput = self.input_size / self.execution_time


@dataclass
class BenchmarkResult:
    """Outcome of a benchmark run."""
    config: BenchmarkConfig
    metrics: List[PerformanceMetrics] = field(default_factory=list)
    status: BenchmarkStatus = BenchmarkStatus.PENDING
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    error_message: Optional[str] = None

    def get_summary_statistics(self) -> Dict[str, Any]:
        """Aggregate execution times and throughput per input size."""
        if not self.metrics:
            return {}

        size_groups: Dict[int, List[PerformanceMetrics]] = {}
        for metric in self.metrics:
            size_groups.setdefault(metric.input_size, []).append(metric)

        summary = {}
        for size, group_metrics in size_groups.items():
            execution_times = [m.execution_time for m in group_metrics]
            throughputs = [m.throughput for m in group_metrics if m.throughput]

            size_summary = {
                "input_size": size,
                "sample_count": len(execution_times),
                "execution_time": _describe(execution_times),
            }
            if throughputs:
                size_summary["throughput"] = _describe(throughputs)

            summary[f"size_{size}"] = size_summary

        return summary

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BenchmarkResult":
        return cls(
            config=BenchmarkConfig(**data["config"]),
            metrics=[PerformanceMetrics(**m) for m in data["metrics"]],
            status=BenchmarkStatus(data["status"]),
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            error_message=data.get("error_message"),
        )


def _describe(values: List[float]) -> Dict[str, float]:
    return {
        "mean": statistics.mean(values),
        "median": statistics.median(values),
        "std": statistics.stdev(values) if len(values) > 1 else 0,
        "min": min(values),
        "max": max(values)
    }


class DataGenerator:
    """Test data generator backed by a seedable numpy generator."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def generate(self, pattern: str, size: int) -> List[int]:
        """Generate ``size`` integers following ``pattern``."""
        pattern = DataPattern(pattern)
        if pattern is DataPattern.SORTED:
            return self.generate_sorted_integers(size)
        if pattern is DataPattern.REVERSED:
            return self.generate_sorted_integers(size, reverse=True)
        if pattern is DataPattern.NEARLY_SORTED:
            return self.generate_nearly_sorted(size)
        if pattern is DataPattern.DUPLICATE_HEAVY:
            return self.generate_duplicate_heavy(size)
        return self.generate_random_integers(size)

    def generate_random_integers(self, size: int, min_val: int = 0,
                                 max_val: Optional[int] = None) -> List[int]:
        if max_val is None:
            max_val = max(size * 2, min_val + 1)
        return self.rng.integers(min_val, max_val, size).tolist()

    @staticmethod
    def generate_sorted_integers(size: int, reverse: bool = False) -> List[int]:
        data = list(range(size))
        return data[::-1] if reverse else data

    def generate_nearly_sorted(self, size: int, disorder_ratio: float = 0.1) -> List[int]:
        data = list(range(size))
        if size < 2:
            return data
        for _ in range(int(size * disorder_ratio)):
            i, j = self.rng.choice(size, 2, replace=False)
            data[i], data[j] = data[j], data[i]
        return data

    def generate_duplicate_heavy(self, size: int, unique_ratio: float = 0.1) -> List[int]:
        unique_count = max(1, int(size * unique_ratio))
        return self.rng.integers(0, unique_count, size).tolist()


class PerformanceBenchmark:
    """
    Sorting benchmark runner.

    Each run writes ``<algorithm>_<timestamp>.json`` into ``results_dir``;
    log records also go to ``results_dir/benchmark.log``.
    """

    def __init__(self, results_dir: str = "benchmarks/results",
                 comparator: Comparator = NATURAL_ORDER):
        """
        Args:
            results_dir: directory receiving result files
            comparator: comparator passed to every sort call
        """
        self.results_dir = Path(results_dir)
        self.results_dir.mkdir(parents=True, exist_ok=True)
        self.comparator = comparator

        self.logger = logging.getLogger(__name__)
        self._file_handler = self._setup_logging()

    def _setup_logging(self) -> logging.Handler:
        formatter = logging.Formatter(LOG_FORMAT)
        file_handler = logging.FileHandler(self.results_dir / "benchmark.log")
        file_handler.setFormatter(formatter)

        self.logger.addHandler(file_handler)
        self.logger.setLevel(logging.INFO)
        return file_handler

    def close(self) -> None:
        """Detach and close the log file handler."""
        self.logger.removeHandler(self._file_handler)
        self._file_handler.close()

    def run_benchmark(self, sort_func: Optional[SortFunction],
                      config: BenchmarkConfig) -> BenchmarkResult:
        """
        Run a benchmark.

        Args:
            sort_func: sorting function; ``None`` resolves
                ``config.algorithm_name`` through the dispatcher
            config: benchmark configuration

        Returns:
            The benchmark result; failures are reported through its status
        """
        benchmark_id = f"{config.algorithm_name}_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"
        result = BenchmarkResult(
            config=config,
            status=BenchmarkStatus.RUNNING,
            start_time=datetime.now().isoformat()
        )
        generator = DataGenerator(config.seed)

        try:
            if sort_func is None:
                sort_func = get_sort_function(config.algorithm_name)
            self.logger.info(f"Starting benchmark: {config.algorithm_name}")

            for size in config.test_sizes:
                self.logger.info(f"Input size: {size}")
                test_data = generator.generate(config.data_pattern, size)

                for _ in range(config.warmup_iterations):
                    sort_func(list(test_data), self.comparator)

                for _ in range(config.iterations):
                    result.metrics.append(self._measure_performance(
                        sort_func, test_data, config.algorithm_name, size
                    ))

            result.status = BenchmarkStatus.COMPLETED
            self.logger.info(f"Benchmark completed: {config.algorithm_name}")

        except Exception as e:
            result.status = BenchmarkStatus.FAILED
            result.error_message = str(e)
            self.logger.error(f"Benchmark failed: {config.algorithm_name} - {e}")

        finally:
            result.end_time = datetime.now().isoformat()
            self._save_result(benchmark_id, result)

        return result

    def run_comparative_benchmark(self, test_sizes: List[int], iterations: int = 3,
                                  algorithms: Optional[Dict[str, SortFunction]] = None,
                                  data_pattern: str = DataPattern.RANDOM.value,
                                  seed: Optional[int] = None) -> Dict[str, BenchmarkResult]:
        """
        Benchmark several algorithms on identical data.

        Args:
            test_sizes: input sizes
            iterations: measured runs per size
            algorithms: ``{name: sort function}``, all six algorithms by default
            data_pattern: generated data pattern
            seed: generator seed shared by every algorithm

        Returns:
            Results keyed by algorithm name
        """
        if algorithms is None:
            algorithms = {a.value: get_sort_function(a) for a in SortAlgorithm}

        results = {}
        for name, sort_func in algorithms.items():
            config = BenchmarkConfig(
                algorithm_name=name,
                test_sizes=test_sizes,
                iterations=iterations,
                data_pattern=data_pattern,
                seed=seed,
            )
            results[name] = self.run_benchmark(sort_func, config)

        self._generate_comparative_report(results)
        return results

    def run_regression_test(self, sort_func: Optional[SortFunction], baseline_file: str,
                            tolerance: float = 0.1) -> Dict[str, Any]:
        """
        Compare a fresh run against a stored result.

        Args:
            sort_func: sorting function, ``None`` to use the baseline's algorithm
            baseline_file: JSON result written by an earlier ``run_benchmark``
            tolerance: allowed relative change of the mean execution time

        Raises:
            ValueError: the baseline cannot be loaded
        """
        baseline_result = self._load_baseline(baseline_file)
        if baseline_result is None:
            raise ValueError(f"Cannot load baseline: {baseline_file}")

        current_result = self.run_benchmark(sort_func, baseline_result.config)
        regression_analysis = self._analyze_regression(
            baseline_result, current_result, tolerance
        )

        name = baseline_result.config.algorithm_name
        report_file = self.results_dir / f"regression_{name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
        with open(report_file, 'w', encoding='utf-8') as f:
            json.dump(regression_analysis, f, indent=2)

        return regression_analysis

    def _measure_performance(self, sort_func: SortFunction, test_data: List[int],
                             algorithm_name: str, input_size: int) -> PerformanceMetrics:
        # sorts mutate their input, so every run gets a fresh copy
        data_copy = list(test_data)

        start_time = time.perf_counter()
        sort_func(data_copy, self.comparator)
        execution_time = time.perf_counter() - start_time

        return PerformanceMetrics(
            algorithm_name=algorithm_name,
            input_size=input_size,
            execution_time=execution_time
        )

    def _save_result(self, benchmark_id: str, result: BenchmarkResult) -> Path:
        result_file = self.results_dir / f"{benchmark_id}.json"
        with open(result_file, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, indent=2)
        return result_file

    def _load_baseline(self, baseline_file: str) -> Optional[BenchmarkResult]:
        try:
            with open(baseline_file, 'r', encoding='utf-8') as f:
                return BenchmarkResult.from_dict(json.load(f))
        except (OSError, ValueError, KeyError, TypeError) as e:
            self.logger.error(f"Failed to load baseline: {e}")
            return None

    def _analyze_regression(self, baseline: BenchmarkResult, current: BenchmarkResult,
                            tolerance: float) -> Dict[str, Any]:
        baseline_summary = baseline.get_summary_statistics()
        current_summary = current.get_summary_statistics()

        regression_results = {
            "test_timestamp": datetime.now().isoformat(),
            "algorithm_name": current.config.algorithm_name,
            "tolerance": tolerance,
            "overall_status": "PASS",
            "size_comparisons": {}
        }

        for size_key, baseline_size in baseline_summary.items():
            if size_key not in current_summary:
                continue

            baseline_time = baseline_size["execution_time"]["mean"]
            current_time = current_summary[size_key]["execution_time"]["mean"]
            if baseline_time > 0:
                performance_change = (current_time - baseline_time) / baseline_time
            else:
                performance_change = 0.0

            size_result = {
                "baseline_time": baseline_time,
                "current_time": current_time,
                "performance_change": performance_change,
                "status": "PASS" if performance_change <= tolerance else "FAIL"
            }
            if size_result["status"] == "FAIL":
                regression_results["overall_status"] = "FAIL"

            regression_results["size_comparisons"][size_key] = size_result

        return regression_results

    def _generate_comparative_report(self, results: Dict[str, BenchmarkResult]) -> Path:
        report_file = self.results_dir / f"comparative_report_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.json"

        report = {
            "timestamp": datetime.now().isoformat(),
            "algorithms": list(results.keys()),
            "summary": {}
        }
        for name, result in results.items():
            if result.status == BenchmarkStatus.COMPLETED:
                report["summary"][name] = result.get_summary_statistics()

        with open(report_file, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2)

        self.logger.info(f"Comparative report written: {report_file}")
        return report_file


def create_sorting_benchmark(config: Optional[SorterConfig] = None) -> PerformanceBenchmark:
    """Create a benchmark writing into the configured results directory."""
    config = config or load_config()
    return PerformanceBenchmark(config.results_dir)
