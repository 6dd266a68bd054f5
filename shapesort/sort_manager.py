"""
Sort manager - algorithm dispatch and timing.

Resolves an algorithm identifier to one of the six sorting functions, runs
it on a caller-owned list and reports the wall-clock cost. ``sort`` is the
stateless entry point; ``SortManager`` adds logging and a per-algorithm
history of run metrics on top of it.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from .comparators import Comparator, validate_input
from .errors import InvalidInputError, UnknownAlgorithmError
from .sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SortFunction = Callable[[List[Any], Comparator], None]


class SortAlgorithm(Enum):
    """Supported sorting algorithms."""
    BUBBLE = "bubble"
    SELECTION = "selection"
    INSERTION = "insertion"
    MERGE = "merge"
    QUICK = "quick"
    HEAP = "heap"


# Accepted identifiers, matched after lower-casing. "z" is a legacy heap alias.
ALGORITHM_ALIASES: Dict[str, SortAlgorithm] = {
    "bubble": SortAlgorithm.BUBBLE,
    "b": SortAlgorithm.BUBBLE,
    "selection": SortAlgorithm.SELECTION,
    "s": SortAlgorithm.SELECTION,
    "insertion": SortAlgorithm.INSERTION,
    "i": SortAlgorithm.INSERTION,
    "merge": SortAlgorithm.MERGE,
    "m": SortAlgorithm.MERGE,
    "quick": SortAlgorithm.QUICK,
    "q": SortAlgorithm.QUICK,
    "heap": SortAlgorithm.HEAP,
    "h": SortAlgorithm.HEAP,
    "z": SortAlgorithm.HEAP,
}

_SORT_FUNCTIONS: Dict[SortAlgorithm, SortFunction] = {
    SortAlgorithm.BUBBLE: bubble_sort,
    SortAlgorithm.SELECTION: selection_sort,
    SortAlgorithm.INSERTION: insertion_sort,
    SortAlgorithm.MERGE: merge_sort,
    SortAlgorithm.QUICK: quick_sort,
    SortAlgorithm.HEAP: heap_sort,
}

if set(_SORT_FUNCTIONS) != set(SortAlgorithm):
    raise RuntimeError("every SortAlgorithm member needs a sort function")


def parse_algorithm(name: Union[str, SortAlgorithm]) -> SortAlgorithm:
    """
    Resolve an algorithm identifier.

    Args:
        name: a ``SortAlgorithm`` member or one of the identifiers in
            ``ALGORITHM_ALIASES`` (case-insensitive)

    Returns:
        The matching ``SortAlgorithm``

    Raises:
        UnknownAlgorithmError: the identifier is not supported
    """
    if isinstance(name, SortAlgorithm):
        return name
    if isinstance(name, str):
        algorithm = ALGORITHM_ALIASES.get(name.strip().lower())
        if algorithm is not None:
            return algorithm
    raise UnknownAlgorithmError(name, ALGORITHM_ALIASES.keys())


def get_sort_function(algorithm: Union[str, SortAlgorithm]) -> SortFunction:
    """Return the sorting function for an algorithm identifier."""
    return _SORT_FUNCTIONS[parse_algorithm(algorithm)]


def sort(data: List[Any], comparator: Comparator,
         algorithm: Union[str, SortAlgorithm]) -> float:
    """
    Sort ``data`` in place with the selected algorithm and time it.

    Input validation and algorithm lookup both happen before the list is
    touched, so a failing call leaves ``data`` unmodified.

    Args:
        data: list to sort, mutated in place
        comparator: precedence comparator
        algorithm: algorithm identifier

    Returns:
        Elapsed wall-clock time in seconds, measured with a monotonic clock

    Raises:
        InvalidInputError: ``data`` or ``comparator`` is missing
        UnknownAlgorithmError: ``algorithm`` is not supported
    """
    validate_input(data, comparator)
    sort_function = get_sort_function(algorithm)

    start_time = time.perf_counter()
    sort_function(data, comparator)
    return time.perf_counter() - start_time


@dataclass
class SortMetrics:
    """Metrics of a single sort run."""
    algorithm: str
    execution_time: float
    input_size: Optional[int] = None
    success: bool = True
    error_message: Optional[str] = None


class SortManager:
    """
    Logged front end over ``sort``.

    Keeps the most recent ``max_history`` runs of each algorithm so callers
    can ask for a performance summary.
    """

    def __init__(self, max_history: int = 1000):
        self.logger = logging.getLogger(__name__)
        self.max_history = max_history
        self._metrics_history: Dict[str, List[SortMetrics]] = {}

    def execute(self, data: List[Any], comparator: Comparator,
                algorithm: Union[str, SortAlgorithm]) -> float:
        """
        Sort ``data`` and record the run.

        Returns:
            Elapsed time in seconds

        Raises:
            InvalidInputError, UnknownAlgorithmError: re-raised after logging;
                rejected calls are not recorded
        """
        try:
            validate_input(data, comparator)
            resolved = parse_algorithm(algorithm)
        except (InvalidInputError, UnknownAlgorithmError) as e:
            self.logger.error(f"Sort rejected: {e}")
            raise

        input_size = len(data)
        try:
            execution_time = sort(data, comparator, resolved)
        except Exception as e:
            self._record_metrics(SortMetrics(
                algorithm=resolved.value,
                execution_time=0.0,
                input_size=input_size,
                success=False,
                error_message=str(e),
            ))
            self.logger.error(f"{resolved.value} sort failed: {e}")
            raise

        self._record_metrics(SortMetrics(
            algorithm=resolved.value,
            execution_time=execution_time,
            input_size=input_size,
        ))
        self.logger.info(
            f"{resolved.value} sort of {input_size} elements took {execution_time:.6f}s"
        )
        return execution_time

    def get_metrics(self, algorithm: Union[str, SortAlgorithm]) -> List[SortMetrics]:
        """Return the recorded runs of an algorithm."""
        return list(self._metrics_history.get(parse_algorithm(algorithm).value, []))

    def get_performance_summary(self, algorithm: Union[str, SortAlgorithm]) -> Dict[str, Any]:
        """
        Summarise the recorded runs of an algorithm.

        Returns:
            Empty dict when nothing was recorded, otherwise execution counts,
            success rate and timing aggregates over the successful runs
        """
        metrics = self.get_metrics(algorithm)
        if not metrics:
            return {}

        successful_metrics = [m for m in metrics if m.success]
        if not successful_metrics:
            return {"total_executions": len(metrics), "success_rate": 0.0}

        execution_times = [m.execution_time for m in successful_metrics]

        return {
            "total_executions": len(metrics),
            "successful_executions": len(successful_metrics),
            "success_rate": len(successful_metrics) / len(metrics),
            "avg_execution_time": sum(execution_times) / len(execution_times),
            "min_execution_time": min(execution_times),
            "max_execution_time": max(execution_times),
            "total_execution_time": sum(execution_times)
        }

    def _record_metrics(self, metrics: SortMetrics) -> None:
        history = self._metrics_history.setdefault(metrics.algorithm, [])
        history.append(metrics)
        if len(history) > self.max_history:
            del history[:-self.max_history]
