"""Compare search algorithms use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from product_search.domain.comparison import ComparisonReport, compare_results
from product_search.domain.metrics import MetricsRecorder
from product_search.domain.search import SearchAlgorithm, SearchResult, StepObserver
from product_search.ports.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompareSearchAlgorithmsRequest:
    """Request to search one product id with every id-search algorithm."""

    product_id: int
    on_step: StepObserver | None = None  # Opt-in per-comparison trace


@dataclass(frozen=True, slots=True)
class CompareSearchAlgorithmsResponse:
    product_id: int
    catalog_size: int
    linear: SearchResult
    binary: SearchResult
    binary_recursive: SearchResult
    report: ComparisonReport

    @property
    def results(self) -> tuple[SearchResult, SearchResult, SearchResult]:
        return (self.linear, self.binary, self.binary_recursive)


class CompareSearchAlgorithms:
    """
    Use case for benchmarking id searches against the same target.

    Responsibilities:
    - Run linear search over the original view
    - Run iterative and recursive binary search over the sorted view
    - Time each run with MetricsRecorder
    - Aggregate linear vs iterative binary into a ComparisonReport

    A target absent from the catalog is a normal not-found outcome.
    """

    def __init__(
        self,
        catalog_store: CatalogStore,
        recorder: MetricsRecorder | None = None,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            catalog_store: Immutable catalog providing both views
            recorder: Timing wrapper (default: perf_counter based)
        """
        self._store = catalog_store
        self._recorder = recorder or MetricsRecorder()

    def execute(self, request: CompareSearchAlgorithmsRequest) -> CompareSearchAlgorithmsResponse:
        original = self._store.original_view()
        sorted_view = self._store.sorted_view()

        linear = self._recorder.record(
            SearchAlgorithm.LINEAR, original, request.product_id, request.on_step
        )
        binary = self._recorder.record(
            SearchAlgorithm.BINARY, sorted_view, request.product_id, request.on_step
        )
        binary_recursive = self._recorder.record(
            SearchAlgorithm.BINARY_RECURSIVE, sorted_view, request.product_id, request.on_step
        )

        report = compare_results((linear, binary, binary_recursive))

        logger.debug(
            "Search comparison complete",
            extra={
                "product_id": request.product_id,
                "found": linear.found,
                "linear_comparisons": linear.comparisons,
                "binary_comparisons": binary.comparisons,
                "recursive_comparisons": binary_recursive.comparisons,
                "linear_us": linear.elapsed_microseconds,
                "binary_us": binary.elapsed_microseconds,
            },
        )

        return CompareSearchAlgorithmsResponse(
            product_id=request.product_id,
            catalog_size=len(original),
            linear=linear,
            binary=binary,
            binary_recursive=binary_recursive,
            report=report,
        )
