from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import Callable, Sequence

from product_search.domain.product import Product
from product_search.domain.search import SearchAlgorithm, SearchResult, StepObserver
from product_search.domain.search_algorithms import (
    binary_search,
    binary_search_recursive,
    linear_search,
    search_by_name,
)

IdSearch = Callable[..., SearchResult]

ID_SEARCHES: dict[SearchAlgorithm, IdSearch] = {
    SearchAlgorithm.LINEAR: linear_search,
    SearchAlgorithm.BINARY: binary_search,
    SearchAlgorithm.BINARY_RECURSIVE: binary_search_recursive,
}


@dataclass(frozen=True, slots=True)
class MetricsRecorder:
    """
    Times a single search invocation and stamps the elapsed duration
    onto the result the algorithm produced.

    Holds no per-call state; one instance can be shared across threads.
    An empty view short-circuits to a not-found result with zero
    comparisons without running the algorithm.
    """

    clock: Callable[[], float] = field(default=time.perf_counter)

    def record(
        self,
        algorithm: SearchAlgorithm,
        view: Sequence[Product],
        target_id: int,
        on_step: StepObserver | None = None,
    ) -> SearchResult:
        if algorithm not in ID_SEARCHES:
            raise ValueError(f"{algorithm.value} does not search by id")

        if not view:
            return SearchResult.not_found(algorithm)

        search = ID_SEARCHES[algorithm]
        started = self.clock()
        result = search(view, target_id, on_step)
        elapsed = self._since(started)

        return replace(result, elapsed=elapsed)

    def record_name_search(
        self,
        view: Sequence[Product],
        term: str,
        on_step: StepObserver | None = None,
    ) -> list[SearchResult]:
        """Every match carries the duration of the whole scan."""
        if not view:
            return []

        started = self.clock()
        results = search_by_name(view, term, on_step)
        elapsed = self._since(started)

        return [replace(result, elapsed=elapsed) for result in results]

    def _since(self, started: float) -> timedelta:
        return timedelta(seconds=max(0.0, self.clock() - started))
