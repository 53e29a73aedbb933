from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Callable

from product_search.domain.product import Product


class SearchAlgorithm(str, Enum):
    LINEAR = "Linear Search"
    BINARY = "Binary Search"
    BINARY_RECURSIVE = "Binary Search (Recursive)"
    NAME = "Linear Search (Name)"


@dataclass(frozen=True, slots=True)
class SearchResult:
    """
    Outcome of a single search invocation.

    matched_index and matched_product are None unless found is True.
    elapsed is zero until MetricsRecorder stamps the measured duration.
    """

    found: bool
    matched_index: int | None
    matched_product: Product | None
    comparisons: int
    algorithm: SearchAlgorithm
    elapsed: timedelta = timedelta(0)

    @classmethod
    def not_found(cls, algorithm: SearchAlgorithm, comparisons: int = 0) -> SearchResult:
        return cls(
            found=False,
            matched_index=None,
            matched_product=None,
            comparisons=comparisons,
            algorithm=algorithm,
        )

    @classmethod
    def hit(
        cls, algorithm: SearchAlgorithm, index: int, product: Product, comparisons: int
    ) -> SearchResult:
        return cls(
            found=True,
            matched_index=index,
            matched_product=product,
            comparisons=comparisons,
            algorithm=algorithm,
        )

    @property
    def elapsed_microseconds(self) -> float:
        return self.elapsed / timedelta(microseconds=1)


@dataclass(frozen=True, slots=True)
class SearchStep:
    """One comparison made by a search, reported to an opt-in observer."""

    comparison: int
    index: int
    product_id: int
    left: int | None = None  # Binary bounds; None for sequential scans
    right: int | None = None


StepObserver = Callable[[SearchStep], None]
