"""Search algorithms over catalog views.

Every function is pure: the comparison counter is local to the call and
returned inside the SearchResult, so the same view can be searched from
several threads at once. Timing is not measured here; see MetricsRecorder.

Binary searches require a view sorted ascending by id with unique ids.
"""

from __future__ import annotations

from typing import Sequence

from product_search.domain.product import Product
from product_search.domain.search import (
    SearchAlgorithm,
    SearchResult,
    SearchStep,
    StepObserver,
)


def linear_search(
    view: Sequence[Product],
    target_id: int,
    on_step: StepObserver | None = None,
) -> SearchResult:
    """
    Scan the view from start to end.

    Every examined element counts as one comparison, including the match.
    An absent target costs len(view) comparisons.
    """
    comparisons = 0

    for index, product in enumerate(view):
        comparisons += 1
        if on_step is not None:
            on_step(SearchStep(comparison=comparisons, index=index, product_id=product.id))

        if product.id == target_id:
            return SearchResult.hit(SearchAlgorithm.LINEAR, index, product, comparisons)

    return SearchResult.not_found(SearchAlgorithm.LINEAR, comparisons)


def binary_search(
    sorted_view: Sequence[Product],
    target_id: int,
    on_step: StepObserver | None = None,
) -> SearchResult:
    """
    Iterative binary search with inclusive bounds.

    One comparison per midpoint; at most floor(log2(n)) + 1 midpoints.
    """
    comparisons = 0
    left = 0
    right = len(sorted_view) - 1

    while left <= right:
        mid = left + (right - left) // 2
        comparisons += 1
        candidate = sorted_view[mid]
        if on_step is not None:
            on_step(_midpoint_step(comparisons, mid, candidate, left, right))

        if candidate.id == target_id:
            return SearchResult.hit(SearchAlgorithm.BINARY, mid, candidate, comparisons)
        if candidate.id < target_id:
            left = mid + 1
        else:
            right = mid - 1

    return SearchResult.not_found(SearchAlgorithm.BINARY, comparisons)


def binary_search_recursive(
    sorted_view: Sequence[Product],
    target_id: int,
    on_step: StepObserver | None = None,
) -> SearchResult:
    """
    Recursive binary search.

    Visits exactly the same midpoints as binary_search, so found,
    matched_index and comparisons are always identical between the two.
    """
    index, comparisons = _descend(sorted_view, target_id, 0, len(sorted_view) - 1, 0, on_step)

    if index is None:
        return SearchResult.not_found(SearchAlgorithm.BINARY_RECURSIVE, comparisons)

    return SearchResult.hit(
        SearchAlgorithm.BINARY_RECURSIVE, index, sorted_view[index], comparisons
    )


def _descend(
    sorted_view: Sequence[Product],
    target_id: int,
    left: int,
    right: int,
    comparisons: int,
    on_step: StepObserver | None,
) -> tuple[int | None, int]:
    # Returns (index or None, comparisons so far); the count is threaded, never shared.
    if left > right:
        return None, comparisons

    mid = left + (right - left) // 2
    comparisons += 1
    candidate = sorted_view[mid]
    if on_step is not None:
        on_step(_midpoint_step(comparisons, mid, candidate, left, right))

    if candidate.id == target_id:
        return mid, comparisons
    if candidate.id < target_id:
        return _descend(sorted_view, target_id, mid + 1, right, comparisons, on_step)
    return _descend(sorted_view, target_id, left, mid - 1, comparisons, on_step)


def search_by_name(
    view: Sequence[Product],
    term: str,
    on_step: StepObserver | None = None,
) -> list[SearchResult]:
    """
    Substring search over name, category, brand and id.

    Results keep view order. Each result's comparisons is the 1-based scan
    position of its product. A blank term returns no results.
    """
    if not term or term.isspace():
        return []

    results: list[SearchResult] = []

    for index, product in enumerate(view):
        comparisons = index + 1
        if on_step is not None:
            on_step(SearchStep(comparison=comparisons, index=index, product_id=product.id))

        if product.matches_term(term):
            results.append(SearchResult.hit(SearchAlgorithm.NAME, index, product, comparisons))

    return results


def _midpoint_step(comparisons: int, mid: int, candidate: Product, left: int, right: int) -> SearchStep:
    return SearchStep(
        comparison=comparisons,
        index=mid,
        product_id=candidate.id,
        left=left,
        right=right,
    )
