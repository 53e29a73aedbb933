"""
Test suite for CompareSearchAlgorithms.

Verifies that the use case:
- runs linear search on the original view and binary searches on the sorted view
- wraps each run with the recorder
- aggregates linear vs iterative binary into a ComparisonReport
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from product_search.adapters.in_memory_catalog_store import InMemoryCatalogStore
from product_search.domain.metrics import MetricsRecorder
from product_search.domain.search import SearchAlgorithm, SearchStep
from product_search.infra.reference_catalog import reference_products
from product_search.use_cases.compare_search_algorithms import (
    CompareSearchAlgorithms,
    CompareSearchAlgorithmsRequest,
    CompareSearchAlgorithmsResponse,
)


@pytest.fixture()
def store() -> InMemoryCatalogStore:
    return InMemoryCatalogStore.build(reference_products())


def test_execute_found_target(store: InMemoryCatalogStore) -> None:
    response = CompareSearchAlgorithms(store).execute(
        CompareSearchAlgorithmsRequest(product_id=7004)
    )

    assert isinstance(response, CompareSearchAlgorithmsResponse)
    assert response.catalog_size == 15
    # 7004 is 8th in insertion order, 13th by id
    assert (response.linear.found, response.linear.matched_index) == (True, 7)
    assert response.linear.comparisons == 8
    assert (response.binary.found, response.binary.matched_index) == (True, 12)
    assert response.binary.comparisons <= 4
    assert response.binary_recursive.matched_index == response.binary.matched_index
    assert response.binary_recursive.comparisons == response.binary.comparisons
    assert response.report.comparison_ratio == pytest.approx(
        response.linear.comparisons / response.binary.comparisons
    )


def test_execute_absent_target(store: InMemoryCatalogStore) -> None:
    response = CompareSearchAlgorithms(store).execute(
        CompareSearchAlgorithmsRequest(product_id=9999)
    )

    assert [r.found for r in response.results] == [False, False, False]
    assert response.linear.comparisons == 15
    assert response.binary.comparisons <= 4


def test_results_are_labelled_in_order(store: InMemoryCatalogStore) -> None:
    response = CompareSearchAlgorithms(store).execute(
        CompareSearchAlgorithmsRequest(product_id=1001)
    )

    assert [r.algorithm for r in response.results] == [
        SearchAlgorithm.LINEAR,
        SearchAlgorithm.BINARY,
        SearchAlgorithm.BINARY_RECURSIVE,
    ]


def test_execute_on_empty_catalog() -> None:
    store = InMemoryCatalogStore.build([])

    response = CompareSearchAlgorithms(store).execute(
        CompareSearchAlgorithmsRequest(product_id=1001)
    )

    assert response.catalog_size == 0
    assert all(r.comparisons == 0 and not r.found for r in response.results)
    assert response.report.comparison_ratio == "N/A"
    assert response.report.time_ratio == "N/A"


def test_execute_uses_views_and_recorder(store: InMemoryCatalogStore) -> None:
    recorder = Mock(wraps=MetricsRecorder())

    CompareSearchAlgorithms(store, recorder=recorder).execute(
        CompareSearchAlgorithmsRequest(product_id=1213)
    )

    calls = recorder.record.call_args_list
    assert [c.args[0] for c in calls] == [
        SearchAlgorithm.LINEAR,
        SearchAlgorithm.BINARY,
        SearchAlgorithm.BINARY_RECURSIVE,
    ]
    assert calls[0].args[1] is store.original_view()
    assert calls[1].args[1] is store.sorted_view()
    assert calls[2].args[1] is store.sorted_view()


def test_execute_forwards_step_observer(store: InMemoryCatalogStore) -> None:
    steps: list[SearchStep] = []

    response = CompareSearchAlgorithms(store).execute(
        CompareSearchAlgorithmsRequest(product_id=1415, on_step=steps.append)
    )

    assert len(steps) == sum(r.comparisons for r in response.results)


def test_concurrent_execution_on_shared_store(store: InMemoryCatalogStore) -> None:
    use_case = CompareSearchAlgorithms(store)
    targets = [p.id for p in store.original_view()] * 20 + [9999, 1, 5000]

    def outcome(target: int) -> tuple[int, ...]:
        response = use_case.execute(CompareSearchAlgorithmsRequest(product_id=target))
        return tuple(r.comparisons for r in response.results)

    expected = [outcome(t) for t in targets]
    with ThreadPoolExecutor(max_workers=8) as pool:
        assert list(pool.map(outcome, targets)) == expected
