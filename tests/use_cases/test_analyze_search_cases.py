from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

from product_search.adapters.in_memory_catalog_store import InMemoryCatalogStore
from product_search.domain.product import Product
from product_search.infra.reference_catalog import reference_products
from product_search.use_cases.analyze_search_cases import AnalyzeSearchCases, SearchCase
from product_search.use_cases.compare_search_algorithms import CompareSearchAlgorithms


def test_execute_picks_first_last_and_middle() -> None:
    store = InMemoryCatalogStore.build(reference_products())

    response = AnalyzeSearchCases(store).execute()

    assert [c.case for c in response.cases] == [
        SearchCase.BEST,
        SearchCase.WORST,
        SearchCase.AVERAGE,
    ]
    assert [c.comparison.product_id for c in response.cases] == [1001, 1415, 7004]
    assert [c.comparison.linear.comparisons for c in response.cases] == [1, 15, 8]


def test_best_case_is_cheapest_for_linear_search() -> None:
    store = InMemoryCatalogStore.build(reference_products())

    best, worst, _ = AnalyzeSearchCases(store).execute().cases

    assert best.comparison.linear.comparisons < worst.comparison.linear.comparisons


def test_execute_empty_catalog_has_no_cases() -> None:
    store = InMemoryCatalogStore.build([])
    compare = Mock(spec=CompareSearchAlgorithms)

    response = AnalyzeSearchCases(store, compare=compare).execute()

    assert response.cases == []
    compare.execute.assert_not_called()


def test_single_product_catalog_uses_it_for_every_case() -> None:
    only = Product(42, "Widget", "Tools", Decimal("9.99"), "Acme", 3, 4.0)
    store = InMemoryCatalogStore.build([only])

    response = AnalyzeSearchCases(store).execute()

    assert [c.comparison.product_id for c in response.cases] == [42, 42, 42]
    assert all(c.comparison.binary.found for c in response.cases)
