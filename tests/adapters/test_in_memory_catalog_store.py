"""
Test suite for InMemoryCatalogStore.

Sections:
- Construction: uniqueness and product validation enforced by build()
- Views: insertion order, sorted permutation, immutability
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from decimal import Decimal

import pytest

from product_search.adapters.in_memory_catalog_store import InMemoryCatalogStore, sort_by_id
from product_search.domain.errors import DuplicateIdError, ProductValidationError
from product_search.domain.product import Product
from product_search.infra.reference_catalog import reference_products
from product_search.infra.synthetic_catalog import generate_products


def _product(product_id: int, name: str = "Item") -> Product:
    return Product(product_id, name, "Misc", Decimal("1.00"), "Acme", 1, 3.0)


# ==============================================================================
# Construction
# ==============================================================================


def test_build_rejects_duplicate_id() -> None:
    products = [_product(3), _product(1), _product(3, name="Other")]

    with pytest.raises(DuplicateIdError) as exc_info:
        InMemoryCatalogStore.build(products)

    assert exc_info.value.product_id == 3


def test_build_rejects_duplicate_in_reference_catalog() -> None:
    products = reference_products()
    products.append(_product(7004))

    with pytest.raises(DuplicateIdError):
        InMemoryCatalogStore.build(products)


def test_build_validates_products() -> None:
    bad = Product(1, "Broken", "Misc", Decimal("-5"), "Acme", 1)

    with pytest.raises(ProductValidationError):
        InMemoryCatalogStore.build([bad])


@pytest.mark.parametrize("seed", range(5))
def test_accepted_catalogs_have_unique_ids(seed: int) -> None:
    store = InMemoryCatalogStore.build(generate_products(500, seed=seed))

    counts = Counter(p.id for p in store.original_view())
    assert max(counts.values()) == 1


def test_build_accepts_any_iterable() -> None:
    store = InMemoryCatalogStore.build(_product(i) for i in (5, 2, 9))

    assert [p.id for p in store.original_view()] == [5, 2, 9]


def test_empty_catalog() -> None:
    store = InMemoryCatalogStore.build([])

    assert len(store) == 0
    assert store.original_view() == ()
    assert store.sorted_view() == ()


# ==============================================================================
# Views
# ==============================================================================


def test_original_view_keeps_insertion_order() -> None:
    products = reference_products()
    store = InMemoryCatalogStore.build(products)

    assert list(store.original_view()) == products


@pytest.mark.parametrize("seed", range(5))
def test_sorted_view_is_sorted_permutation_of_original(seed: int) -> None:
    products = generate_products(random.Random(seed).randint(1, 400), seed=seed)
    store = InMemoryCatalogStore.build(products)

    sorted_ids = [p.id for p in store.sorted_view()]
    assert sorted_ids == sorted(p.id for p in store.original_view())
    assert Counter(store.sorted_view()) == Counter(store.original_view())


def test_sorting_sorted_view_is_a_fixed_point() -> None:
    store = InMemoryCatalogStore.build(reference_products())

    assert sort_by_id(store.sorted_view()) == tuple(store.sorted_view())


def test_views_are_stable_and_read_only() -> None:
    store = InMemoryCatalogStore.build(reference_products())

    assert store.sorted_view() is store.sorted_view()
    assert isinstance(store.original_view(), tuple)
    assert isinstance(store.sorted_view(), tuple)


def test_caller_mutation_does_not_reach_catalog() -> None:
    products = [_product(2), _product(1)]
    store = InMemoryCatalogStore.build(products)

    products.append(_product(3))

    assert len(store) == 2


def test_store_exposes_no_mutation_api() -> None:
    store = InMemoryCatalogStore.build(reference_products())

    for name in ("add", "append", "remove", "insert", "update", "clear"):
        assert not hasattr(store, name)


def test_build_logs_catalog_size(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="product_search")

    InMemoryCatalogStore.build(reference_products())

    (record,) = [r for r in caplog.records if r.getMessage() == "Catalog built"]
    assert record.product_count == 15  # type: ignore[attr-defined]
