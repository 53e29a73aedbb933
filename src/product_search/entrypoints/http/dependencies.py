"""
Dependency injection for FastAPI routes.

Key principle: only stateless or immutable singletons are cached.
The catalog store is built once per process and never mutated, so every
request can share it without locking. Use cases are created per request.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from product_search.adapters.in_memory_catalog_store import InMemoryCatalogStore
from product_search.infra.catalog_loader import load_products
from product_search.infra.config import scalability_sizes
from product_search.ports.catalog_store import CatalogStore
from product_search.use_cases.analyze_scalability import AnalyzeScalability
from product_search.use_cases.analyze_search_cases import AnalyzeSearchCases
from product_search.use_cases.compare_search_algorithms import CompareSearchAlgorithms
from product_search.use_cases.list_catalog import ListCatalog
from product_search.use_cases.search_products_by_name import SearchProductsByName


@lru_cache(maxsize=1)
def get_catalog_store() -> CatalogStore:
    """
    Process-wide catalog built from the configured source.

    Raises:
        DuplicateIdError: If the configured source repeats an id
        RuntimeError: If the environment configuration is invalid
    """
    return InMemoryCatalogStore.build(load_products())


def get_default_scalability_sizes() -> tuple[int, ...]:
    return scalability_sizes()


def get_list_catalog_use_case(
    store: CatalogStore = Depends(get_catalog_store),
) -> ListCatalog:
    return ListCatalog(catalog_store=store)


def get_compare_use_case(
    store: CatalogStore = Depends(get_catalog_store),
) -> CompareSearchAlgorithms:
    """
    Factory function that returns a configured CompareSearchAlgorithms use case.

    Args:
        store: Catalog store (injected by FastAPI via Depends(get_catalog_store))

    Returns:
        CompareSearchAlgorithms: Configured use case instance
    """
    return CompareSearchAlgorithms(catalog_store=store)


def get_search_cases_use_case(
    store: CatalogStore = Depends(get_catalog_store),
) -> AnalyzeSearchCases:
    return AnalyzeSearchCases(catalog_store=store)


def get_name_search_use_case(
    store: CatalogStore = Depends(get_catalog_store),
) -> SearchProductsByName:
    return SearchProductsByName(catalog_store=store)


def get_scalability_use_case() -> AnalyzeScalability:
    return AnalyzeScalability()
