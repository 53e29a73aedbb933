from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from product_search.domain.product import Product
from product_search.ports.catalog_store import CatalogStore


@dataclass(frozen=True, slots=True)
class ListCatalogResponse:
    original: Sequence[Product]
    sorted_by_id: Sequence[Product]


class ListCatalog:
    """Returns both catalog views so callers can render them side by side."""

    def __init__(self, catalog_store: CatalogStore) -> None:
        self._store = catalog_store

    def execute(self) -> ListCatalogResponse:
        return ListCatalogResponse(
            original=self._store.original_view(),
            sorted_by_id=self._store.sorted_view(),
        )
