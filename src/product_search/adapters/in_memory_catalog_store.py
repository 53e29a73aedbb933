from __future__ import annotations

import logging
from typing import Iterable, Sequence

from product_search.domain.errors import DuplicateIdError
from product_search.domain.product import Product
from product_search.ports.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


class InMemoryCatalogStore(CatalogStore):
    """
    Canonical CatalogStore implementation.

    - Validates every product and rejects duplicate ids at construction
    - Keeps products in insertion order
    - Sorts once by id ascending (O(n log n)); views are tuples, O(1) to obtain
    - Exposes no mutation API
    """

    def __init__(self, products: Sequence[Product], sorted_products: Sequence[Product]) -> None:
        # Use build(); the constructor trusts its inputs.
        self._original: tuple[Product, ...] = tuple(products)
        self._sorted: tuple[Product, ...] = tuple(sorted_products)

    @classmethod
    def build(cls, products: Iterable[Product]) -> InMemoryCatalogStore:
        """
        Build a catalog from an externally supplied sequence of products.

        Raises:
            ProductValidationError: If a product attribute is out of range
            DuplicateIdError: If two products share an id
        """
        original = tuple(products)

        seen: set[int] = set()
        for product in original:
            product.validate()
            if product.id in seen:
                raise DuplicateIdError(product.id)
            seen.add(product.id)

        store = cls(original, sort_by_id(original))

        logger.info("Catalog built", extra={"product_count": len(original)})

        return store

    def original_view(self) -> Sequence[Product]:
        return self._original

    def sorted_view(self) -> Sequence[Product]:
        return self._sorted


def sort_by_id(products: Iterable[Product]) -> tuple[Product, ...]:
    """Stable sort by id ascending. Idempotent: sorting a sorted view returns it unchanged."""
    return tuple(sorted(products, key=lambda product: product.id))
