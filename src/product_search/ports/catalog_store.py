from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from product_search.domain.product import Product


class CatalogStore(ABC):
    """
    Port for an immutable product catalog.

    Contract (Invariants):
        - product ids are pairwise distinct
        - sorted_view() is a permutation of original_view() ordered by id ascending
        - both views are computed once and never change afterwards
    """

    @abstractmethod
    def original_view(self) -> Sequence[Product]:
        """Products in insertion order."""
        ...

    @abstractmethod
    def sorted_view(self) -> Sequence[Product]:
        """Products ordered by id ascending; the precondition for binary search."""
        ...

    def __len__(self) -> int:
        return len(self.original_view())
