from __future__ import annotations

import logging
from dataclasses import dataclass

from product_search.domain.metrics import MetricsRecorder
from product_search.domain.search import SearchResult, StepObserver
from product_search.ports.catalog_store import CatalogStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchProductsByNameRequest:
    term: str
    on_step: StepObserver | None = None


@dataclass(frozen=True, slots=True)
class SearchProductsByNameResponse:
    term: str
    results: list[SearchResult]


class SearchProductsByName:
    """
    Substring search over the original catalog order.

    A blank term is not an error: it simply matches nothing.
    """

    def __init__(
        self,
        catalog_store: CatalogStore,
        recorder: MetricsRecorder | None = None,
    ) -> None:
        self._store = catalog_store
        self._recorder = recorder or MetricsRecorder()

    def execute(self, request: SearchProductsByNameRequest) -> SearchProductsByNameResponse:
        results = self._recorder.record_name_search(
            self._store.original_view(), request.term, request.on_step
        )

        logger.debug(
            "Name search complete",
            extra={"term": request.term, "match_count": len(results)},
        )

        return SearchProductsByNameResponse(term=request.term, results=results)
