from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from product_search.ports.catalog_store import CatalogStore
from product_search.use_cases.compare_search_algorithms import (
    CompareSearchAlgorithms,
    CompareSearchAlgorithmsRequest,
    CompareSearchAlgorithmsResponse,
)

logger = logging.getLogger(__name__)


class SearchCase(str, Enum):
    BEST = "best"
    WORST = "worst"
    AVERAGE = "average"


@dataclass(frozen=True, slots=True)
class SearchCaseResult:
    case: SearchCase
    comparison: CompareSearchAlgorithmsResponse


@dataclass(frozen=True, slots=True)
class AnalyzeSearchCasesResponse:
    cases: list[SearchCaseResult]


class AnalyzeSearchCases:
    """
    Best, worst and average case comparisons for linear search.

    Targets are picked by position in the original (insertion-ordered) view:
    - best: first product
    - worst: last product
    - average: product at len // 2

    An empty catalog has no cases.
    """

    def __init__(
        self,
        catalog_store: CatalogStore,
        compare: CompareSearchAlgorithms | None = None,
    ) -> None:
        self._store = catalog_store
        self._compare = compare or CompareSearchAlgorithms(catalog_store)

    def execute(self) -> AnalyzeSearchCasesResponse:
        original = self._store.original_view()
        if not original:
            return AnalyzeSearchCasesResponse(cases=[])

        targets = [
            (SearchCase.BEST, original[0].id),
            (SearchCase.WORST, original[-1].id),
            (SearchCase.AVERAGE, original[len(original) // 2].id),
        ]

        cases = [
            SearchCaseResult(
                case=case,
                comparison=self._compare.execute(
                    CompareSearchAlgorithmsRequest(product_id=product_id)
                ),
            )
            for case, product_id in targets
        ]

        logger.info("Case analysis complete", extra={"catalog_size": len(original)})

        return AnalyzeSearchCasesResponse(cases=cases)
