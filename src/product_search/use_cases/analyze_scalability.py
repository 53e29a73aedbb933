from __future__ import annotations

from dataclasses import dataclass

from product_search.domain.comparison import (
    DEFAULT_SCALABILITY_SIZES,
    ScalabilityRow,
    project_scalability,
)


@dataclass(frozen=True, slots=True)
class AnalyzeScalabilityRequest:
    sizes: tuple[int, ...] = DEFAULT_SCALABILITY_SIZES


@dataclass(frozen=True, slots=True)
class AnalyzeScalabilityResponse:
    rows: list[ScalabilityRow]


class AnalyzeScalability:
    """
    Theoretical worst-case comparison counts for synthetic catalog sizes.

    Independent of any catalog; no search is run.
    """

    def execute(self, request: AnalyzeScalabilityRequest) -> AnalyzeScalabilityResponse:
        """
        Raises:
            ValidationError: If any size is not a positive integer
        """
        return AnalyzeScalabilityResponse(rows=project_scalability(request.sizes))
