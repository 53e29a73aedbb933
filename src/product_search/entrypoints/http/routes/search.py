from fastapi import APIRouter, Depends, Query

from product_search.entrypoints.http.dependencies import (
    get_compare_use_case,
    get_default_scalability_sizes,
    get_name_search_use_case,
    get_scalability_use_case,
    get_search_cases_use_case,
)
from product_search.entrypoints.http.dtos.search import (
    CompareQueryDTO,
    CompareResponseDTO,
    NameSearchQueryDTO,
    NameSearchResponseDTO,
    ScalabilityResponseDTO,
    SearchCasesResponseDTO,
)
from product_search.entrypoints.http.mappers.search_mapper import SearchMapper
from product_search.use_cases.analyze_scalability import (
    AnalyzeScalability,
    AnalyzeScalabilityRequest,
)
from product_search.use_cases.analyze_search_cases import AnalyzeSearchCases
from product_search.use_cases.compare_search_algorithms import (
    CompareSearchAlgorithms,
    CompareSearchAlgorithmsRequest,
)
from product_search.use_cases.search_products_by_name import (
    SearchProductsByName,
    SearchProductsByNameRequest,
)


router = APIRouter(prefix="/search", tags=["Search"])


@router.get(
    "/compare",
    response_model=CompareResponseDTO,
    summary="Compare id search algorithms",
    description="""
    Searches one product id with linear search (original order), iterative
    binary search and recursive binary search (sorted order).

    ## Ratios
    - comparison_ratio: linear comparisons / binary comparisons
    - time_ratio: linear elapsed / binary elapsed
    - Either is "N/A" when its denominator is zero

    ## Example
    ```
    GET /v1/search/compare?product_id=7004
    ```
    """,
)
def compare(
    query: CompareQueryDTO = Depends(),
    use_case: CompareSearchAlgorithms = Depends(get_compare_use_case),
) -> CompareResponseDTO:
    """Parse → execute → map → return."""
    result = use_case.execute(CompareSearchAlgorithmsRequest(product_id=query.product_id))
    return SearchMapper.to_compare_response(result)


@router.get(
    "/cases",
    response_model=SearchCasesResponseDTO,
    summary="Best, worst and average case analysis",
    description="""
    Runs the algorithm comparison for the first, last and middle product of
    the original catalog order. An empty catalog returns no cases.
    """,
)
def cases(
    use_case: AnalyzeSearchCases = Depends(get_search_cases_use_case),
) -> SearchCasesResponseDTO:
    return SearchMapper.to_cases_response(use_case.execute())


@router.get(
    "/name",
    response_model=NameSearchResponseDTO,
    summary="Substring search",
    description="""
    Case-insensitive substring match on name, category and brand, plus a
    literal match on the product id. Results keep catalog order. A blank
    term returns no results.
    """,
)
def search_by_name(
    query: NameSearchQueryDTO = Depends(),
    use_case: SearchProductsByName = Depends(get_name_search_use_case),
) -> NameSearchResponseDTO:
    result = use_case.execute(SearchProductsByNameRequest(term=query.term))
    return SearchMapper.to_name_search_response(result)


@router.get(
    "/scalability",
    response_model=ScalabilityResponseDTO,
    summary="Worst-case scalability projection",
    description="""
    Theoretical worst-case comparisons for each size n:
    linear = n, binary = max(1, ceil(log2(n))), factor = linear / binary.

    Defaults to SCALABILITY_SIZES when no sizes are given.
    """,
)
def scalability(
    sizes: list[int] | None = Query(default=None, description="Synthetic catalog sizes"),
    default_sizes: tuple[int, ...] = Depends(get_default_scalability_sizes),
    use_case: AnalyzeScalability = Depends(get_scalability_use_case),
) -> ScalabilityResponseDTO:
    request = AnalyzeScalabilityRequest(sizes=tuple(sizes) if sizes else default_sizes)
    return SearchMapper.to_scalability_response(use_case.execute(request))
