from fastapi import APIRouter, Depends

from product_search.entrypoints.http.dependencies import get_list_catalog_use_case
from product_search.entrypoints.http.dtos.catalog import CatalogResponseDTO
from product_search.entrypoints.http.mappers.search_mapper import SearchMapper
from product_search.use_cases.list_catalog import ListCatalog


router = APIRouter(tags=["Products"])


@router.get(
    "/products",
    response_model=CatalogResponseDTO,
    summary="List the product catalog",
    description="""
    Returns the catalog twice: in original insertion order and sorted by id
    ascending (the order binary search runs over).
    """,
)
def list_products(
    use_case: ListCatalog = Depends(get_list_catalog_use_case),
) -> CatalogResponseDTO:
    return SearchMapper.to_catalog_response(use_case.execute())
