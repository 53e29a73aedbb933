from __future__ import annotations

from typing import Sequence

from product_search.domain.comparison import ComparisonReport, ScalabilityRow
from product_search.domain.product import Product
from product_search.domain.search import SearchResult
from product_search.entrypoints.http.dtos.catalog import CatalogResponseDTO, ProductResponseDTO
from product_search.entrypoints.http.dtos.search import (
    ComparisonDTO,
    CompareResponseDTO,
    NameSearchResponseDTO,
    ScalabilityResponseDTO,
    ScalabilityRowDTO,
    SearchCaseDTO,
    SearchCasesResponseDTO,
    SearchResultDTO,
)
from product_search.use_cases.analyze_scalability import AnalyzeScalabilityResponse
from product_search.use_cases.analyze_search_cases import AnalyzeSearchCasesResponse
from product_search.use_cases.compare_search_algorithms import CompareSearchAlgorithmsResponse
from product_search.use_cases.list_catalog import ListCatalogResponse
from product_search.use_cases.search_products_by_name import SearchProductsByNameResponse


class SearchMapper:
    """Maps between domain results and REST DTOs."""

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        """
        Converts domain Product to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return ProductResponseDTO(
            id=product.id,
            name=product.name,
            category=product.category,
            price=str(product.price),  # Decimal → str at boundary
            brand=product.brand,
            stock_quantity=product.stock_quantity,
            rating=product.rating,
            display=product.display_line(),
        )

    @staticmethod
    def to_catalog_response(result: ListCatalogResponse) -> CatalogResponseDTO:
        return CatalogResponseDTO(
            size=len(result.original),
            original=SearchMapper._products(result.original),
            sorted_by_id=SearchMapper._products(result.sorted_by_id),
        )

    @staticmethod
    def to_result_response(result: SearchResult) -> SearchResultDTO:
        """
        Converts a SearchResult to its DTO.

        elapsed (timedelta) → float microseconds at the boundary.
        """
        product = result.matched_product
        return SearchResultDTO(
            algorithm=result.algorithm.value,
            found=result.found,
            matched_index=result.matched_index,
            product=SearchMapper.to_product_response(product) if product else None,
            comparisons=result.comparisons,
            elapsed_us=result.elapsed_microseconds,
        )

    @staticmethod
    def to_comparison(report: ComparisonReport) -> ComparisonDTO:
        return ComparisonDTO(
            comparison_ratio=report.comparison_ratio,
            time_ratio=report.time_ratio,
        )

    @staticmethod
    def to_compare_response(result: CompareSearchAlgorithmsResponse) -> CompareResponseDTO:
        return CompareResponseDTO(
            product_id=result.product_id,
            catalog_size=result.catalog_size,
            results=[SearchMapper.to_result_response(r) for r in result.results],
            comparison=SearchMapper.to_comparison(result.report),
        )

    @staticmethod
    def to_cases_response(result: AnalyzeSearchCasesResponse) -> SearchCasesResponseDTO:
        return SearchCasesResponseDTO(
            cases=[
                SearchCaseDTO(
                    case=case.case.value,
                    product_id=case.comparison.product_id,
                    results=[
                        SearchMapper.to_result_response(r) for r in case.comparison.results
                    ],
                    comparison=SearchMapper.to_comparison(case.comparison.report),
                )
                for case in result.cases
            ]
        )

    @staticmethod
    def to_name_search_response(result: SearchProductsByNameResponse) -> NameSearchResponseDTO:
        return NameSearchResponseDTO(
            term=result.term,
            total=len(result.results),
            results=[SearchMapper.to_result_response(r) for r in result.results],
        )

    @staticmethod
    def to_scalability_response(result: AnalyzeScalabilityResponse) -> ScalabilityResponseDTO:
        return ScalabilityResponseDTO(
            rows=[SearchMapper._row(row) for row in result.rows],
        )

    @staticmethod
    def _row(row: ScalabilityRow) -> ScalabilityRowDTO:
        return ScalabilityRowDTO(
            n=row.n,
            linear_worst=row.linear_worst,
            binary_worst=row.binary_worst,
            factor=row.factor,
        )

    @staticmethod
    def _products(products: Sequence[Product]) -> list[ProductResponseDTO]:
        return [SearchMapper.to_product_response(product) for product in products]
