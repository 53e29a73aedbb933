from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from product_search.entrypoints.http.dtos.catalog import ProductResponseDTO

RatioDTO = Union[float, Literal["N/A"]]


class CompareQueryDTO(BaseModel):
    """Query parameters for comparing id searches."""

    product_id: int = Field(
        description="Product id to search for (may be absent from the catalog)",
        examples=[7004],
    )


class NameSearchQueryDTO(BaseModel):
    """Query parameters for substring search."""

    term: str = Field(
        default="",
        description="Case-insensitive substring of name, category or brand, or a literal id fragment",
        examples=["apple"],
    )


class SearchResultDTO(BaseModel):
    algorithm: str
    found: bool
    matched_index: int | None
    product: ProductResponseDTO | None
    comparisons: int
    elapsed_us: float = Field(description="Elapsed wall-clock time in microseconds")


class ComparisonDTO(BaseModel):
    comparison_ratio: RatioDTO = Field(
        description="Linear comparisons / binary comparisons, or 'N/A' when undefined"
    )
    time_ratio: RatioDTO = Field(
        description="Linear elapsed / binary elapsed, or 'N/A' when undefined"
    )


class CompareResponseDTO(BaseModel):
    product_id: int
    catalog_size: int
    results: list[SearchResultDTO]
    comparison: ComparisonDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "product_id": 7004,
                "catalog_size": 15,
                "results": [
                    {
                        "algorithm": "Binary Search",
                        "found": True,
                        "matched_index": 12,
                        "product": None,
                        "comparisons": 4,
                        "elapsed_us": 2.1,
                    }
                ],
                "comparison": {"comparison_ratio": 2.0, "time_ratio": "N/A"},
            }
        }
    )


class SearchCaseDTO(BaseModel):
    case: str
    product_id: int
    results: list[SearchResultDTO]
    comparison: ComparisonDTO


class SearchCasesResponseDTO(BaseModel):
    cases: list[SearchCaseDTO]


class NameSearchResponseDTO(BaseModel):
    term: str
    total: int
    results: list[SearchResultDTO]


class ScalabilityRowDTO(BaseModel):
    n: int
    linear_worst: int
    binary_worst: int
    factor: float


class ScalabilityResponseDTO(BaseModel):
    rows: list[ScalabilityRowDTO]
