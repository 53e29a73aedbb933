from pydantic import BaseModel, Field


class ProductResponseDTO(BaseModel):
    id: int
    name: str
    category: str
    price: str = Field(description="Decimal price as string", examples=["999.99"])
    brand: str
    stock_quantity: int
    rating: float
    display: str = Field(description="One-line human readable summary")


class CatalogResponseDTO(BaseModel):
    size: int
    original: list[ProductResponseDTO]
    sorted_by_id: list[ProductResponseDTO]
