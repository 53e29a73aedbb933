from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from product_search.domain.errors import ProductValidationError


MIN_RATING = 0.0
MAX_RATING = 5.0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class Product:
    id: int
    name: str
    category: str
    price: Decimal
    brand: str
    stock_quantity: int
    rating: float = 0.0
    added_at: datetime = field(default_factory=_utcnow, compare=False)

    def validate(self) -> None:
        """
        Validate product attributes.

        Raises:
            ProductValidationError: If any attribute is out of range
        """
        errors: list[dict[str, str]] = []

        # bool is an int subclass; reject it explicitly
        if not isinstance(self.id, int) or isinstance(self.id, bool):
            errors.append({"field": "id", "message": "Must be an integer"})
        # Guardrails: prevent float leakage past boundary
        if not isinstance(self.price, Decimal):
            errors.append({"field": "price", "message": "Must be Decimal (no floats)"})
        elif self.price < 0:
            errors.append({"field": "price", "message": "Must be >= 0"})
        if not isinstance(self.stock_quantity, int) or isinstance(self.stock_quantity, bool):
            errors.append({"field": "stock_quantity", "message": "Must be an integer"})
        elif self.stock_quantity < 0:
            errors.append({"field": "stock_quantity", "message": "Must be >= 0"})
        if not MIN_RATING <= self.rating <= MAX_RATING:
            errors.append(
                {"field": "rating", "message": f"Must be between {MIN_RATING} and {MAX_RATING}"}
            )

        if errors:
            raise ProductValidationError(errors=errors, product_id=self.id)

    def matches_term(self, term: str) -> bool:
        """
        Substring match used by name search.

        name, category and brand are compared case-insensitively (ASCII only);
        the decimal id is matched literally.
        """
        if not term or term.isspace():
            return False

        folded = _ascii_lower(term)
        return (
            folded in _ascii_lower(self.name)
            or folded in _ascii_lower(self.category)
            or folded in _ascii_lower(self.brand)
            or term in str(self.id)
        )

    def display_line(self) -> str:
        return (
            f"[{self.id}] {self.name} | {self.category} | {self.brand} | "
            f"${self.price:.2f} | Stock: {self.stock_quantity} | Rating: {self.rating:.1f}★"
        )


_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_FOLD = str.maketrans(_ASCII_UPPER, _ASCII_UPPER.lower())


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_FOLD)
