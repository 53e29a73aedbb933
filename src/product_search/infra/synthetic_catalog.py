"""
Deterministic synthetic catalogs for benchmarking beyond the demo data.

Features:
- Deterministic: fixed seed -> same catalog every run
- Unique ids drawn without replacement, in random (unsorted) insertion order
- Prices correlated with category band
"""

from __future__ import annotations

import random
from decimal import Decimal

from product_search.domain.product import Product


RANDOM_SEED = 42


# Category price bands (USD)
CATEGORIES = {
    "Electronics": (Decimal("199"), Decimal("1499")),
    "Computers": (Decimal("499"), Decimal("2999")),
    "Audio": (Decimal("29"), Decimal("549")),
    "Footwear": (Decimal("49"), Decimal("249")),
    "Clothing": (Decimal("15"), Decimal("149")),
    "Gaming": (Decimal("39"), Decimal("699")),
    "Photography": (Decimal("299"), Decimal("3999")),
}

BRANDS_BY_CATEGORY = {
    "Electronics": ["Apple", "Samsung", "Google", "OnePlus", "Xiaomi"],
    "Computers": ["Apple", "Dell", "HP", "Lenovo", "Microsoft"],
    "Audio": ["Sony", "Bose", "Sennheiser", "JBL", "Apple"],
    "Footwear": ["Nike", "Adidas", "Puma", "New Balance", "Asics"],
    "Clothing": ["Levi's", "Uniqlo", "Patagonia", "Gap", "H&M"],
    "Gaming": ["Nintendo", "Sony", "Microsoft", "Razer", "Logitech"],
    "Photography": ["Canon", "Nikon", "Fujifilm", "Sony", "Panasonic"],
}

PRODUCT_LINES = ["Pro", "Air", "Max", "Lite", "Ultra", "One", "Plus", "Mini"]


def generate_products(count: int, seed: int = RANDOM_SEED) -> list[Product]:
    """
    Generate count products with unique ids.

    Args:
        count: Number of products (>= 0)
        seed: Random seed for deterministic results
    """
    if count < 0:
        raise ValueError("count must be >= 0")

    rng = random.Random(seed)

    # Ids start at 1000 like the demo catalog; the space leaves room for absent ids.
    id_space = range(1000, 1000 + max(10 * count, 10000))
    ids = rng.sample(id_space, count)

    return [_generate_product(rng, product_id) for product_id in ids]


def _generate_product(rng: random.Random, product_id: int) -> Product:
    category = rng.choice(list(CATEGORIES))
    brand = rng.choice(BRANDS_BY_CATEGORY[category])
    line = rng.choice(PRODUCT_LINES)

    low, high = CATEGORIES[category]
    cents = rng.randint(int(low * 100), int(high * 100))
    price = (Decimal(cents) / 100).quantize(Decimal("0.01"))

    return Product(
        id=product_id,
        name=f"{brand} {line} {rng.randint(1, 20)}",
        category=category,
        price=price,
        brand=brand,
        stock_quantity=rng.randint(0, 250),
        rating=round(rng.uniform(3.0, 5.0), 1),
    )
