"""The fifteen-product demo catalog, in its original insertion order."""

from __future__ import annotations

from decimal import Decimal

from product_search.domain.product import Product


def reference_products() -> list[Product]:
    return [
        Product(1001, "iPhone 15 Pro", "Electronics", Decimal("999.99"), "Apple", 50, 4.8),
        Product(2003, "Samsung Galaxy S24", "Electronics", Decimal("899.99"), "Samsung", 75, 4.7),
        Product(1505, "MacBook Air M3", "Computers", Decimal("1299.99"), "Apple", 30, 4.9),
        Product(3007, "Nike Air Max 270", "Footwear", Decimal("149.99"), "Nike", 120, 4.5),
        Product(4002, "Adidas Ultraboost 22", "Footwear", Decimal("179.99"), "Adidas", 95, 4.6),
        Product(5001, "Sony WH-1000XM5", "Audio", Decimal("399.99"), "Sony", 60, 4.8),
        Product(6008, "Dell XPS 13", "Computers", Decimal("1099.99"), "Dell", 40, 4.4),
        Product(7004, "Canon EOS R6", "Photography", Decimal("2499.99"), "Canon", 15, 4.7),
        Product(8009, "Levi's 501 Jeans", "Clothing", Decimal("79.99"), "Levi's", 200, 4.3),
        Product(9006, "Nintendo Switch OLED", "Gaming", Decimal("349.99"), "Nintendo", 85, 4.6),
        Product(1010, "AirPods Pro 2", "Audio", Decimal("249.99"), "Apple", 100, 4.7),
        Product(1112, "Google Pixel 8", "Electronics", Decimal("699.99"), "Google", 65, 4.5),
        Product(1213, "Microsoft Surface Pro 9", "Computers", Decimal("1299.99"), "Microsoft", 25, 4.4),
        Product(1314, "Bose QuietComfort 45", "Audio", Decimal("329.99"), "Bose", 45, 4.6),
        Product(1415, "HP Pavilion 15", "Computers", Decimal("799.99"), "HP", 55, 4.2),
    ]
