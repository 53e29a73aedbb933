from __future__ import annotations

import logging

from product_search.domain.product import Product
from product_search.infra.config import catalog_seed, catalog_size, catalog_source
from product_search.infra.reference_catalog import reference_products
from product_search.infra.synthetic_catalog import generate_products

logger = logging.getLogger(__name__)


def load_products() -> list[Product]:
    """Products for the configured CATALOG_SOURCE."""
    source = catalog_source()

    if source == "synthetic":
        size, seed = catalog_size(), catalog_seed()
        logger.info("Generating synthetic catalog", extra={"size": size, "seed": seed})
        return generate_products(size, seed=seed)

    return reference_products()
