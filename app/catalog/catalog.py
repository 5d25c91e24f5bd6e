"""
==============================================================================
Product Catalog Module
==============================================================================

Read-only in-memory product catalog.

The catalog is seeded once when the application is built and is never
mutated afterwards. Accepted create requests are echoed back to the caller
but are not added here.

==============================================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from .models import Category, Product


# Module logger
logger = logging.getLogger(__name__)


SEED_PRODUCTS: Tuple[Product, ...] = (
    Product(
        id=1,
        name="Laptop",
        price=Decimal("1200.50"),
        stock=25,
        category=Category(id=101, name="Electronics"),
    ),
    Product(
        id=2,
        name="Headphones",
        price=Decimal("50.00"),
        stock=100,
        category=Category(id=102, name="Accessories"),
    ),
)


class ProductCatalog:
    """
    Fixed, ordered collection of products.

    Example:
        >>> catalog = ProductCatalog(SEED_PRODUCTS)
        >>> [p.name for p in catalog.products]
        ['Laptop', 'Headphones']
    """

    def __init__(self, products: Iterable[Product]) -> None:
        """
        Initialize catalog from an iterable of products.

        Args:
            products: Products in the order they should be served
        """
        self._products: Tuple[Product, ...] = tuple(products)

    @property
    def products(self) -> List[Product]:
        """Get all products in insertion order."""
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)


def init_catalog(products: Optional[Iterable[Product]] = None) -> ProductCatalog:
    """
    Build the catalog served by the application.

    Args:
        products: Seed products (defaults to SEED_PRODUCTS)

    Returns:
        Seeded ProductCatalog
    """
    catalog = ProductCatalog(SEED_PRODUCTS if products is None else products)
    logger.info(f"✅ Seeded catalog with {len(catalog)} products")
    return catalog
