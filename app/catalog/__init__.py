"""
==============================================================================
Catalog Package - Product Contract
==============================================================================

Product and category models shared by the service and the client, plus the
seeded read-only catalog.

Classes:
--------
- Category: Category embedded in every product
- Product: Catalog product / create candidate
- ProductCatalog: Read-only ordered product collection

==============================================================================
"""

from .models import CamelModel, Category, Product
from .catalog import SEED_PRODUCTS, ProductCatalog, init_catalog

__all__ = [
    "CamelModel",
    "Category",
    "Product",
    "SEED_PRODUCTS",
    "ProductCatalog",
    "init_catalog",
]
