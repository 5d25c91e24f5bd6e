"""
==============================================================================
Client Package
==============================================================================

HTTP client for the product catalog API.

==============================================================================
"""

from .catalog_client import CatalogClient, CreateResult

__all__ = [
    "CatalogClient",
    "CreateResult",
]
