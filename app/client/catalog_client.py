"""
==============================================================================
Catalog Client Module
==============================================================================

Synchronous HTTP client for the product catalog API.

Usage:
------
    with CatalogClient("http://localhost:5039/") as client:
        products = client.list_products()
        result = client.create_product(products[0])
        if not result.created:
            print(result.errors)

An existing httpx.Client (FastAPI's TestClient included) can be injected;
the client only closes connections it opened itself.

==============================================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

import httpx

from app.catalog.models import Product
from app.schemas.common import ValidationProblemDetails
from app.utils.serialization import dumps


# Module logger
logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5039/"


@dataclass(frozen=True)
class CreateResult:
    """
    Outcome of a create call.

    Attributes:
        status_code: HTTP status returned by the service
        product: Echoed product (201 only)
        location: Location header value (201 only)
        errors: Problem messages (400 only)
    """

    status_code: int
    product: Optional[Product] = None
    location: Optional[str] = None
    errors: Tuple[str, ...] = ()

    @property
    def created(self) -> bool:
        return self.status_code == 201


class CatalogClient:
    """Client for the product catalog endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    @property
    def base_url(self) -> str:
        """Base address requests are sent to."""
        return str(self._client.base_url)

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def list_products(self) -> List[Product]:
        """
        Fetch the full catalog.

        Raises:
            httpx.HTTPStatusError: On a 4xx/5xx response
        """
        response = self._client.get("/api/productlist")
        response.raise_for_status()
        return [Product.model_validate(item) for item in response.json(parse_float=Decimal)]

    def create_product(self, product: Product) -> CreateResult:
        """
        Submit a product for validation.

        Returns:
            CreateResult with the echo on 201 or the messages on 400

        Raises:
            httpx.HTTPStatusError: On any other 4xx/5xx response
        """
        response = self._client.post(
            "/api/products",
            content=dumps(product.to_json_dict()),
            headers={"Content-Type": "application/json"},
        )

        if response.status_code == 201:
            return CreateResult(
                status_code=201,
                product=Product.model_validate(response.json(parse_float=Decimal)),
                location=response.headers.get("location"),
            )

        if response.status_code == 400:
            problem = ValidationProblemDetails.model_validate(response.json())
            errors = problem.messages or ([problem.detail] if problem.detail else [])
            logger.debug(f"Product {product.id} rejected: {errors}")
            return CreateResult(status_code=400, errors=tuple(errors))

        response.raise_for_status()
        return CreateResult(status_code=response.status_code)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
