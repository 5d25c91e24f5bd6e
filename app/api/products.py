"""
==============================================================================
Product Catalog Endpoints
==============================================================================

- GET  /api/productlist  Full catalog, insertion order
- POST /api/products     Validate a candidate and echo it back

Accepted products are not added to the catalog; create is echo-only and
repeated creates with the same id all succeed.

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.catalog.catalog import ProductCatalog
from app.catalog.models import Product
from app.config import Settings
from app.core.dependencies import (
    get_app_settings,
    get_catalog,
    get_validator,
    read_product_candidate,
)
from app.core.responses import ApiJSONResponse, ProblemJSONResponse
from app.schemas.common import ValidationProblemDetails
from app.utils.validators import ProductValidator


router = APIRouter(tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(
        self,
        catalog: ProductCatalog,
        settings: Settings,
        validator: Optional[ProductValidator] = None
    ):
        self._catalog = catalog
        self._settings = settings
        self._validator = validator or ProductValidator()

    def list_products(self) -> ApiJSONResponse:
        """Serialize every product in the catalog."""
        return ApiJSONResponse(
            [product.to_json_dict() for product in self._catalog.products],
            indent=self._settings.json_indent,
        )

    def create_product(self, candidate: Product) -> ApiJSONResponse:
        """Validate a candidate; 201 with the echo, or 400 with every violation."""
        outcome = self._validator.validate(candidate)

        if not outcome.is_valid:
            problem = ValidationProblemDetails.from_messages(outcome.messages)
            return ProblemJSONResponse(
                problem.to_dict(),
                status_code=400,
                indent=self._settings.json_indent,
            )

        return ApiJSONResponse(
            candidate.to_json_dict(),
            status_code=201,
            headers={"Location": f"/api/products/{candidate.id}"},
            indent=self._settings.json_indent,
        )


@router.get("/productlist")
async def list_products(
    catalog: ProductCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_app_settings)
):
    """Return the full product catalog."""
    controller = ProductController(catalog, settings)
    return controller.list_products()


@router.post("/products", status_code=201)
async def create_product(
    candidate: Product = Depends(read_product_candidate),
    catalog: ProductCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_app_settings),
    validator: ProductValidator = Depends(get_validator)
):
    """Validate a product and echo it back with its location."""
    controller = ProductController(catalog, settings, validator)
    return controller.create_product(candidate)
