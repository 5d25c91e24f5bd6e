"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the product endpoints.

Everything an endpoint needs (settings, catalog, validator) is attached to
the application by the `Application` factory and read back from
`request.app.state` here, so two applications built with different settings
never share configuration.

Usage Examples:
--------------
    @router.get("/productlist")
    async def list_products(catalog: ProductCatalog = Depends(get_catalog)):
        ...

    @router.post("/products")
    async def create_product(candidate: Product = Depends(read_product_candidate)):
        ...

==============================================================================
"""

from __future__ import annotations

import json
from decimal import Decimal

from fastapi import Request
from pydantic import ValidationError

from app.catalog.catalog import ProductCatalog
from app.catalog.models import Product
from app.config import Settings
from app.core import exceptions
from app.utils.validators import ProductValidator


def get_app_settings(request: Request) -> Settings:
    """Settings the application was built with."""
    return request.app.state.settings


def get_catalog(request: Request) -> ProductCatalog:
    """
    Catalog attached to the application.

    Raises:
        AppException: If the application was built without a catalog
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise exceptions.catalog_not_loaded()
    return catalog


def get_validator(request: Request) -> ProductValidator:
    """Validator attached to the application."""
    return request.app.state.validator


def is_json_media_type(content_type: str) -> bool:
    """Accept application/json and application/*+json, parameters ignored."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


async def read_product_candidate(request: Request) -> Product:
    """
    Decode the request body into a product candidate.

    Floats are parsed as Decimal so prices never pass through binary
    floating point. Business rules are not checked here.

    Raises:
        AppException: 415 if the body is not declared as JSON; 400 if it is
            not a JSON object or a value has the wrong JSON type
    """
    content_type = request.headers.get("content-type", "")
    if not is_json_media_type(content_type):
        raise exceptions.unsupported_media_type(content_type)

    body = await request.body()

    try:
        data = json.loads(body, parse_float=Decimal)
    except ValueError:
        raise exceptions.malformed_body("The request body is not valid JSON.")

    if not isinstance(data, dict):
        raise exceptions.malformed_body("The request body must be a JSON object.")

    try:
        return Product.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) or "body"
            for error in e.errors()
        )
        raise exceptions.malformed_body(
            f"The request body could not be bound to a product ({fields})."
        )
