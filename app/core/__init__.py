"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException, problem-document handlers, factory functions
- responses: JSON and problem+json response classes
- dependencies: FastAPI dependency injection functions

Usage:
------
    from app.core import AppException, register_exception_handlers

    # Or use exception factory functions via module
    from app.core import exceptions
    raise exceptions.malformed_body("The request body is not valid JSON.")

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .responses import ApiJSONResponse, ProblemJSONResponse
from .dependencies import (
    get_app_settings,
    get_catalog,
    get_validator,
    read_product_candidate,
)

__all__ = [
    # Exceptions
    "AppException",
    "register_exception_handlers",
    # Responses
    "ApiJSONResponse",
    "ProblemJSONResponse",
    # Dependencies
    "get_app_settings",
    "get_catalog",
    "get_validator",
    "read_product_candidate",
]
