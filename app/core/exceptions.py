"""
Application Exception Handling

Single AppException class for request-level errors, plus the handlers that
turn every failure into a problem document.

Error Taxonomy:
    Validation failures (400):
        Reported by the create endpoint itself. They are never raised and
        never reach these handlers.

    Malformed body (400):
        The request body is not JSON or cannot be bound to a product.
        Raised as AppException.

    Unsupported media type (415):
        The request body is not declared as JSON. Raised as AppException.

    Route not found (404/405):
        Raised by the router. Answered with a problem document carrying
        only type, title and status.

    Unhandled fault (500):
        Any other exception. Logged with traceback; the response carries
        no internal detail.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.responses import ProblemJSONResponse
from app.schemas.common import ProblemDetails


# Module logger
logger = logging.getLogger(__name__)

UNHANDLED_FAULT_TITLE = "An error occurred while processing your request."


class AppException(Exception):
    """
    Unified application exception rendered as a problem document.

    Usage:
        raise AppException(400, detail="The request body is not valid JSON.")
        raise AppException(500, title="Product catalog not loaded")
    """

    def __init__(
        self,
        status_code: int = 400,
        title: Optional[str] = None,
        detail: Optional[str] = None
    ):
        """
        Initialize application exception.

        Args:
            status_code: HTTP status code (default: 400)
            title: Short summary (defaults to the status phrase)
            detail: Human-readable explanation (optional)
        """
        self.status_code = status_code
        self.problem = ProblemDetails.for_status(status_code, title=title, detail=detail)
        super().__init__(self.problem.detail or self.problem.title)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a problem document."""
        return self.problem.to_dict()


def _indent_for(request: Request) -> Optional[int]:
    settings = getattr(request.app.state, "settings", None)
    return settings.json_indent if settings is not None else None


async def app_exception_handler(request: Request, exc: AppException) -> ProblemJSONResponse:
    """Convert AppException to a problem response."""
    return ProblemJSONResponse(
        exc.to_dict(),
        status_code=exc.status_code,
        indent=_indent_for(request),
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> ProblemJSONResponse:
    """Answer routing errors (404, 405, ...) with a status-only problem."""
    return ProblemJSONResponse(
        ProblemDetails.for_status(exc.status_code).to_dict(),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
        indent=_indent_for(request),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> ProblemJSONResponse:
    """Log the fault and answer with a generic 500 problem."""
    logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
    return ProblemJSONResponse(
        ProblemDetails.for_status(500, title=UNHANDLED_FAULT_TITLE).to_dict(),
        status_code=500,
        indent=_indent_for(request),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def malformed_body(detail: str) -> AppException:
    """Create malformed request body exception."""
    return AppException(400, detail=detail)


def unsupported_media_type(content_type: str) -> AppException:
    """Create unsupported media type exception."""
    received = content_type or "no content type"
    return AppException(
        415,
        detail=f"Expected a JSON request body, got '{received}'."
    )


def catalog_not_loaded() -> AppException:
    """Create catalog not loaded exception."""
    return AppException(500, title="Product catalog not loaded")
