"""
JSON response classes with configurable indentation.

Decimal values in the content are written with their exact digits.
"""

from typing import Any, Mapping, Optional

from fastapi.responses import JSONResponse

from app.utils.serialization import dumps


PROBLEM_MEDIA_TYPE = "application/problem+json"


class ApiJSONResponse(JSONResponse):
    """
    JSON response rendered with an explicit indentation.

    Args:
        content: JSON-compatible content
        status_code: HTTP status code
        headers: Extra response headers
        indent: Spaces per level, or None for compact output
    """

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
        indent: Optional[int] = None,
    ) -> None:
        # render() runs inside the base constructor
        self._indent = indent
        super().__init__(content, status_code=status_code, headers=headers)

    def render(self, content: Any) -> bytes:
        return dumps(content, indent=self._indent).encode("utf-8")


class ProblemJSONResponse(ApiJSONResponse):
    """Problem document response."""

    media_type = PROBLEM_MEDIA_TYPE
