"""
==============================================================================
Common Schemas Module
==============================================================================

Problem document schemas (RFC 7807 style) used by every error response.

==============================================================================
"""

from http import HTTPStatus
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field


PROBLEM_TYPES: Dict[int, str] = {
    400: "https://tools.ietf.org/html/rfc9110#section-15.5.1",
    401: "https://tools.ietf.org/html/rfc9110#section-15.5.2",
    403: "https://tools.ietf.org/html/rfc9110#section-15.5.4",
    404: "https://tools.ietf.org/html/rfc9110#section-15.5.5",
    405: "https://tools.ietf.org/html/rfc9110#section-15.5.6",
    406: "https://tools.ietf.org/html/rfc9110#section-15.5.7",
    408: "https://tools.ietf.org/html/rfc9110#section-15.5.9",
    409: "https://tools.ietf.org/html/rfc9110#section-15.5.10",
    412: "https://tools.ietf.org/html/rfc9110#section-15.5.13",
    415: "https://tools.ietf.org/html/rfc9110#section-15.5.16",
    422: "https://tools.ietf.org/html/rfc9110#section-15.5.21",
    426: "https://tools.ietf.org/html/rfc9110#section-15.5.22",
    500: "https://tools.ietf.org/html/rfc9110#section-15.6.1",
    502: "https://tools.ietf.org/html/rfc9110#section-15.6.3",
    503: "https://tools.ietf.org/html/rfc9110#section-15.6.4",
    504: "https://tools.ietf.org/html/rfc9110#section-15.6.5",
}

VALIDATION_TITLE = "One or more validation errors occurred."
VALIDATION_ERRORS_KEY = "product"


def _status_phrase(status_code: int) -> Optional[str]:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return None


class ProblemDetails(BaseModel):
    """Generic problem document."""
    type: Optional[str] = Field(default=None)
    title: Optional[str] = Field(default=None)
    status: Optional[int] = Field(default=None)
    detail: Optional[str] = Field(default=None)

    @classmethod
    def for_status(
        cls,
        status_code: int,
        title: Optional[str] = None,
        detail: Optional[str] = None
    ):
        """Build a problem document with the standard type and title for a status."""
        return cls(
            type=PROBLEM_TYPES.get(status_code),
            title=title or _status_phrase(status_code),
            status=status_code,
            detail=detail,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Dump without unset members."""
        return self.model_dump(exclude_none=True)


class ValidationProblemDetails(ProblemDetails):
    """
    Problem document for rejected candidates.

    All messages are flattened under a single "product" key, one entry per
    violated rule.
    """
    errors: Dict[str, List[str]] = Field(default_factory=dict)

    @classmethod
    def from_messages(cls, messages: Iterable[str]) -> "ValidationProblemDetails":
        """Build a 400 validation problem from rule messages."""
        return cls(
            type=PROBLEM_TYPES[400],
            title=VALIDATION_TITLE,
            status=400,
            errors={VALIDATION_ERRORS_KEY: list(messages)},
        )

    @property
    def messages(self) -> List[str]:
        """All messages across every key."""
        return [message for values in self.errors.values() for message in values]
