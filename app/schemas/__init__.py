"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas shared by the service and the client.

==============================================================================
"""

from .common import PROBLEM_TYPES, ProblemDetails, ValidationProblemDetails

__all__ = [
    "PROBLEM_TYPES",
    "ProblemDetails",
    "ValidationProblemDetails",
]
