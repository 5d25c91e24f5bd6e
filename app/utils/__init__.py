"""
==============================================================================
Utilities Package
==============================================================================

Modules:
--------
- validators: Product candidate rule-table validation
- serialization: JSON text with exact Decimal digits

==============================================================================
"""

from .validators import FieldError, FieldRule, ProductValidator, ValidationOutcome

__all__ = [
    "FieldError",
    "FieldRule",
    "ProductValidator",
    "ValidationOutcome",
]
