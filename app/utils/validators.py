"""
==============================================================================
Validation Utilities Module
==============================================================================

Rule-table validation for product candidates.

Every rule is evaluated on every call and all violations are reported in one
pass. The only exception is a failed "required" rule: once a field is found
missing, the remaining rules for that field and its nested fields are not
reported (a missing category yields one message, not three).

Validation Rules:
----------------
- id: >= 1
- name: required, 2-100 characters
- price: >= 0.01
- stock: >= 0
- category: required
- category.id: >= 1
- category.name: required, 2-50 characters

Strings made only of whitespace count as missing.

==============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, List, Optional, Sequence, Set, Tuple

from app.catalog.models import Product


MIN_PRICE = Decimal("0.01")


@dataclass(frozen=True)
class FieldError:
    """A single failed rule on one field."""

    field: str
    message: str


@dataclass(frozen=True)
class FieldRule:
    """
    One entry of the rule table.

    Attributes:
        field: Dotted field path the rule applies to
        check: Predicate returning True when the candidate satisfies the rule
        message: Message reported when the predicate fails
        required: Whether a failure hides the other rules for this field
    """

    field: str
    check: Callable[[Product], bool]
    message: str
    required: bool = False


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating a candidate; valid when no errors were found."""

    errors: Tuple[FieldError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> List[str]:
        return [error.message for error in self.errors]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _length_between(value: Optional[str], minimum: int, maximum: int) -> bool:
    return value is not None and minimum <= len(value) <= maximum


PRODUCT_RULES: Tuple[FieldRule, ...] = (
    FieldRule(
        "id",
        lambda p: p.id >= 1,
        "Id must be a positive number",
    ),
    FieldRule(
        "name",
        lambda p: not _is_blank(p.name),
        "Name is required",
        required=True,
    ),
    FieldRule(
        "name",
        lambda p: _length_between(p.name, 2, 100),
        "Name must be between 2 and 100 characters",
    ),
    FieldRule(
        "price",
        lambda p: p.price >= MIN_PRICE,
        "Price must be greater than 0",
    ),
    FieldRule(
        "stock",
        lambda p: p.stock >= 0,
        "Stock cannot be negative",
    ),
    FieldRule(
        "category",
        lambda p: p.category is not None,
        "Category is required",
        required=True,
    ),
    FieldRule(
        "category.id",
        lambda p: p.category.id >= 1,
        "Category Id must be a positive number",
    ),
    FieldRule(
        "category.name",
        lambda p: not _is_blank(p.category.name),
        "Category name is required",
        required=True,
    ),
    FieldRule(
        "category.name",
        lambda p: _length_between(p.category.name, 2, 50),
        "Category name must be between 2 and 50 characters",
    ),
)


class ProductValidator:
    """
    Validator for product candidates.

    Pure and deterministic: it inspects field values only and never consults
    the catalog or any other state.

    Example:
        >>> validator = ProductValidator()
        >>> outcome = validator.validate(Product(id=0, name="A"))
        >>> outcome.messages[:2]
        ['Id must be a positive number', 'Name must be between 2 and 100 characters']
    """

    def __init__(self, rules: Optional[Sequence[FieldRule]] = None) -> None:
        self._rules: Tuple[FieldRule, ...] = tuple(PRODUCT_RULES if rules is None else rules)

    @property
    def rules(self) -> Tuple[FieldRule, ...]:
        return self._rules

    def validate(self, candidate: Product) -> ValidationOutcome:
        """
        Run every rule against a candidate.

        Args:
            candidate: Product to check

        Returns:
            ValidationOutcome listing every violation in rule-table order
        """
        errors: List[FieldError] = []
        missing: Set[str] = set()

        for rule in self._rules:
            if self._is_hidden(rule.field, missing):
                continue
            if rule.check(candidate):
                continue

            errors.append(FieldError(rule.field, rule.message))
            if rule.required:
                missing.add(rule.field)

        return ValidationOutcome(tuple(errors))

    def is_valid(self, candidate: Product) -> bool:
        """Quick validation check."""
        return self.validate(candidate).is_valid

    @staticmethod
    def _is_hidden(field: str, missing: Set[str]) -> bool:
        return any(field == name or field.startswith(name + ".") for name in missing)
