"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog products and their embedded category.

Wire Format:
-----------
- Field names are camelCase on output
- Field names are matched case-insensitively on input
  (`Name`, `name` and `NAME` bind to the same field)
- Prices are exact decimals; JSON bodies should be decoded with
  `parse_float=Decimal` and encoded with `app.utils.serialization.dumps`
  so no binary float is ever involved
- Integers are 32-bit; prices must fit a 96-bit decimal (28 decimal places
  at most, magnitude up to 79228162514264337593543950335)

Models are frozen. Missing fields decode to zero values and a missing
category stays `None` so that the validator reports it.

==============================================================================
"""

from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator, model_validator
from pydantic.alias_generators import to_camel


INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

MAX_DECIMAL_COEFFICIENT = 2**96 - 1
MAX_DECIMAL = Decimal(MAX_DECIMAL_COEFFICIENT)
MAX_DECIMAL_SCALE = 28


def fits_money_decimal(value: Decimal) -> bool:
    """Check a value is representable as a 96-bit coefficient with scale 0-28."""
    if not value.is_finite() or abs(value) > MAX_DECIMAL:
        return False

    _, digits, exponent = value.as_tuple()
    digits = list(digits)
    # Trailing zeros after the point carry no value
    while exponent < 0 and len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1

    coefficient = int("".join(str(d) for d in digits))
    if exponent >= 0 or coefficient == 0:
        return True

    return -exponent <= MAX_DECIMAL_SCALE and coefficient <= MAX_DECIMAL_COEFFICIENT


class CamelModel(BaseModel):
    """Frozen model with camelCase aliases and case-insensitive field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def match_field_names(cls, data: Any) -> Any:
        """Rewrite incoming keys to their canonical alias, ignoring case."""
        if not isinstance(data, dict):
            return data

        aliases: Dict[str, str] = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            aliases[name.lower()] = alias
            aliases[alias.lower()] = alias

        return {
            aliases.get(key.lower(), key) if isinstance(key, str) else key: value
            for key, value in data.items()
        }

    def to_json_dict(self) -> Dict[str, Any]:
        """Dump to JSON-ready values with camelCase keys; prices stay Decimal."""
        return self.model_dump(by_alias=True)


class Category(CamelModel):
    """
    Product category, owned by exactly one product.

    Attributes:
        id: Category identifier (valid when >= 1)
        name: Category display name (valid when 2-50 characters)
    """

    id: StrictInt = Field(default=0, ge=INT32_MIN, le=INT32_MAX, description="Category identifier")
    name: Optional[str] = Field(default=None, description="Category name")


class Product(CamelModel):
    """
    Catalog product.

    Construction never validates business rules; an instance may be an
    invalid candidate. Use `ProductValidator` to check one. Construction
    does reject values no client could have meant: integers outside 32-bit
    range and prices a 96-bit decimal cannot hold.

    Attributes:
        id: Product identifier (valid when >= 1)
        name: Product display name (valid when 2-100 characters)
        price: Unit price as an exact decimal (valid when >= 0.01)
        stock: Units on hand (valid when >= 0)
        category: Embedded category (required)
    """

    id: StrictInt = Field(default=0, ge=INT32_MIN, le=INT32_MAX, description="Product identifier")
    name: Optional[str] = Field(default=None, description="Product name")
    price: Decimal = Field(default=Decimal("0"), description="Unit price")
    stock: StrictInt = Field(default=0, ge=INT32_MIN, le=INT32_MAX, description="Units on hand")
    category: Optional[Category] = Field(default=None, description="Owning category")

    @field_validator("price")
    @classmethod
    def check_price_range(cls, price: Decimal) -> Decimal:
        if not fits_money_decimal(price):
            raise ValueError(
                "Price must fit a 96-bit decimal "
                f"(at most {MAX_DECIMAL_SCALE} decimal places, magnitude up to {MAX_DECIMAL})"
            )
        return price
