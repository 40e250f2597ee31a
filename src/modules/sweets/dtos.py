"""Sweet DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
``InventoryLedger``.  DTOs are immutable (``frozen=True``).

- ``CreateSweetDTO``: input for sweet creation.
- ``UpdateSweetDTO``: input for partial updates; only supplied fields
  are applied, through the same validators as creation.
- ``SearchPredicate``: catalog filter (see ``modules.sweets.filters``).
- ``PurchaseDTO`` / ``RestockDTO``: bodies of the stock endpoints.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    field_validator,
)

from modules.sweets.constants import (
    DESCRIPTION_MAX_LENGTH,
    IMAGE_URL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    SweetCategory,
)

# ---------------------------------------------------------------------------
# Field validators shared by create and update
# ---------------------------------------------------------------------------


def _required(v, label: str):
    if v is None:
        raise ValueError(f"{label} may not be null.")
    return v


def validate_name(v: Optional[str]) -> str:
    v = _required(v, "Name").strip()
    if not v:
        raise ValueError("Name must not be empty.")
    if len(v) > NAME_MAX_LENGTH:
        raise ValueError(f"Name must be at most {NAME_MAX_LENGTH} characters.")
    return v


def _significant_digits(v: Decimal):
    """Digits and exponent of ``v`` without trailing fraction zeros."""
    _, digits, exponent = v.as_tuple()
    while exponent < 0 and len(digits) > 1 and digits[-1] == 0:
        digits = digits[:-1]
        exponent += 1
    return digits, exponent


def validate_price(v: Optional[Decimal]) -> Decimal:
    if not _required(v, "Price").is_finite():
        raise ValueError("Price must be a finite number.")
    if v <= 0:
        raise ValueError("Price must be greater than zero.")
    digits, exponent = _significant_digits(v)
    if -exponent > PRICE_DECIMAL_PLACES:
        raise ValueError(
            f"Price must have at most {PRICE_DECIMAL_PLACES} decimal places."
        )
    if len(digits) + exponent > PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES:
        raise ValueError(
            f"Price must have at most "
            f"{PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES} integer digits."
        )
    return v


def validate_quantity(v: Optional[int]) -> int:
    if _required(v, "Quantity") < 0:
        raise ValueError("Quantity cannot be negative.")
    return v


def validate_description(v: Optional[str]) -> Optional[str]:
    if v is not None and len(v) > DESCRIPTION_MAX_LENGTH:
        raise ValueError(
            f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters."
        )
    return v


def validate_image_url(v: Optional[str]) -> Optional[str]:
    if v is not None and len(v) > IMAGE_URL_MAX_LENGTH:
        raise ValueError(
            f"Image URL must be at most {IMAGE_URL_MAX_LENGTH} characters."
        )
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateSweetDTO(BaseModel):
    """Immutable DTO for sweet creation requests.

    Validates:
    - ``name`` is non-empty and at most 100 characters.
    - ``category`` is one of the seven catalog categories.
    - ``price`` is a Decimal greater than zero, with at most two
      fraction digits and eight integer digits.
    - ``quantity`` is non-negative.
    - ``description`` is at most 500 characters.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    category: SweetCategory
    price: Decimal
    quantity: StrictInt
    description: Optional[str] = None
    image_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("image_url", "imageUrl")
    )

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v):
        return validate_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v):
        return validate_price(v)

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_non_negative(cls, v):
        return validate_quantity(v)

    @field_validator("description")
    @classmethod
    def description_max_length(cls, v):
        return validate_description(v)

    @field_validator("image_url")
    @classmethod
    def image_url_max_length(cls, v):
        return validate_image_url(v)


class UpdateSweetDTO(BaseModel):
    """Immutable DTO for sweet update requests.

    All fields are optional; only supplied fields are applied.  An
    explicit ``null`` is rejected for required attributes and clears
    the optional ones.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    category: Optional[SweetCategory] = None
    price: Optional[Decimal] = None
    quantity: Optional[StrictInt] = None
    description: Optional[str] = None
    image_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("image_url", "imageUrl")
    )

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v):
        return validate_name(v)

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v):
        return validate_price(v)

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_non_negative(cls, v):
        return validate_quantity(v)

    @field_validator("description")
    @classmethod
    def description_max_length(cls, v):
        return validate_description(v)

    @field_validator("image_url")
    @classmethod
    def image_url_max_length(cls, v):
        return validate_image_url(v)

    @field_validator("category")
    @classmethod
    def category_not_null(cls, v: Optional[SweetCategory]) -> SweetCategory:
        return _required(v, "Category")


class SearchPredicate(BaseModel):
    """Ephemeral catalog filter; absent fields impose no constraint."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    category: Optional[SweetCategory] = None
    min_price: Optional[Decimal] = Field(
        default=None, validation_alias=AliasChoices("min_price", "minPrice")
    )
    max_price: Optional[Decimal] = Field(
        default=None, validation_alias=AliasChoices("max_price", "maxPrice")
    )


class PurchaseDTO(BaseModel):
    """Body of a purchase request; one unit unless stated."""

    model_config = ConfigDict(frozen=True)

    quantity: StrictInt = 1


class RestockDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    quantity: StrictInt
