"""
Input validation for products and orders

Validators never raise. Each returns either ``Valid`` carrying the cleaned
values, or ``FieldError`` naming the offending field as it appears on the
wire (camelCase). Callers decide how to surface a ``FieldError``.

Author: TM3
Date: 2026-03-02
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Generic, Iterable, TypeVar, Union
from uuid import UUID

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

T = TypeVar("T")

PRODUCT_FIELDS = ("name", "image_url", "price")
CUSTOMER_FIELDS = ("full_name", "email", "phone_number", "address")

# numeric(10, 2)
PRICE_QUANTUM = Decimal("0.01")
MAX_PRICE = Decimal("99999999.99")

_url_adapter = TypeAdapter(HttpUrl)


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


ValidationResult = Union[Valid[T], FieldError]


def _error(field: str, message: str) -> FieldError:
    wire_name = to_camel(field)
    return FieldError(field=wire_name, message=f"{wire_name} {message}")


def _clean_text(field: str, value: Any) -> Union[str, FieldError]:
    if value is None:
        return _error(field, "must not be empty")
    if not isinstance(value, str):
        return _error(field, "must be a string")
    if not value.strip():
        return _error(field, "must not be empty")
    return value


def _clean_url(field: str, value: Any) -> Union[str, FieldError]:
    text = _clean_text(field, value)
    if isinstance(text, FieldError):
        return text
    try:
        _url_adapter.validate_python(text)
    except PydanticValidationError:
        return _error(field, "must be a valid URL")
    return text


def _clean_price(field: str, value: Any) -> Union[Decimal, FieldError]:
    if value is None or isinstance(value, bool):
        return _error(field, "must be a number")
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return _error(field, "must be a number")
    if not price.is_finite():
        return _error(field, "must be a number")

    # quantize overflows the decimal context far past the column range
    if price.copy_abs() > MAX_PRICE + 1:
        if price < 0:
            return _error(field, "must not be less than 0")
        return _error(field, f"must not be greater than {MAX_PRICE}")

    price = price.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    if price < 0:
        return _error(field, "must not be less than 0")
    if price > MAX_PRICE:
        return _error(field, f"must not be greater than {MAX_PRICE}")
    return price


def _validate_fields(
    data: Dict[str, Any],
    fields: Iterable[str],
    cleaners: Dict[str, Any],
    partial: bool,
) -> ValidationResult[Dict[str, Any]]:
    cleaned = {}
    for field in fields:
        if field not in data:
            if partial:
                continue
            return _error(field, "is required")

        result = cleaners.get(field, _clean_text)(field, data[field])
        if isinstance(result, FieldError):
            return result
        cleaned[field] = result

    return Valid(cleaned)


def validate_product(data: Dict[str, Any], partial: bool = False) -> ValidationResult[Dict[str, Any]]:
    """
    Validate product fields

    Args:
        data: Field values keyed by attribute name (name, image_url, price)
        partial: When True, omitted fields are skipped instead of required

    Returns:
        Valid with the cleaned values (price quantized to 2 decimals), or
        the first FieldError found
    """
    return _validate_fields(
        data,
        PRODUCT_FIELDS,
        {"image_url": _clean_url, "price": _clean_price},
        partial,
    )


def validate_customer(data: Dict[str, Any], partial: bool = False) -> ValidationResult[Dict[str, Any]]:
    """Validate the customer contact fields of an order"""
    return _validate_fields(data, CUSTOMER_FIELDS, {}, partial)


def validate_product_ids(raw: Any) -> ValidationResult[Dict[UUID, str]]:
    """
    Parse a sequence of product identifiers

    Returns:
        Valid with an insertion-ordered mapping of parsed id to the text the
        caller sent for it. Duplicates collapse into their first occurrence.
    """
    if raw is None:
        return _error("product_ids", "is required")
    if isinstance(raw, (str, bytes)) or not isinstance(raw, (list, tuple)):
        return _error("product_ids", "must be an array")

    ids = {}
    for index, item in enumerate(raw):
        if isinstance(item, UUID):
            product_id = item
        else:
            try:
                product_id = UUID(str(item))
            except ValueError:
                return FieldError(
                    field="productIds",
                    message=f"productIds[{index}] must be a UUID",
                )

        ids.setdefault(product_id, str(item))

    return Valid(ids)
