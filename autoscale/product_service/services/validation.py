"""Request-body validation for product create/update"""
from typing import Any, Dict, List, Union
import math

from autoscale.common_errors import ValidationFailure
from autoscale.product_service.models.schemas import ProductInput

TEXT_FIELDS = ["name", "description"]
NUMERIC_FIELDS = ["price", "stockQuantity"]

NUMBERS_MESSAGE = "Fields price and stockQuantity must be numbers."


def required_fields(require_image_url: bool) -> List[str]:
    """Mandatory payload fields, in the order they are reported"""
    fields = TEXT_FIELDS + NUMERIC_FIELDS + ["category"]
    if require_image_url:
        fields.append("imageUrl")
    return fields


def missing_fields_message(require_image_url: bool, for_update: bool = False) -> str:
    prefix = "Please provide all required fields for update: " if for_update else "Please provide all required fields: "
    return prefix + ", ".join(required_fields(require_image_url))


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_number(value: Any) -> bool:
    """A finite JSON number that fits in a float"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def _optional_text(value: Any):
    return value if isinstance(value, str) else None


def validate_product_payload(
    payload: Dict[str, Any],
    require_image_url: bool = True,
    for_update: bool = False,
) -> Union[ProductInput, ValidationFailure]:
    """
    Check a create/update body

    Presence is checked before types, so a missing price is reported as
    missing rather than as not-a-number. Text fields must be non-empty
    strings; price and stockQuantity only need to be present for the first
    check, and numeric for the second.

    Returns:
        The validated ProductInput, or a ValidationFailure with the message
        to send back to the client
    """
    text_fields = [field for field in required_fields(require_image_url) if field not in NUMERIC_FIELDS]
    if not all(_is_text(payload.get(field)) for field in text_fields) or \
            not all(field in payload for field in NUMERIC_FIELDS):
        return ValidationFailure(missing_fields_message(require_image_url, for_update))

    if not all(_is_number(payload[field]) for field in NUMERIC_FIELDS):
        return ValidationFailure(NUMBERS_MESSAGE)

    return ProductInput(
        name=payload["name"],
        description=payload["description"],
        detailed_description=_optional_text(payload.get("detailedDescription")),
        image_url=_optional_text(payload.get("imageUrl")),
        price=payload["price"],
        stock_quantity=payload["stockQuantity"],
        category=payload["category"],
    )
