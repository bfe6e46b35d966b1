"""Request-body validation for stock updates"""
from typing import Any, Dict, Union
import math

from autoscale.common_errors import ValidationFailure
from autoscale.stock_service.models.schemas import StockUpdate

MISSING_QUANTITY_MESSAGE = 'Missing "quantity" in request body.'
INVALID_QUANTITY_MESSAGE = '"quantity" must be a non-negative integer.'


def is_whole_non_negative(value: Any) -> bool:
    """True for 0, 1, 2... including whole floats such as 5.0"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        return False
    return value >= 0


def validate_stock_payload(payload: Dict[str, Any]) -> Union[StockUpdate, ValidationFailure]:
    """Check the body of PUT /stock/{productId}"""
    if "quantity" not in payload:
        return ValidationFailure(MISSING_QUANTITY_MESSAGE)

    quantity = payload["quantity"]
    if not is_whole_non_negative(quantity):
        return ValidationFailure(INVALID_QUANTITY_MESSAGE)

    return StockUpdate(quantity=int(quantity))
