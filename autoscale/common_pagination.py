"""
Page/limit pagination shared by every list endpoint
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional, Sequence, Tuple, TypeVar, Union
import math
import re

from autoscale.common_errors import ValidationFailure

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

INVALID_PAGINATION_MESSAGE = "Invalid pagination parameters. Page and limit must be positive numbers."

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

T = TypeVar("T")


class PageRequest(BaseModel):
    """A validated page/limit pair"""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def start_index(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def end_index(self) -> int:
        return self.page * self.limit


class PaginationInfo(BaseModel):
    """The ``pagination`` half of a list response"""
    current_page: int
    total_pages: int
    total_items: int
    limit: int
    has_next_page: bool
    has_previous_page: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def parse_int(raw: Optional[str], default: int) -> Optional[int]:
    """
    Parse the leading integer of a query-string value

    Missing or empty values give ``default``; text without a leading integer
    gives None. Trailing garbage is ignored, so "2abc" and "2.9" both read as 2.
    """
    if not raw:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # More digits than int() accepts
        return None


def parse_pagination(page: Optional[str], limit: Optional[str]) -> Union[PageRequest, ValidationFailure]:
    """Validate raw ``page``/``limit`` query parameters"""
    parsed_page = parse_int(page, DEFAULT_PAGE)
    parsed_limit = parse_int(limit, DEFAULT_LIMIT)

    if parsed_page is None or parsed_limit is None or parsed_page < 1 or parsed_limit < 1:
        return ValidationFailure(INVALID_PAGINATION_MESSAGE)

    return PageRequest(page=parsed_page, limit=parsed_limit)


def paginate(items: Sequence[T], request: PageRequest) -> Tuple[List[T], PaginationInfo]:
    """Slice one page out of ``items`` and describe where it sits"""
    total_items = len(items)
    start, end = request.start_index, request.end_index

    return list(items[start:end]), PaginationInfo(
        current_page=request.page,
        total_pages=math.ceil(total_items / request.limit),
        total_items=total_items,
        limit=request.limit,
        has_next_page=end < total_items,
        has_previous_page=start > 0,
    )
