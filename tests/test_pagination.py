"""Tests for page/limit parsing and slicing."""
import math

import pytest

from autoscale.common_errors import ValidationFailure
from autoscale.common_pagination import PageRequest, paginate, parse_int, parse_pagination


@pytest.mark.parametrize("raw,expected", [
    (None, 1),
    ("", 1),
    ("3", 3),
    (" 4", 4),
    ("+2", 2),
    ("2abc", 2),
    ("2.9", 2),
    ("-1", -1),
    ("abc", None),
    (" ", None),
    ("9" * 5000, None),
])
def test_parse_int(raw, expected):
    assert parse_int(raw, 1) == expected


def test_parse_pagination_defaults():
    request = parse_pagination(None, None)

    assert request == PageRequest(page=1, limit=10)


@pytest.mark.parametrize("page,limit", [("0", "10"), ("1", "0"), ("x", "10"), ("1", "y"), ("-2", "-2")])
def test_parse_pagination_rejects(page, limit):
    result = parse_pagination(page, limit)

    assert isinstance(result, ValidationFailure)
    assert result.status_code == 400
    assert result.message == "Invalid pagination parameters. Page and limit must be positive numbers."


def test_paginate_middle_page():
    items, info = paginate(list(range(5)), PageRequest(page=2, limit=2))

    assert items == [2, 3]
    assert info.current_page == 2
    assert info.total_pages == 3
    assert info.has_next_page is True
    assert info.has_previous_page is True


def test_paginate_out_of_range():
    items, info = paginate(list(range(5)), PageRequest(page=10, limit=2))

    assert items == []
    assert info.current_page == 10
    assert info.total_items == 5
    assert info.has_next_page is False


def test_paginate_empty():
    items, info = paginate([], PageRequest())

    assert items == []
    assert info.total_pages == 0
    assert info.has_previous_page is False


@pytest.mark.parametrize("size", [0, 1, 4, 5, 11])
@pytest.mark.parametrize("limit", [1, 2, 3, 10])
def test_pages_partition_collection(size, limit):
    collection = list(range(size))
    total_pages = math.ceil(size / limit)

    pages = [paginate(collection, PageRequest(page=page, limit=limit))[0] for page in range(1, total_pages + 1)]

    assert [item for page in pages for item in page] == collection
    assert paginate(collection, PageRequest(limit=limit))[1].total_pages == total_pages


def test_pagination_info_uses_camel_case():
    _, info = paginate([1], PageRequest())

    assert set(info.model_dump(by_alias=True)) == {
        "currentPage", "totalPages", "totalItems", "limit", "hasNextPage", "hasPreviousPage",
    }
