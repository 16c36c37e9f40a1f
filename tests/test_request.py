import pytest

from kasir.models import CategoryRequest, ProductRequest
from kasir.request import Pagination, bind_json, paginate


def test_paginate_defaults_for_empty_values():
    assert paginate("", "") == Pagination(page=1, page_size=10, limit=1, offset=0)


def test_paginate_defaults_for_none():
    assert paginate(None, None) == paginate("", "")


@pytest.mark.parametrize("page", ["abc", "0", "-4", " 3", "3 ", "1_0", "99999999999999999999"])
def test_paginate_invalid_page_falls_back(page):
    assert paginate(page, "5").page == 1


@pytest.mark.parametrize("size", ["x", "0", "-1", ""])
def test_paginate_invalid_size_falls_back(size):
    assert paginate("1", size).page_size == 10


def test_paginate_first_page_has_no_offset():
    result = paginate("1", "25")
    assert result.offset == 0
    assert result.page_size == 25


def test_paginate_limit_follows_page():
    for page in ["1", "2", "7"]:
        result = paginate(page, "20")
        assert result.limit == result.page == int(page)


def test_paginate_offset_grows_with_page():
    assert paginate("3", "20").offset > paginate("2", "20").offset


def test_paginate_accepts_plus_sign():
    assert paginate("+3", "4").page == 3


def test_bind_json_round_trip():
    body = b'{"name": "Food", "description": "Snacks"}'
    assert bind_json(body, CategoryRequest) == CategoryRequest(name="Food", description="Snacks")


def test_bind_json_ignores_unknown_and_keeps_defaults():
    result = bind_json('{"name": "Tea", "extra": 1}', ProductRequest)
    assert result == ProductRequest(name="Tea")


def test_bind_json_case_insensitive_keys():
    result = bind_json('{"NAME": "Tea", "Category_ID": "abc"}', ProductRequest)
    assert (result.name, result.category_id) == ("Tea", "abc")


def test_bind_json_null_member_keeps_default():
    assert bind_json('{"price": null, "stock": 4}', ProductRequest) == ProductRequest(stock=4)


def test_bind_json_null_body_gives_defaults():
    assert bind_json("null", CategoryRequest) == CategoryRequest()


@pytest.mark.parametrize(
    "body",
    [
        "",
        "{not json",
        "[1, 2]",
        '"text"',
        '{"price": "12"}',
        '{"price": 1.5}',
        '{"stock": true}',
        '{"name": 3}',
    ],
)
def test_bind_json_rejects_bad_input(body):
    with pytest.raises(ValueError):
        bind_json(body, ProductRequest)