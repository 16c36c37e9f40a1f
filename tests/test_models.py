import uuid
from datetime import datetime, timedelta, timezone

from kasir.models import (
    Category,
    CategoryRequest,
    Product,
    ProductCategory,
    ProductRequest,
)

NIL = "00000000-0000-0000-0000-000000000000"
ZERO = "0001-01-01T00:00:00Z"


def test_category_defaults_serialise_as_zero_values():
    assert Category().to_dict() == {
        "id": NIL,
        "name": "",
        "description": "",
        "created_at": ZERO,
        "updated_at": ZERO,
    }


def test_category_fraction_trimmed():
    stamp = datetime(2024, 5, 6, 7, 8, 9, 123000, tzinfo=timezone.utc)
    data = Category(name="Food", created_at=stamp, updated_at=stamp).to_dict()
    assert data["created_at"] == "2024-05-06T07:08:09.123Z"
    assert data["name"] == "Food"


def test_time_with_offset():
    stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=7)))
    assert Category(updated_at=stamp).to_dict()["updated_at"] == "2024-01-02T03:04:05+07:00"


def test_naive_time_is_treated_as_utc():
    stamp = datetime(2024, 1, 2, 3, 4, 5)
    aware = stamp.replace(tzinfo=timezone.utc)
    assert Category(created_at=stamp).to_dict() == Category(created_at=aware).to_dict()


def test_product_to_dict_keys_and_ids():
    pid, cid = uuid.uuid4(), uuid.uuid4()
    data = Product(id=pid, name="Tea", price=5, stock=2, category_id=cid).to_dict()
    assert list(data) == [
        "id", "name", "price", "stock", "category_id", "created_at", "updated_at",
    ]
    assert data["id"] == str(pid)
    assert data["category_id"] == str(cid)
    assert data["price"] == 5 and data["stock"] == 2


def test_product_category_to_dict():
    data = ProductCategory(name="Tea", category_name="Drinks").to_dict()
    assert data["category_name"] == "Drinks"
    assert "category_id" not in data
    assert data["created_at"] == ZERO


def test_request_defaults_are_zero_values():
    assert CategoryRequest() == CategoryRequest(name="", description="")
    req = ProductRequest()
    assert (req.name, req.price, req.stock, req.category_id) == ("", 0, 0, "")