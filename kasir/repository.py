"""Storage of categories and products."""

from __future__ import annotations

import sqlite3
import uuid
from datetime import datetime, timezone
from typing import Any

from .errors import CategoryNotFoundError, NotFoundError
from .models import Category, Product, ProductCategory
from .request import Pagination

_PRODUCT_SELECT = """
SELECT
    p.id,
    p.name,
    p.price,
    p.stock,
    c.name AS category_name,
    p.created_at,
    p.updated_at
FROM product p
JOIN categories c ON p.category_id = c.id
"""


def _uuid_param(value: Any) -> str:
    """Canonical text of a UUID, rejecting anything that is not one."""
    if isinstance(value, uuid.UUID):
        return str(value)
    try:
        return str(uuid.UUID(str(value)))
    except ValueError:
        raise ValueError(f'invalid input syntax for type uuid: "{value}"') from None


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _time(text: str) -> datetime:
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _product_category(row: tuple) -> ProductCategory:
    return ProductCategory(
        id=uuid.UUID(row[0]),
        name=row[1] or "",
        price=int(row[2] or 0),
        stock=int(row[3] or 0),
        category_name=row[4] or "",
        created_at=_time(row[5]),
        updated_at=_time(row[6]),
    )


def _category(row: tuple) -> Category:
    return Category(
        id=uuid.UUID(row[0]),
        name=row[1] or "",
        description=row[2] or "",
        created_at=_time(row[3]),
        updated_at=_time(row[4]),
    )


class CategoryRepository:
    """Reads and writes rows of the ``categories`` table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    def get_categories(self, paginate: Pagination) -> tuple[list[Category], int]:
        """Return one page of categories and the total number of them."""
        rows = self._conn.execute(
            "SELECT id, name, description, created_at, updated_at FROM categories "
            "WHERE 1=1 ORDER BY rowid LIMIT ? OFFSET ?",
            (paginate.limit, paginate.offset),
        ).fetchall()
        (total,) = self._conn.execute(
            "SELECT COUNT(*) FROM categories WHERE 1=1"
        ).fetchone()
        return [_category(row) for row in rows], total

    def get_category_by_id(self, category_id: str) -> Category:
        row = self._conn.execute(
            "SELECT id, name, description, created_at, updated_at FROM categories "
            "WHERE id = ?",
            (_uuid_param(category_id),),
        ).fetchone()
        if row is None:
            raise NotFoundError()
        return _category(row)

    def create_category(self, category: Category) -> Category:
        now = _now()
        stamp = now.isoformat()
        with self._conn:
            self._conn.execute(
                "INSERT INTO categories(id, name, description, created_at, updated_at) "
                "VALUES(?, ?, ?, ?, ?)",
                (_uuid_param(category.id), category.name, category.description, stamp, stamp),
            )
        return Category(
            id=uuid.UUID(_uuid_param(category.id)),
            name=category.name,
            description=category.description,
            created_at=now,
            updated_at=now,
        )

    def update_category_by_id(self, category_id: str, category: Category) -> Category:
        key = _uuid_param(category_id)
        with self._conn:
            cursor = self._conn.execute(
                "UPDATE categories SET name = ?, description = ?, updated_at = ? "
                "WHERE id = ?",
                (category.name, category.description, _now().isoformat(), key),
            )
            if cursor.rowcount == 0:
                raise NotFoundError()
        row = self._conn.execute(
            "SELECT id, created_at, updated_at FROM categories WHERE id = ?", (key,)
        ).fetchone()
        if row is None:
            raise NotFoundError()
        return Category(
            id=uuid.UUID(row[0]),
            name=category.name,
            description=category.description,
            created_at=_time(row[1]),
            updated_at=_time(row[2]),
        )

    def delete_category_by_id(self, category_id: str) -> None:
        with self._conn:
            self._conn.execute(
                "DELETE FROM categories WHERE id = ?", (_uuid_param(category_id),)
            )


class ProductRepository:
    """Reads and writes rows of the ``product`` table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    def _require_category(self, category_id: Any) -> str:
        key = _uuid_param(category_id)
        (exists,) = self._conn.execute(
            "SELECT EXISTS(SELECT 1 FROM categories WHERE id = ?)", (key,)
        ).fetchone()
        if not exists:
            raise CategoryNotFoundError()
        return key

    def get_products(self, paginate: Pagination) -> tuple[list[ProductCategory], int]:
        """Return one page of products with their category names, and the total."""
        rows = self._conn.execute(
            _PRODUCT_SELECT + " WHERE 1=1 ORDER BY p.rowid LIMIT ? OFFSET ?",
            (paginate.limit, paginate.offset),
        ).fetchall()
        (total,) = self._conn.execute(
            "SELECT COUNT(*) FROM product p JOIN categories c ON p.category_id = c.id "
            "WHERE 1=1"
        ).fetchone()
        return [_product_category(row) for row in rows], total

    def create_product(self, product: Product) -> Product:
        category_key = self._require_category(product.category_id)
        now = _now()
        stamp = now.isoformat()
        with self._conn:
            self._conn.execute(
                "INSERT INTO product(id, name, price, stock, category_id, created_at, updated_at) "
                "VALUES(?, ?, ?, ?, ?, ?, ?)",
                (
                    _uuid_param(product.id),
                    product.name,
                    product.price,
                    product.stock,
                    category_key,
                    stamp,
                    stamp,
                ),
            )
        return Product(
            id=uuid.UUID(_uuid_param(product.id)),
            name=product.name,
            price=product.price,
            stock=product.stock,
            category_id=uuid.UUID(category_key),
            created_at=now,
            updated_at=now,
        )

    def get_product_by_id(self, product_id: str) -> ProductCategory:
        row = self._conn.execute(
            _PRODUCT_SELECT + " WHERE p.id = ?", (_uuid_param(product_id),)
        ).fetchone()
        if row is None:
            raise NotFoundError()
        return _product_category(row)

    def delete_product_by_id(self, product_id: str) -> None:
        with self._conn:
            self._conn.execute(
                "DELETE FROM product WHERE id = ?", (_uuid_param(product_id),)
            )

    def update_product_by_id(self, product_id: str, product: Product) -> Product:
        category_key = self._require_category(product.category_id)
        key = _uuid_param(product_id)
        with self._conn:
            cursor = self._conn.execute(
                "UPDATE product SET name = ?, price = ?, stock = ?, category_id = ?, "
                "updated_at = ? WHERE id = ?",
                (
                    product.name,
                    product.price,
                    product.stock,
                    category_key,
                    _now().isoformat(),
                    key,
                ),
            )
            if cursor.rowcount == 0:
                raise NotFoundError()
        row = self._conn.execute(
            "SELECT id, created_at, updated_at FROM product WHERE id = ?", (key,)
        ).fetchone()
        if row is None:
            raise NotFoundError()
        return Product(
            id=uuid.UUID(row[0]),
            name=product.name,
            price=product.price,
            stock=product.stock,
            category_id=uuid.UUID(category_key),
            created_at=_time(row[1]),
            updated_at=_time(row[2]),
        )

    def get_products_by_category_id(
        self, category_id: str, paginate: Pagination
    ) -> tuple[list[ProductCategory], int]:
        """Return one page of the products in a category, and their total."""
        key = _uuid_param(category_id)
        rows = self._conn.execute(
            _PRODUCT_SELECT + " WHERE p.category_id = ? ORDER BY p.rowid LIMIT ? OFFSET ?",
            (key, paginate.limit, paginate.offset),
        ).fetchall()
        (total,) = self._conn.execute(
            "SELECT COUNT(*) FROM product p JOIN categories c ON p.category_id = c.id "
            "WHERE p.category_id = ?",
            (key,),
        ).fetchone()
        return [_product_category(row) for row in rows], total