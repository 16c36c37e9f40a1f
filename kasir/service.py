"""Business operations on categories and products."""

from __future__ import annotations

import os
import time
import uuid

from .models import Category, CategoryRequest, Product, ProductCategory, ProductRequest
from .repository import CategoryRepository, ProductRepository
from .request import Pagination


def _uuid7() -> uuid.UUID:
    """A time-ordered UUID: 48 bits of Unix milliseconds, then random bits."""
    millis = time.time_ns() // 1_000_000
    value = (millis & ((1 << 48) - 1)) << 80 | int.from_bytes(os.urandom(10), "big")
    value = (value & ~(0xF << 76)) | (0x7 << 76)
    value = (value & ~(0x3 << 62)) | (0x2 << 62)
    return uuid.UUID(int=value)


def _parse_uuid(text: str) -> uuid.UUID:
    try:
        return uuid.UUID(text)
    except (ValueError, TypeError, AttributeError):
        raise ValueError(f"uuid: incorrect UUID format in string {text!r}") from None


class CategoryService:
    """Category operations over a category repository."""

    def __init__(self, repository: CategoryRepository) -> None:
        self._repo = repository

    def get_categories(self, paginate: Pagination) -> tuple[list[Category], int]:
        return self._repo.get_categories(paginate)

    def get_category_by_id(self, category_id: str) -> Category:
        return self._repo.get_category_by_id(category_id)

    def create_category(self, request: CategoryRequest) -> Category:
        return self._repo.create_category(
            Category(id=_uuid7(), name=request.name, description=request.description)
        )

    def update_category_by_id(self, category_id: str, request: CategoryRequest) -> Category:
        return self._repo.update_category_by_id(
            category_id, Category(name=request.name, description=request.description)
        )

    def delete_category_by_id(self, category_id: str) -> None:
        self._repo.delete_category_by_id(category_id)


class ProductService:
    """Product operations over a product repository."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repo = repository

    def get_products(self, paginate: Pagination) -> tuple[list[ProductCategory], int]:
        return self._repo.get_products(paginate)

    def get_product_by_id(self, product_id: str) -> ProductCategory:
        return self._repo.get_product_by_id(product_id)

    def create_product(self, request: ProductRequest) -> Product:
        product_id = _uuid7()
        category_id = _parse_uuid(request.category_id)
        return self._repo.create_product(
            Product(
                id=product_id,
                name=request.name,
                stock=request.stock,
                price=request.price,
                category_id=category_id,
            )
        )

    def update_product_by_id(self, product_id: str, request: ProductRequest) -> Product:
        category_id = _parse_uuid(request.category_id)
        return self._repo.update_product_by_id(
            product_id,
            Product(
                name=request.name,
                stock=request.stock,
                price=request.price,
                category_id=category_id,
            ),
        )

    def delete_product_by_id(self, product_id: str) -> None:
        self._repo.delete_product_by_id(product_id)

    def get_products_by_category_id(
        self, category_id: str, paginate: Pagination
    ) -> tuple[list[ProductCategory], int]:
        return self._repo.get_products_by_category_id(category_id, paginate)