"""HTTP handlers for the category and product endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar

from werkzeug.wrappers import Request, Response

from . import response
from .errors import CategoryNotFoundError, NotFoundError
from .models import CategoryRequest, ProductRequest
from .request import bind_json, paginate
from .service import CategoryService, ProductService
from .validation import Validator, new_validation

T = TypeVar("T")


class _InvalidRequest(Exception):
    """The request body could not be decoded."""


def _bind(request: Request, cls: type[T]) -> T:
    try:
        return bind_json(request.get_data(), cls)
    except (ValueError, TypeError) as exc:
        raise _InvalidRequest(str(exc)) from exc


def _invalid(exc: BaseException) -> Response:
    return response.failed("Invalid Request", exc).json(400)


@dataclass
class Handler:
    """Turns HTTP requests into service calls and service results into responses."""

    product_service: ProductService
    category_service: CategoryService
    validator: Validator = field(default_factory=new_validation)

    # Categories

    def categories(self, request: Request) -> Response:
        page = paginate(request.args.get("page"), request.args.get("per_page"))
        try:
            items, total = self.category_service.get_categories(page)
        except Exception as exc:
            return response.failed("Failed get categories", exc).json(500)
        meta = response.Meta(total=total, page=page.page, limit=page.limit)
        return response.ok("Successfully get categories", items, meta).json(200)

    def create_category(self, request: Request) -> Response:
        try:
            body = _bind(request, CategoryRequest)
        except _InvalidRequest as exc:
            return _invalid(exc)
        try:
            category = self.category_service.create_category(body)
        except Exception as exc:
            return response.failed("Failed create category", exc).json(500)
        return response.ok("Successfully create category", category).json(201)

    def get_category_by_id(self, request: Request, id: str) -> Response:
        try:
            category = self.category_service.get_category_by_id(id)
        except NotFoundError as exc:
            return response.failed("Not Found category", exc).json(404)
        except Exception as exc:
            return response.failed("Failed get category", exc).json(500)
        return response.ok("Successfully get category", category).json(200)

    def update_category_by_id(self, request: Request, id: str) -> Response:
        try:
            body = _bind(request, CategoryRequest)
        except _InvalidRequest as exc:
            return _invalid(exc)
        try:
            category = self.category_service.update_category_by_id(id, body)
        except NotFoundError as exc:
            return response.failed("Not Found category", exc).json(404)
        except Exception as exc:
            return response.failed("Failed update category", exc).json(500)
        return response.ok("Successfully update category", category).json(200)

    def delete_category_by_id(self, request: Request, id: str) -> Response:
        try:
            self.category_service.delete_category_by_id(id)
        except NotFoundError as exc:
            return response.failed("Not Found category", exc).json(404)
        except Exception as exc:
            return response.failed("Failed delete category", exc).json(500)
        return response.ok("Successfully delete category").json(200)

    # Products

    def products(self, request: Request) -> Response:
        page = paginate(request.args.get("page"), request.args.get("per_page"))
        try:
            items, total = self.product_service.get_products(page)
        except Exception as exc:
            return response.failed("Failed get products", exc).json(500)
        meta = response.Meta(total=total, page=page.page, limit=page.limit)
        return response.ok("Successfully get data products", items, meta).json(200)

    def create_product(self, request: Request) -> Response:
        try:
            body = _bind(request, ProductRequest)
        except _InvalidRequest as exc:
            return _invalid(exc)
        try:
            product = self.product_service.create_product(body)
        except CategoryNotFoundError as exc:
            return response.failed("Not Found category", exc).json(404)
        except Exception as exc:
            return response.failed("Failed Create Product", exc).json(500)
        return response.created("Successfully create product", product).json(201)

    def get_product_by_id(self, request: Request, id: str) -> Response:
        try:
            product = self.product_service.get_product_by_id(id)
        except NotFoundError as exc:
            return response.failed("Not Found product", exc).json(404)
        except Exception as exc:
            return response.failed("Failed get product", exc).json(500)
        return response.ok("Successfully get product", product).json(200)

    def update_product_by_id(self, request: Request, id: str) -> Response:
        try:
            body = _bind(request, ProductRequest)
        except _InvalidRequest as exc:
            return _invalid(exc)
        try:
            product = self.product_service.update_product_by_id(id, body)
        except CategoryNotFoundError as exc:
            return response.failed("Not Found category", exc).json(404)
        except NotFoundError as exc:
            return response.failed("Not Found product", exc).json(404)
        except Exception as exc:
            return response.failed("Failed update product", exc).json(500)
        return response.ok("Successfully update product", product).json(200)

    def delete_product_by_id(self, request: Request, id: str) -> Response:
        try:
            self.product_service.delete_product_by_id(id)
        except NotFoundError as exc:
            return response.failed("Not Found product", exc).json(404)
        except Exception as exc:
            return response.failed("Failed delete product", exc).json(500)
        return response.ok("Successfully delete product").json(200)

    def _views(self) -> dict[str, Any]:
        return {
            "categories": self.categories,
            "create_category": self.create_category,
            "get_category_by_id": self.get_category_by_id,
            "update_category_by_id": self.update_category_by_id,
            "delete_category_by_id": self.delete_category_by_id,
            "products": self.products,
            "create_product": self.create_product,
            "get_product_by_id": self.get_product_by_id,
            "update_product_by_id": self.update_product_by_id,
            "delete_product_by_id": self.delete_product_by_id,
        }