"""The WSGI application, its routes and the command that serves it."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from typing import Any, Callable, Iterable

from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound
from werkzeug.routing import Map, Rule
from werkzeug.serving import run_simple
from werkzeug.wrappers import Request, Response

from . import response
from .database import connect
from .handlers import Handler
from .repository import CategoryRepository, ProductRepository
from .service import CategoryService, ProductService

_ROUTES = (
    ("/api/categories/<id>", "DELETE", "delete_category_by_id"),
    ("/api/categories/<id>", "PUT", "update_category_by_id"),
    ("/api/categories/<id>", "GET", "get_category_by_id"),
    ("/api/categories", "POST", "create_category"),
    ("/api/categories", "GET", "categories"),
    ("/api/product/<id>", "DELETE", "delete_product_by_id"),
    ("/api/product/<id>", "PUT", "update_product_by_id"),
    ("/api/product/<id>", "GET", "get_product_by_id"),
    ("/api/product", "POST", "create_product"),
    ("/api/product", "GET", "products"),
    ("/health", "GET", "health"),
    ("/", "GET", "index"),
    ("/<path:rest>", "GET", "index"),
)


def _health(request: Request) -> Response:
    return response.ok("Server is running").json(200)


def _index(request: Request, rest: str = "") -> Response:
    message = "Kasir Api, check documentation at " + request.host + "/docs"
    return response.ok(message).json(200)


class KasirApp:
    """WSGI application routing requests to a Handler."""

    def __init__(self, handler: Handler) -> None:
        self.handler = handler
        self.url_map = Map(
            [Rule(path, methods=[method], endpoint=name) for path, method, name in _ROUTES],
            merge_slashes=False,
        )
        self._views: dict[str, Callable[..., Response]] = {
            **handler._views(),
            "health": _health,
            "index": _index,
        }

    def dispatch(self, request: Request) -> Response:
        adapter = self.url_map.bind_to_environ(request.environ)
        try:
            endpoint, args = adapter.match()
        except MethodNotAllowed as exc:
            allowed = ", ".join(sorted(exc.valid_methods or ()))
            return Response(
                "Method Not Allowed\n",
                status=405,
                content_type="text/plain; charset=utf-8",
                headers={"Allow": allowed},
            )
        except NotFound:
            return Response(
                "404 page not found\n", status=404, content_type="text/plain; charset=utf-8"
            )
        except HTTPException as exc:
            return exc.get_response(request.environ)
        return self._views[endpoint](request, **args)

    def __call__(self, environ: dict[str, Any], start_response: Callable) -> Iterable[bytes]:
        request = Request(environ)
        return self.dispatch(request)(environ, start_response)


def create_app(connection: sqlite3.Connection) -> KasirApp:
    """Wire repositories, services and handlers over ``connection``."""
    handler = Handler(
        product_service=ProductService(ProductRepository(connection)),
        category_service=CategoryService(CategoryRepository(connection)),
    )
    return KasirApp(handler)


def main(argv: list[str] | None = None) -> int:
    """Serve the API until interrupted."""
    parser = argparse.ArgumentParser(prog="kasir", description="Serve the kasir HTTP API.")
    parser.add_argument("--database", default="kasir.db", help="database path or URL")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=8000, help="port to listen on")
    args = parser.parse_args(argv)

    try:
        connection = connect(args.database)
    except (ValueError, sqlite3.Error) as exc:
        print(f"error open database: {exc}", file=sys.stderr)
        return 1

    try:
        app = create_app(connection)
        print(f"Successfully listen server in port :{args.port}")
        run_simple(args.host, args.port, app)
    except OSError as exc:
        print(f"error server: {exc}", file=sys.stderr)
        return 1
    finally:
        connection.close()
    return 0