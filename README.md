# kasir

`kasir` is a small point-of-sale ("kasir") REST API. It keeps product
categories and products in an SQLite database and serves them over HTTP as a
WSGI application.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
kasir
```

This opens the database (`kasir.db` in the current directory by default),
creates the `categories` and `product` tables if they do not exist yet, and
serves the API with Werkzeug's development server on `0.0.0.0:8000`.

Options:

- `--database` — database path or URL (default `kasir.db`). Accepted forms
  are `sqlite://` URLs (`sqlite://` alone means an in-memory database),
  `file:` URIs, `:memory:` and plain file paths. Other URL schemes are
  refused.
- `--host` — address to listen on (default `0.0.0.0`).
- `--port` — port to listen on (default `8000`).

The command exits with status 1 if the database cannot be opened or the
server cannot listen.

The application can also be mounted in any WSGI server. Build it from an open
database connection:

```python
from kasir.app import create_app
from kasir.database import connect

connection = connect("sqlite:///kasir.db")
app = create_app(connection)
```

`app` is a `KasirApp`, an ordinary WSGI callable.

## Endpoints

| Method | Path                    | What it does                     |
|--------|-------------------------|----------------------------------|
| GET    | `/`                     | Short greeting                   |
| GET    | `/health`               | Health check                     |
| GET    | `/api/categories`       | List categories (paginated)      |
| POST   | `/api/categories`       | Create a category                |
| GET    | `/api/categories/{id}`  | Fetch one category               |
| PUT    | `/api/categories/{id}`  | Update a category                |
| DELETE | `/api/categories/{id}`  | Delete a category                |
| GET    | `/api/product`          | List products (paginated)        |
| POST   | `/api/product`          | Create a product                 |
| GET    | `/api/product/{id}`     | Fetch one product                |
| PUT    | `/api/product/{id}`     | Update a product                 |
| DELETE | `/api/product/{id}`     | Delete a product                 |

Any other GET path answers with the same greeting as `/`. Other methods on a
known path answer 405 with an `Allow` header.

### Pagination

List endpoints accept the query parameters `page` (default 1) and
`per_page` (default 10). Missing, malformed or non-positive values fall back
to those defaults. The offset is `(page - 1) * per_page`, and the number of
rows returned (the `limit` reported in `meta`) equals the page number. The
`meta.total` field counts all rows.

### Request bodies

A category:

```json
{"name": "Drinks", "description": "Cold and hot beverages"}
```

A product; `category_id` must be the id of an existing category:

```json
{"name": "Iced tea", "price": 5000, "stock": 24, "category_id": "<category id>"}
```

Body keys are matched case-insensitively, unknown keys are ignored, and
missing or `null` members keep their defaults. A member of the wrong JSON
type, or a body that is not a JSON object, answers 400. Bodies are not
checked against the field rules described under `kasir.validation` below.

New records get a time-ordered (version 7) UUID as their id. Product listings
and single-product lookups return the product together with its category's
name; products whose category has been deleted no longer appear there.

### Responses

Every response is JSON of this shape; empty fields are left out:

```json
{
  "status": "OK",
  "message": "Successfully get categories",
  "data": [],
  "meta": {"total": 3, "page": 1, "limit": 1}
}
```

`status` is `OK` on success, `CREATED` when a product is created, and
`FAILED` on error, in which case an `error` field carries the reason.
Creating a category or product answers 201. Malformed request bodies answer
400. Fetching or updating an unknown id, or a product naming an unknown
category, answers 404. Deleting an unknown id still answers 200. Ids that are
not UUIDs and database failures answer 500. Timestamps are RFC 3339 strings.

## Library use

The building blocks are importable on their own:

- `kasir.request.paginate(page, page_size)` turns raw query strings into a
  `Pagination`; `kasir.request.bind_json(body, cls)` decodes a JSON body
  into a request dataclass and raises `ValueError` on bad input.
- `kasir.response.ok`, `failed` and `created` build an `ApiResponse`, whose
  `json(status_code)` and `text(status_code)` return Werkzeug responses.
- `kasir.models` holds `Category`, `Product`, `ProductCategory`,
  `CategoryRequest` and `ProductRequest`.
- `kasir.database.connect(url)` opens the database and creates the tables.
- `kasir.repository.CategoryRepository` / `ProductRepository` talk to the
  database; `kasir.service.CategoryService` / `ProductService` sit on top
  and turn `CategoryRequest` / `ProductRequest` objects into stored records.
- `kasir.handlers.Handler` maps requests to service calls.
- `kasir.validation.new_validation()` returns the shared `Validator`, which
  checks request objects against their `required`, `min`, `numeric` and
  `uuid` rules and raises `ValidationError` with English or Indonesian
  (`lang="id"`) messages.
- `kasir.errors.NotFoundError` and `CategoryNotFoundError` signal missing
  records.

## What it does not do

The greeting points to `/docs`, but no API documentation page is served. The
only storage is SQLite, and the bundled server is Werkzeug's development
server; for production use, mount `create_app(...)` in a WSGI server of your
choice.