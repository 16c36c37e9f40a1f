"""Opening the database and making sure its tables exist."""

from __future__ import annotations

import logging
import sqlite3

logger = logging.getLogger(__name__)

_SCHEME = "sqlite://"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS categories (
    id TEXT PRIMARY KEY,
    name VARCHAR(255),
    description TEXT,
    created_at TEXT DEFAULT (strftime('%Y-%m-%dT%H:%M:%f+00:00', 'now')),
    updated_at TEXT DEFAULT (strftime('%Y-%m-%dT%H:%M:%f+00:00', 'now'))
);

CREATE TABLE IF NOT EXISTS product (
    id TEXT PRIMARY KEY,
    name VARCHAR(255),
    price REAL,
    stock INTEGER,
    category_id TEXT REFERENCES categories(id) ON DELETE SET NULL,
    created_at TEXT DEFAULT (strftime('%Y-%m-%dT%H:%M:%f+00:00', 'now')),
    updated_at TEXT DEFAULT (strftime('%Y-%m-%dT%H:%M:%f+00:00', 'now'))
);
"""


def _resolve(url: str) -> tuple[str, bool]:
    """Turn a database URL into a sqlite3 target and whether it is a URI."""
    if not url:
        raise ValueError("database url is empty")
    if url.startswith(_SCHEME):
        rest = url[len(_SCHEME):]
        if not rest:
            return ":memory:", False
        if rest.startswith("/"):
            rest = rest[1:]
        if not rest:
            raise ValueError(f"database url has no path: {url!r}")
        return rest, False
    if url.startswith("file:"):
        return url, True
    scheme, sep, _ = url.partition("://")
    if sep:
        raise ValueError(f"unsupported database scheme: {scheme!r}")
    return url, False


def connect(url: str) -> sqlite3.Connection:
    """Open the database at ``url``, check it answers and create the tables.

    Accepts ``sqlite://`` URLs, ``file:`` URIs, ``:memory:`` and plain paths.
    """
    target, is_uri = _resolve(url)
    connection = sqlite3.connect(target, uri=is_uri, check_same_thread=False)
    try:
        connection.execute("PRAGMA foreign_keys = ON")
        connection.execute("SELECT 1").fetchone()
        connection.executescript(_SCHEMA)
    except sqlite3.Error:
        connection.close()
        raise
    logger.info("Database is connected")
    return connection