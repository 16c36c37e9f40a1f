"""Point-of-sale REST API for product categories and products over SQLite."""

__version__ = "1.0.0"