"""Errors raised by the data layer and understood by the HTTP handlers."""


class NotFoundError(LookupError):
    """Raised when a requested row does not exist."""

    def __init__(self, message: str = "no rows in result set") -> None:
        super().__init__(message)


class CategoryNotFoundError(NotFoundError):
    """Raised when a product refers to a category that does not exist."""

    def __init__(self, message: str = "category not found") -> None:
        super().__init__(message)