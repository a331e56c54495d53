"""
Commerce Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the known failure conditions.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the `{success: false, error}` envelope with the right status.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    CommerceError (base)
    ├── ValidationError             → 400 Bad Request
    ├── NotFoundError               → 404 Not Found
    │   └── ProductNotFoundError    → 404 Not Found (order placement)
    ├── ConflictError               → 409 Conflict (duplicate email)
    ├── InsufficientInventoryError  → 409 Conflict (stock too low)
    └── DatabaseError               → 500 Internal Server Error

    Request-shape errors are raised by FastAPI itself
    (RequestValidationError) and answered with 422.
"""

from typing import Any, Dict, Optional


class CommerceError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CommerceError):
    """
    Raised when client input breaks a business rule that the request
    schema cannot express.

    HTTP: 400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(CommerceError):
    """
    Raised when a requested resource does not exist.

    When:    Get/update/delete by an unknown id, or a write that references
             a missing user, product, order or courier.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records; services convert that
    into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource.capitalize()} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class ProductNotFoundError(NotFoundError):
    """Order placement referenced a product that does not exist."""

    def __init__(self, product_id: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(resource="product", resource_id=product_id, context=context)


class ConflictError(CommerceError):
    """
    Raised when a write violates a uniqueness constraint.

    When:    Creating or updating a user with an email already in use.
    HTTP:    409 Conflict
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InsufficientInventoryError(CommerceError):
    """
    Raised when an order (or a negative stock adjustment) asks for more
    units than the product has in stock.

    HTTP:    409 Conflict
    Carries both values so the client can show "only N left".
    """

    def __init__(
        self,
        product_id: str,
        requested: int,
        available: int,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Insufficient inventory for product '{product_id}': "
            f"requested {requested}, available {available}"
        )
        ctx = context or {}
        ctx.update(product_id=product_id, requested=requested, available=available)
        super().__init__(message=message, context=ctx)
        self.product_id = product_id
        self.requested = requested
        self.available = available


class DatabaseError(CommerceError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic.
        Detailed error info is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
