"""
Commerce Backend — Shared Pydantic Schemas
===========================================

What:  Response envelope, pagination, error and health models shared by
       every entity router, plus the base class for partial-update bodies.
How:   FastAPI uses these models to serialize responses and to generate the
       OpenAPI document; the envelope models are generic over the payload.

Envelope shapes:
    {"success": true,  "data": {...}}
    {"success": true,  "data": [...], "pagination": {"page": 1, "limit": 10}}
    {"success": true,  "message": "User deleted successfully"}
    {"success": false, "error": "User with ID '...' was not found", "request_id": "a1b2c3d4"}
"""

from typing import Any, ClassVar, Dict, FrozenSet, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field, model_validator

T = TypeVar("T")


# ══════════════════════════════════════════════════════════════════════════
# Response Envelopes
# ══════════════════════════════════════════════════════════════════════════


class DataResponse(BaseModel, Generic[T]):
    """Single-record success envelope."""
    success: bool = Field(default=True, description="Always true for successful responses")
    data: T


class PaginationMeta(BaseModel):
    page: int = Field(description="1-based page number that was returned")
    limit: int = Field(description="Maximum number of records per page")


class ListResponse(BaseModel, Generic[T]):
    """Collection success envelope with the pagination that produced it."""
    success: bool = Field(default=True)
    data: List[T]
    pagination: PaginationMeta


class MessageResponse(BaseModel):
    """Returned by DELETE endpoints."""
    success: bool = Field(default=True)
    message: str


class ErrorResponse(BaseModel):
    """
    Standardized error envelope for all API errors.

    Fields:
        error:      Human-readable description, safe to show to users
        details:    Field-level validation errors (422 only)
        request_id: Correlation ID for tracing this error in server logs
    """
    success: bool = Field(default=False)
    error: str = Field(description="Human-readable error description")
    details: Optional[Any] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    environment: str = Field(description="Deployment environment name")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


# ══════════════════════════════════════════════════════════════════════════
# Query Parameter Models
# ══════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseModel):
    """
    Validated page/limit pair.

    The route dependency `pagination_params` builds this from the query
    string; services only ever see the derived offset and limit.
    """
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def meta(self) -> PaginationMeta:
        return PaginationMeta(page=self.page, limit=self.limit)


# ══════════════════════════════════════════════════════════════════════════
# Partial Updates
# ══════════════════════════════════════════════════════════════════════════


class PartialUpdate(BaseModel):
    """
    Base for update bodies where only the fields present are applied.

    - A field left out of the body is untouched.
    - A field sent as null clears a nullable column.
    - A field sent as null that maps to a NOT NULL column is rejected.
    - Unknown fields are rejected.

    Subclasses list their NOT NULL fields in `non_nullable`.
    """

    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in self.model_fields_set & self.non_nullable:
            if getattr(self, name) is None:
                raise ValueError(f"'{name}' cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)
