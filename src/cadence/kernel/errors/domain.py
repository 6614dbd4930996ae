"""Domain errors – rule violations in the caller-supplied job set."""

from __future__ import annotations

from cadence.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


__all__ = ["ConflictError", "DomainError"]
