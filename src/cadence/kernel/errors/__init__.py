"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ConflictError
    └── ApplicationError     (application.py)
"""

from cadence.kernel.errors.application import ApplicationError
from cadence.kernel.errors.base import BaseError
from cadence.kernel.errors.domain import ConflictError, DomainError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
]
