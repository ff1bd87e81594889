"""Errors raised by use cases and translated to HTTP responses by the API layer."""


class DomainError(ValueError):
    """Base class for expected business rule failures."""


class NotFoundError(DomainError):
    """The requested resource does not exist or is not visible to the requester."""


class PermissionDeniedError(DomainError):
    """The requester is not allowed to perform the operation."""


class ConflictError(DomainError):
    """The operation conflicts with the current state of a resource."""


class InvalidOperationError(DomainError):
    """The operation is not valid for the resource in its current state."""


__all__ = [
    "DomainError",
    "NotFoundError",
    "PermissionDeniedError",
    "ConflictError",
    "InvalidOperationError",
]
