"""Domain exception classes for business logic errors."""


class DomainError(Exception):
    """Base class for all domain-specific errors."""

    pass


class ResourceNotFoundError(DomainError):
    """Raised when a requested resource cannot be found."""

    pass


class ResourceExistsError(DomainError):
    """Raised when a write collides with an existing resource's natural key."""

    pass


class ValidationError(DomainError):
    """Raised when request data is rejected outside of a form workflow."""

    pass


class AuthorNotFoundError(ResourceNotFoundError):
    """Raised when an author cannot be found."""

    pass


class GenreNotFoundError(ResourceNotFoundError):
    """Raised when a genre cannot be found."""

    pass
