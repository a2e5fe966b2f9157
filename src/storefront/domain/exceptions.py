"""Domain-level exceptions.

Business rule violations are subclasses of DomainException so the CLI
layer can catch them uniformly and display user-friendly messages.
Stores never let these escape for runtime failures; they are raised by
the domain model and the application handlers.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidTransitionError(ValidationError):
    """A reservation status change is not allowed from the current status."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StoreNotInitializedError(DomainException):
    """A store was used before ``initialize()`` rehydrated it."""


class StorageError(Exception):
    """The durable key-value medium failed to read or write."""
