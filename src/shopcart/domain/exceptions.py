"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument broke a precondition (empty name, bad quantity, ...)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
