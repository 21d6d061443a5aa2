"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

``ValidationError`` and ``EntityNotFoundError`` are recoverable: the
interactive session reports them and asks again.  Everything else ends
the session.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A quantity is not a positive integer or exceeds the stock on hand."""


class InvalidResponseError(ValidationError):
    """A yes/no answer was not one of the recognised tokens."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """Saving or committing the session's records failed."""


class RetriesExhaustedError(DomainException):
    """The configured maximum number of attempts was used up."""


class SessionCancelledError(DomainException):
    """The user entered the cancel token at a prompt."""
