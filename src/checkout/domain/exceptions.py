"""Domain-level exceptions.

Business rule violations are subclasses of DomainException so the CLI layer
can catch them uniformly.  A declined payment is *not* an exception: the
checkout handler reports it by returning None.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object or entity invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
