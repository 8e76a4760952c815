"""Domain-level exceptions.

All business rule violations and store failures are expressed as subclasses
of DomainException so the application and CLI layers can catch them
uniformly and classify them for the user.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class OutOfStockError(ValidationError):
    """A product with no stock on hand was added to the cart."""


class InsufficientStockError(ValidationError):
    """A cart line would exceed the product's on-hand quantity."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StoreError(DomainException):
    """The backing table store could not complete a request."""


class StoreReadError(StoreError):
    """Rows could not be fetched from the store."""


class StoreWriteError(StoreError):
    """An insert, update or delete was rejected by the store."""
