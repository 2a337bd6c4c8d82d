"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the outer layers can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated by the caller's request."""


class EntityNotFoundError(DomainException):
    """A requested warehouse or inventory item does not exist."""


class CapacityExceededError(ValidationError):
    """A reservation would push a warehouse above its maximum capacity."""


class DuplicateSkuError(ValidationError):
    """Another item in the same warehouse already uses the SKU."""


class ItemNotInSourceError(ValidationError):
    """A transferred item exists but lives in a different warehouse."""


class InvalidAmountError(ValidationError):
    """A quantity or capacity amount is outside its allowed range."""


class WarehouseNotEmptyError(ValidationError):
    """A warehouse still holds stock and cannot be deleted."""


class InvariantViolationError(DomainException):
    """Capacity bookkeeping is inconsistent.

    Never expected in normal operation: it signals a bug upstream (for
    example releasing more units than a warehouse holds) and is surfaced
    rather than clamped.
    """


_HTTP_STATUS = (
    (EntityNotFoundError, 404),
    (InvariantViolationError, 500),
    (ValidationError, 400),
)


def http_status_for(exc: DomainException) -> int:
    """Map a domain error to the status code an HTTP layer should answer with.

    The CLI uses the same split to decide which errors are logged as faults.
    """
    for exc_type, status in _HTTP_STATUS:
        if isinstance(exc, exc_type):
            return status
    return 500
