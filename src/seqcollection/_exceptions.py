"""Exception hierarchy for seqcollection.

All errors derive from CollectionError and also from the builtin exception a
Python caller would expect for the same condition, so `except KeyError` keeps
working around `c[key]` and Mapping helpers such as `get()` behave normally.
"""

__all__ = [
    "CollectionError",
    "EmptyCollectionError",
    "InvalidArgumentError",
    "NotFoundError",
    "TypeViolationError",
]


class CollectionError(Exception):
    """Base class for all seqcollection errors.

    Attributes:
        code: Optional numeric code identifying the call site that raised.
    """

    code: int | None

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ""


class NotFoundError(CollectionError, KeyError):
    """Raised when a key or value is absent from a collection."""


class EmptyCollectionError(CollectionError, IndexError):
    """Raised when an operation needs at least one element."""


class InvalidArgumentError(CollectionError, ValueError):
    """Raised when an operation receives an argument it cannot use.

    This covers non-callable callbacks, negative slice sizes, elements that
    cannot be indexed by extract(), invalid key types and class names that
    do not resolve.
    """


class TypeViolationError(CollectionError, TypeError):
    """Raised when a value does not satisfy a declared element type.

    Attributes:
        expected: The type tag that was required.
        actual: The type of the offending value, when a single value failed.
    """

    expected: object
    actual: type | None

    def __init__(
        self,
        message: str,
        *,
        expected: object = None,
        actual: type | None = None,
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
