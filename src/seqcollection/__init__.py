"""Ordered key/value collections with functional combinators."""

from importlib.metadata import version

from ._collection import AnyCollection, Collection
from ._cursor import Cursor
from ._equality import loose_equals, strict_equals
from ._exceptions import (
    CollectionError,
    EmptyCollectionError,
    InvalidArgumentError,
    NotFoundError,
    TypeViolationError,
)
from ._logging import configure_logging
from ._ordering import compare_values
from ._typed import TypedCollection

__version__ = version("seqcollection")

__all__ = [
    "AnyCollection",
    "Collection",
    "CollectionError",
    "Cursor",
    "EmptyCollectionError",
    "InvalidArgumentError",
    "NotFoundError",
    "TypeViolationError",
    "TypedCollection",
    "__version__",
    "compare_values",
    "configure_logging",
    "loose_equals",
    "strict_equals",
]
