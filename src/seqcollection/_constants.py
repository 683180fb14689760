"""Constants for seqcollection."""

from typing import Final

# Error codes carried by CollectionError.code
UNDEFINED_INDEX: Final[int] = 1703221322
NOT_CALLABLE: Final[int] = 1703221329
VALUE_NOT_FOUND: Final[int] = 1804292224
EMPTY_COLLECTION: Final[int] = 1709042046

# Base type tags understood by contains_only() and TypedCollection
TYPE_INT: Final[str] = "int"
TYPE_FLOAT: Final[str] = "float"
TYPE_NUMBER: Final[str] = "number"
TYPE_STRING: Final[str] = "string"
TYPE_ARRAY: Final[str] = "array"

BASE_TYPES: Final[frozenset[str]] = frozenset(
    {TYPE_INT, TYPE_FLOAT, TYPE_NUMBER, TYPE_STRING, TYPE_ARRAY}
)

# First key assigned by push() on a collection with no integer keys
FIRST_SEQUENTIAL_KEY: Final[int] = 0
