"""Element type predicates.

A type tag is either one of the base tags (int, float, number, string,
array), a class, or the name of a class. Class names are resolved once with
resolve_type(): bare names are looked up in builtins, dotted names are
imported ("collections.OrderedDict", "myapp.models.User").
"""

import builtins
import importlib
from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING

from ._constants import (
    BASE_TYPES,
    TYPE_ARRAY,
    TYPE_FLOAT,
    TYPE_INT,
    TYPE_NUMBER,
    TYPE_STRING,
)
from ._exceptions import InvalidArgumentError
from ._logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from ._types import TypeTag

__all__ = ["describe_type", "is_array", "resolve_type", "satisfies"]

logger = get_logger()


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_float(value: object) -> bool:
    return isinstance(value, float)


def _is_number(value: object) -> bool:
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def _is_string(value: object) -> bool:
    return isinstance(value, str)


def is_array(value: object) -> bool:
    """Check whether a value is a native list, tuple or mapping.

    Collections are mappings too, but they are objects rather than native
    arrays and do not count.
    """
    from ._collection import Collection  # noqa: PLC0415

    if isinstance(value, Collection):
        return False
    return isinstance(value, (list, tuple, Mapping))


_BASE_PREDICATES: "dict[str, Callable[[object], bool]]" = {
    TYPE_INT: _is_int,
    TYPE_FLOAT: _is_float,
    TYPE_NUMBER: _is_number,
    TYPE_STRING: _is_string,
    TYPE_ARRAY: is_array,
}


def _resolve_name(name: str) -> object:
    module_name, _, attr = name.rpartition(".")
    if not module_name:
        return getattr(builtins, name)
    module = importlib.import_module(module_name)
    return getattr(module, attr)


def resolve_type(tag: "TypeTag") -> "str | type":
    """Resolve a type tag to a base tag name or a class.

    Args:
        tag: A base tag, a class, or a class name.

    Returns:
        The base tag unchanged, or the class the tag names.

    Raises:
        InvalidArgumentError: If the tag is not a string or class, or if a
            class name does not resolve to a class.
    """
    if isinstance(tag, type):
        return tag
    if not isinstance(tag, str):
        msg = f"type tag must be a string or class, got {type(tag).__name__}"
        raise InvalidArgumentError(msg)
    if tag in BASE_TYPES:
        return tag
    try:
        resolved = _resolve_name(tag)
    except (ImportError, AttributeError, ValueError) as e:
        logger.warning("type_resolution_failed", tag=tag, error=str(e))
        msg = f"cannot resolve type {tag!r}"
        raise InvalidArgumentError(msg) from e
    if not isinstance(resolved, type):
        msg = f"{tag!r} does not name a class"
        raise InvalidArgumentError(msg)
    return resolved


def satisfies(value: object, resolved: "str | type") -> bool:
    """Check a value against a tag already passed through resolve_type()."""
    if isinstance(resolved, type):
        return isinstance(value, resolved)
    return _BASE_PREDICATES[resolved](value)


def describe_type(resolved: "str | type") -> str:
    """Return a readable name for a resolved tag, for error messages."""
    if isinstance(resolved, type):
        return f"{resolved.__module__}.{resolved.__qualname__}"
    return resolved
