"""Type aliases for seqcollection.

This module contains ONLY TypeAlias definitions. It has no dependencies on
other seqcollection modules so that _keys.py, _predicates.py and the
collection modules can all import from it without cycles.
"""

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

Key: TypeAlias = "str | int"
"""A collection key.

A key is one of:
- A non-negative integer (a sequential key, assigned by push)
- A string (an explicitly assigned key)
"""

TypeTag: TypeAlias = "str | type"
"""A base type tag, a class name (bare builtin or dotted path) or a class."""

Comparator: TypeAlias = "Callable[[Any, Any], int]"
"""A three-way comparison function returning <0, 0 or >0."""

Equality: TypeAlias = "Callable[[Any, Any], bool]"
"""A two-argument equality strategy."""
