"""Key validation and sequential-key helpers.

Collections store values under two kinds of keys: sequential keys, which are
non-negative integers handed out by push(), and explicit string keys. The
helpers here implement the two renumbering rules every operation shares:

- merge: string keys are carried over (a later pair overwrites an earlier one
  with the same key), integer keys are replaced by fresh sequential keys.
- reindex: every key is replaced by 0..n-1.
"""

from typing import TYPE_CHECKING, TypeGuard

from ._constants import FIRST_SEQUENTIAL_KEY
from ._exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._types import Key

__all__ = [
    "is_sequential_key",
    "is_valid_key",
    "merge_pairs",
    "next_sequential_key",
    "reindex",
    "validate_key",
]


def is_sequential_key(key: object) -> TypeGuard[int]:
    """Check whether a key is an auto-assignable integer key.

    Booleans are ints in Python but are never treated as keys.
    """
    return isinstance(key, int) and not isinstance(key, bool) and key >= 0


def is_valid_key(key: object) -> "TypeGuard[Key]":
    """Check whether a value can be used as a collection key."""
    return isinstance(key, str) or is_sequential_key(key)


def validate_key(key: object) -> "Key":
    """Return the key unchanged, or raise if it cannot be used.

    Raises:
        InvalidArgumentError: If key is not a str or non-negative int.
    """
    if not is_valid_key(key):
        msg = f"invalid key {key!r}: keys must be strings or non-negative integers"
        raise InvalidArgumentError(msg)
    return key


def next_sequential_key(keys: "Iterable[object]") -> int:
    """Return the key push() would assign given the existing keys."""
    highest = max((k for k in keys if is_sequential_key(k)), default=None)
    if highest is None:
        return FIRST_SEQUENTIAL_KEY
    return highest + 1


def merge_pairs(
    target: "dict[Key, object]",
    pairs: "Iterable[tuple[Key, object]]",
    next_key: int,
) -> int:
    """Append pairs to target in place using merge semantics.

    Args:
        target: The storage dict to extend.
        pairs: (key, value) pairs in the order they should be appended.
        next_key: The next free sequential key of target.

    Returns:
        The next free sequential key after the merge.
    """
    for key, value in pairs:
        if isinstance(key, str):
            target[key] = value
        else:
            target[next_key] = value
            next_key += 1
    return next_key


def reindex(values: "Iterable[object]") -> "dict[Key, object]":
    """Build storage holding values under keys 0..n-1."""
    return dict(enumerate(values, FIRST_SEQUENTIAL_KEY))
