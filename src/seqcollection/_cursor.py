"""Independent iteration cursors over a collection.

A Cursor walks a snapshot of the collection's keys taken when it is created
or rewound. Each traversal gets its own cursor, so two loops over the same
collection never move each other's position. A cursor notices structural
changes to its collection (keys added or removed) and stops being valid
until rewind() is called.
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

if TYPE_CHECKING:
    from ._collection import Collection
    from ._types import Key

__all__ = ["Cursor"]

V = TypeVar("V")


class Cursor(Iterator[V], Generic[V]):
    """A restartable position over a collection's values.

    The stateful methods mirror the collection's own cursor protocol:

        cursor = collection.cursor()
        while cursor.valid():
            print(cursor.key(), cursor.current())
            cursor.next()

    A Cursor is also a plain Python iterator over values:

        for value in collection.cursor():
            ...
    """

    __slots__: ClassVar[tuple[str, ...]] = (
        "_collection",
        "_keys",
        "_position",
        "_revision",
    )

    _collection: "Collection[V]"
    _keys: "list[Key]"
    _position: int
    _revision: int

    def __init__(self, collection: "Collection[V]") -> None:
        self._collection = collection
        _ = self.rewind()

    def __repr__(self) -> str:
        return (
            f"Cursor(position={self._position}, size={len(self._keys)}, "
            f"valid={self.valid()})"
        )

    def _is_stale(self) -> bool:
        return self._revision != self._collection._revision  # noqa: SLF001

    def rewind(self) -> "V | None":
        """Move to the first key in insertion order.

        Returns:
            The first value, or None if the collection is empty.
        """
        self._keys = list(self._collection._get_state())  # noqa: SLF001
        self._position = 0
        self._revision = self._collection._revision  # noqa: SLF001
        return self.current()

    def valid(self) -> bool:
        """Check whether the cursor references an existing key."""
        return not self._is_stale() and self._position < len(self._keys)

    def key(self) -> "Key | None":
        """Return the key under the cursor, or None when not valid."""
        if not self.valid():
            return None
        return self._keys[self._position]

    def current(self) -> "V | None":
        """Return the value under the cursor, or None when not valid."""
        if not self.valid():
            return None
        state = self._collection._get_state()  # noqa: SLF001
        return state[self._keys[self._position]]

    def next(self) -> "V | None":
        """Advance by one position.

        Returns:
            The value at the new position, or None once exhausted.
        """
        if self._position < len(self._keys):
            self._position += 1
        return self.current()

    def __iter__(self) -> "Cursor[V]":
        return self

    def __next__(self) -> V:
        if self._is_stale():
            msg = "collection changed during iteration; rewind() the cursor"
            raise RuntimeError(msg)
        if self._position >= len(self._keys):
            raise StopIteration
        state = self._collection._get_state()  # noqa: SLF001
        value = state[self._keys[self._position]]
        self._position += 1
        return value
