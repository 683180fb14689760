"""The Collection class.

Collection wraps an insertion-ordered dict and adds functional combinators,
strict bounds-checked access and a cursor protocol. Keys are either
sequential (non-negative integers assigned by push()) or explicit strings.

Combinators (each, filter, sort, flatten, ...) return a new Collection and
never touch the receiver. Mutators (push, add, remove, shift, reset and item
assignment) work in place.
"""

from abc import ABCMeta
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from functools import cmp_to_key, reduce as functools_reduce
from decimal import Decimal
from numbers import Number, Rational
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeAlias, TypeVar, cast

from ._constants import (
    EMPTY_COLLECTION,
    NOT_CALLABLE,
    TYPE_NUMBER,
    UNDEFINED_INDEX,
    VALUE_NOT_FOUND,
)
from ._cursor import Cursor
from ._equality import loose_equals, strict_equals
from ._exceptions import (
    EmptyCollectionError,
    InvalidArgumentError,
    NotFoundError,
    TypeViolationError,
)
from ._keys import (
    is_sequential_key,
    is_valid_key,
    merge_pairs,
    next_sequential_key,
    reindex,
    validate_key,
)
from ._logging import get_logger
from ._ordering import compare_values
from ._predicates import is_array, resolve_type, satisfies

if TYPE_CHECKING:
    from collections.abc import Callable

    from ._types import Comparator, Equality, Key, TypeTag

__all__ = ["AnyCollection", "Collection"]

logger = get_logger()

V = TypeVar("V")
U = TypeVar("U")
A = TypeVar("A")


def _require_callable(fn: object, operation: str) -> None:
    if not callable(fn):
        msg = f"invalid callable provided to Collection.{operation}()"
        raise InvalidArgumentError(msg, NOT_CALLABLE)


def _seed_state(seed: object) -> "dict[Key, Any]":
    """Build initial storage from a constructor seed."""
    if seed is None:
        return {}
    if isinstance(seed, Collection):
        return dict(seed._get_state())  # noqa: SLF001
    if isinstance(seed, Mapping):
        mapping = cast("Mapping[object, Any]", seed)
        return {validate_key(k): v for k, v in mapping.items()}
    if isinstance(seed, (str, bytes, bytearray)):
        return {0: seed}
    if isinstance(seed, Iterable):
        return reindex(cast("Iterable[Any]", seed))
    return {0: seed}


def _pairs_of(other: object) -> "list[tuple[Key, Any]]":
    """Return the (key, value) pairs another container contributes to add()."""
    if isinstance(other, Collection):
        return other.items()
    if isinstance(other, Mapping):
        mapping = cast("Mapping[Key, Any]", other)
        return list(mapping.items())
    if isinstance(other, Iterable) and not isinstance(other, (str, bytes, bytearray)):
        return list(enumerate(cast("Iterable[Any]", other)))
    msg = f"cannot add elements from {type(other).__name__}"
    raise InvalidArgumentError(msg)


def _iter_leaves(values: "Iterable[Any]") -> "Iterator[Any]":
    """Yield non-container values depth-first, left to right."""
    for value in values:
        if isinstance(value, Collection):
            yield from _iter_leaves(value.values())
        elif isinstance(value, Mapping):
            yield from _iter_leaves(cast("Mapping[Any, Any]", value).values())
        elif is_array(value):
            yield from _iter_leaves(cast("Iterable[Any]", value))
        else:
            yield value


def _as_decimal(value: object) -> Any:
    if isinstance(value, (Decimal, int)):
        return value
    if isinstance(value, Rational):
        return Decimal(value.numerator) / Decimal(value.denominator)
    return Decimal(float(value))  # type: ignore[arg-type]


def _summable(values: "Iterable[Any]") -> "list[Any]":
    """Return numbers that can be added together.

    Decimal does not mix with float or Fraction, so once any element is a
    Decimal the others are converted to Decimal.
    """
    terms = list(values)
    if any(isinstance(v, Decimal) for v in terms):
        return [_as_decimal(v) for v in terms]
    return terms


def _extract_one(element: object, key: object) -> Any:
    if isinstance(element, (Collection, Mapping)):
        mapping = cast("Mapping[Any, Any]", element)
        try:
            return mapping.get(key)
        except TypeError:
            # unhashable key
            return None
    if isinstance(element, (list, tuple)):
        sequence = cast("list[Any] | tuple[Any, ...]", element)
        if is_sequential_key(key) and key < len(sequence):
            return sequence[key]
        return None
    if element is None or isinstance(element, (str, bytes, bytearray, Number)):
        msg = "Collection.extract() requires every element to be an object or array"
        raise InvalidArgumentError(msg)
    if isinstance(key, str):
        return getattr(element, key, None)
    return None


class Collection(Generic[V]):
    """An ordered key/value container with functional combinators.

    A Collection can be seeded with nothing, a single value (stored at key
    0), a sequence or other iterable (stored at keys 0..n-1), a mapping, or
    another Collection (its pairs are copied). The seed itself is never
    shared with the new instance.

    Reading a key that does not exist raises NotFoundError instead of
    returning None. Use has() or get() to probe.

    Collection supports the MutableMapping interface: ``c[key]``,
    ``c[key] = value``, ``del c[key]``, ``key in c``, ``len(c)``, and
    iteration over keys in insertion order.
    """

    __slots__: ClassVar[tuple[str, ...]] = (
        "_cursor",
        "_items",
        "_next_key",
        "_revision",
    )

    _items: "dict[Key, V]"
    _next_key: int
    _revision: int
    _cursor: "Cursor[V] | None"

    def __init__(
        self,
        seed: "Collection[V] | Mapping[Key, V] | Iterable[V] | V | None" = None,
    ) -> None:
        """Create a collection.

        Args:
            seed: Initial contents. See the class docstring.

        Raises:
            InvalidArgumentError: If seed is a mapping with invalid keys.
        """
        self._items = _seed_state(seed)
        self._next_key = next_sequential_key(self._items)
        self._revision = 0
        self._cursor = None

    @staticmethod
    def from_array(data: "Mapping[Key, V] | Iterable[V]") -> "Collection[V]":
        """Build a collection from a sequence, iterable or mapping.

        Unlike the constructor, a non-iterable argument is rejected instead
        of being wrapped as a single element.

        Raises:
            InvalidArgumentError: If data is not iterable, or is a string.
        """
        if isinstance(data, (str, bytes, bytearray)) or not isinstance(
            data, (Iterable, Mapping)
        ):
            msg = (
                "from_array() requires a sequence or mapping, "
                f"got {type(data).__name__}"
            )
            raise InvalidArgumentError(msg)
        return Collection(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    # Storage ---------------------------------------------------------------

    def _get_state(self) -> "dict[Key, V]":
        """Return the storage dict. Cursors read through this."""
        return self._items

    def _touch(self) -> None:
        self._revision += 1

    def _store(self, key: "Key", value: V) -> None:
        if key not in self._items:
            self._touch()
        self._items[key] = value
        if is_sequential_key(key) and key >= self._next_key:
            self._next_key = key + 1

    def _discard(self, key: "Key") -> None:
        del self._items[key]
        self._touch()
        if key == self._next_key - 1:
            self._next_key = next_sequential_key(self._items)

    @staticmethod
    def _derive(state: "dict[Key, U]") -> "Collection[U]":
        """Wrap freshly built storage in a plain Collection without copying."""
        result: Collection[U] = Collection()
        result._items = state
        result._next_key = next_sequential_key(state)
        return result

    # Cursor protocol -------------------------------------------------------

    def cursor(self) -> "Cursor[V]":
        """Return a new, independent cursor positioned at the first key."""
        return Cursor(self)

    def _default_cursor(self) -> "Cursor[V]":
        if self._cursor is None:
            self._cursor = Cursor(self)
        return self._cursor

    def current(self) -> "V | None":
        """Return the value at the built-in cursor, or None when exhausted."""
        return self._default_cursor().current()

    def key(self) -> "Key | None":
        """Return the key at the built-in cursor, or None when exhausted."""
        return self._default_cursor().key()

    def next(self) -> "V | None":
        """Advance the built-in cursor and return the new current value."""
        return self._default_cursor().next()

    def rewind(self) -> "V | None":
        """Reset the built-in cursor to the first key and return its value."""
        return self._default_cursor().rewind()

    def valid(self) -> bool:
        """Check whether the built-in cursor references an existing key.

        Structural mutations (push, remove, shift, reset, ...) invalidate the
        cursor until rewind() is called.
        """
        return self._default_cursor().valid()

    # Bounds-checked access -------------------------------------------------

    def count(self) -> int:
        """Return the number of elements."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Check whether the collection has no elements."""
        return not self._items

    def has(self, key: object) -> bool:
        """Check whether a key is defined. Never raises."""
        return is_valid_key(key) and key in self._items

    def get(self, key: object, default: "V | None" = None) -> "V | None":
        """Return the value for key, or default if the key is absent."""
        if self.has(key):
            return self._items[cast("Key", key)]
        return default

    def first(self) -> V:
        """Return the value at the first key in insertion order.

        The first key is looked up explicitly, so a falsy first value such
        as 0, "" or None is returned as-is.

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        if not self._items:
            msg = "collection is empty"
            raise EmptyCollectionError(msg, EMPTY_COLLECTION)
        first_key = next(iter(self._items))
        return self._items[first_key]

    def last(self) -> V:
        """Return the value at the last key in insertion order.

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        if not self._items:
            msg = "collection is empty"
            raise EmptyCollectionError(msg, EMPTY_COLLECTION)
        last_key = next(reversed(self._items))
        return self._items[last_key]

    def shift(self) -> "V | None":
        """Remove and return the first element.

        Integer keys of the remaining elements are renumbered from 0; string
        keys are kept.

        Returns:
            The removed value, or None if the collection was empty.
        """
        if not self._items:
            return None
        first_key = next(iter(self._items))
        value = self._items.pop(first_key)
        remaining: dict[Key, V] = {}
        self._next_key = merge_pairs(remaining, self._items.items(), 0)
        self._items = remaining
        self._touch()
        return value

    def __getitem__(self, key: "Key") -> V:
        """Return the value for key.

        Raises:
            NotFoundError: If the key is not defined.
        """
        if not self.has(key):
            msg = f"undefined index: {key!r}"
            raise NotFoundError(msg, UNDEFINED_INDEX)
        return self._items[key]

    def __setitem__(self, key: "Key", value: V) -> None:
        """Insert or overwrite the value at key.

        Raises:
            InvalidArgumentError: If key is not a str or non-negative int.
        """
        self._store(validate_key(key), value)

    def unset(self, key: "Key") -> None:
        """Remove the element at key. Absent keys are ignored."""
        if self.has(key):
            self._discard(key)

    def __delitem__(self, key: "Key") -> None:
        """Remove the element at key. Absent keys are ignored."""
        self.unset(key)

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __iter__(self) -> "Iterator[Key]":
        """Iterate over keys in insertion order."""
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._items)

    def keys(self) -> "list[Key]":
        """Return all keys in insertion order."""
        return list(self._items)

    def values(self) -> "list[V]":
        """Return all values in insertion order."""
        return list(self._items.values())

    def items(self) -> "list[tuple[Key, V]]":
        """Return all (key, value) pairs in insertion order."""
        return list(self._items.items())

    def to_dict(self) -> "dict[Key, V]":
        """Return an insertion-ordered snapshot of the pairs."""
        return dict(self._items)

    def to_list(self) -> "list[V]":
        """Return the values in insertion order, dropping keys."""
        return list(self._items.values())

    def copy(self) -> "Collection[V]":
        """Return an independent shallow copy."""
        return Collection._derive(dict(self._items))

    # Mutators --------------------------------------------------------------

    def push(self, value: V) -> V:
        """Append value at the next sequential key.

        Returns:
            The value pushed. Use add() for chaining.
        """
        self._store(self._next_key, value)
        return value

    def add(
        self, other: "Collection[V] | Mapping[Key, V] | Iterable[V]"
    ) -> "Collection[V]":
        """Append every value of other, in its order.

        String keys of other are preserved (overwriting the same key here);
        integer keys are replaced by fresh sequential keys.

        Returns:
            This collection.

        Raises:
            InvalidArgumentError: If other is not a collection, mapping or
                iterable.
        """
        pairs = _pairs_of(other)
        self._next_key = merge_pairs(self._items, pairs, self._next_key)
        if pairs:
            self._touch()
        return self

    def remove(self, value: V, *, eq: "Equality" = strict_equals) -> "Collection[V]":
        """Remove the first element equal to value.

        The key of the removed element is left unused; other keys do not
        move.

        Args:
            value: The value to look for.
            eq: Equality strategy. Defaults to strict_equals, which does no
                type coercion and compares arbitrary objects by identity.

        Returns:
            This collection.

        Raises:
            NotFoundError: If no element matches.
        """
        for key, element in self._items.items():
            if eq(element, value):
                self._discard(key)
                return self
        msg = "value not found in collection"
        raise NotFoundError(msg, VALUE_NOT_FOUND)

    def reset(self) -> "Collection[V]":
        """Remove every element. The collection stays usable."""
        dropped = len(self._items)
        self._items = {}
        self._next_key = next_sequential_key(self._items)
        self._touch()
        logger.debug("collection_reset", dropped=dropped)
        return self

    def pop(self, key: "Key", *args: V) -> V:
        """Remove and return the value for key.

        Raises:
            NotFoundError: If key is absent and no default is given.
        """
        if len(args) > 1:
            msg = f"pop expected at most 2 arguments, got {1 + len(args)}"
            raise TypeError(msg)
        try:
            value = self[key]
        except NotFoundError:
            if args:
                return args[0]
            raise
        self._discard(key)
        return value

    def popitem(self) -> "tuple[Key, V]":
        """Remove and return the first (key, value) pair.

        Raises:
            NotFoundError: If the collection is empty.
        """
        if not self._items:
            msg = "popitem(): collection is empty"
            raise NotFoundError(msg, EMPTY_COLLECTION)
        key = next(iter(self._items))
        value = self._items[key]
        self._discard(key)
        return key, value

    def setdefault(self, key: "Key", default: V) -> V:
        """Return the value for key, storing default first if absent."""
        if not self.has(key):
            self[key] = default
        return self._items[key]

    def update(
        self,
        other: "Mapping[Key, V] | Iterable[tuple[Key, V]] | None" = None,
        /,
        **kwargs: V,
    ) -> None:
        """Assign pairs from a mapping or iterable of pairs, then kwargs."""
        if other is not None:
            if isinstance(other, (Collection, Mapping)):
                mapping = cast("Mapping[Key, V]", other)
                for key in list(mapping.keys()):
                    self[key] = mapping[key]
            else:
                for key, value in other:
                    self[key] = value
        for str_key, value in kwargs.items():
            self[str_key] = value

    # Combinators -----------------------------------------------------------

    def each(self, fn: "Callable[[V], U]") -> "Collection[U]":
        """Map fn over the values, keeping keys.

        Raises:
            InvalidArgumentError: If fn is not callable.
        """
        _require_callable(fn, "each")
        return Collection._derive({k: fn(v) for k, v in self._items.items()})

    def filter(self, fn: "Callable[[V], object] | None" = None) -> "Collection[V]":
        """Keep the elements for which fn returns a truthy value.

        Without fn, falsy values are dropped. Surviving elements keep their
        original keys.
        """
        if fn is None:
            return Collection._derive({k: v for k, v in self._items.items() if v})
        _require_callable(fn, "filter")
        return Collection._derive({k: v for k, v in self._items.items() if fn(v)})

    def reduce(
        self, fn: "Callable[[A, V], A]", initial: "A | None" = None
    ) -> "A | None":
        """Fold the values from the left, starting with initial."""
        _require_callable(fn, "reduce")
        values = self._items.values()
        return functools_reduce(fn, values, initial)  # type: ignore[arg-type]

    def sort(
        self,
        cmp: "Comparator | None" = None,
        *,
        key: "Callable[[V], Any] | None" = None,
        reverse: bool = False,
    ) -> "Collection[V]":
        """Return the values sorted, under keys 0..n-1.

        Args:
            cmp: Three-way comparator. Defaults to compare_values, which
                orders numbers before strings and sorts naturally within
                each group.
            key: Sort key function, as for sorted(). Exclusive with cmp.
            reverse: Sort in descending order.

        Raises:
            InvalidArgumentError: If both cmp and key are given, if either
                is not callable, or if the default ordering meets values it
                cannot compare.
        """
        if cmp is not None and key is not None:
            msg = "sort() accepts either cmp or key, not both"
            raise InvalidArgumentError(msg)
        if key is not None:
            _require_callable(key, "sort")
            sort_key = key
        else:
            comparator = compare_values if cmp is None else cmp
            _require_callable(comparator, "sort")
            sort_key = cmp_to_key(comparator)
        ordered = sorted(self._items.values(), key=sort_key, reverse=reverse)
        return Collection._derive(reindex(ordered))

    def reverse(self) -> "Collection[V]":
        """Return the values in opposite order, under keys 0..n-1."""
        return Collection._derive(reindex(reversed(self._items.values())))

    def slice(self, start: int, size: int = 0) -> "Collection[V]":
        """Return size elements beginning at position start.

        A size of 0 means "to the end". A negative start counts from the
        end. Integer keys are renumbered from 0; string keys are kept.

        Raises:
            InvalidArgumentError: If size is negative.
        """
        if size < 0:
            msg = f"invalid range: size must not be negative, got {size}"
            raise InvalidArgumentError(msg)
        pairs = list(self._items.items())
        if start < 0:
            start = max(len(pairs) + start, 0)
        stop = None if size == 0 else start + size
        state: dict[Key, V] = {}
        _ = merge_pairs(state, pairs[start:stop], 0)
        return Collection._derive(state)

    def unique(self, *, eq: "Equality" = loose_equals) -> "Collection[V]":
        """Drop repeated values, keeping the first occurrence.

        Args:
            eq: Equality strategy. Defaults to loose_equals (Python ``==``),
                so 1 and 1.0 count as the same value. Strings never equal
                numbers, so "1" and 1 are both kept; pass
                ``eq=lambda a, b: str(a) == str(b)`` to compare string forms
                instead.

        Returns:
            A collection with keys 0..n-1.
        """
        kept: list[V] = []
        for value in self._items.values():
            if not any(eq(seen, value) for seen in kept):
                kept.append(value)
        return Collection._derive(reindex(kept))

    def flatten(self) -> "Collection[Any]":
        """Expand nested collections, lists, tuples and mappings.

        Leaves are collected depth-first, left to right, under fresh keys
        0..n-1. Keys of nested containers are discarded.
        """
        return Collection._derive(reindex(_iter_leaves(self._items.values())))

    def extract(self, key: object) -> "Collection[Any]":
        """Map every element to the value it holds under key.

        Mappings and collections are looked up by key, lists and tuples by
        index, other objects by attribute name. A missing entry maps to
        None. Element keys are kept.

        Raises:
            InvalidArgumentError: If an element is a scalar (None, a number,
                a string or bytes).
        """
        return Collection._derive(
            {k: _extract_one(v, key) for k, v in self._items.items()}
        )

    def group_by(self, fn: "Callable[[V], Key]") -> "Collection[Collection[V]]":
        """Group values by the key fn returns for each of them.

        Groups appear in the order their key is first produced; values keep
        their relative order inside each group.

        Example:
            Collection(["a", "b", "c", "dd", "ee"]).group_by(len)
            -> {1: ["a", "b", "c"], 2: ["dd", "ee"]}

        Raises:
            InvalidArgumentError: If fn is not callable, or returns something
                that is not a valid key.
        """
        _require_callable(fn, "group_by")
        groups: Collection[Collection[V]] = Collection()
        for value in self._items.values():
            group_key = fn(value)
            if not groups.has(group_key):
                groups[group_key] = Collection()
            _ = groups[group_key].push(value)
        return groups

    def contains_only(self, type_tag: "TypeTag") -> bool:
        """Check that every element satisfies a type tag.

        Args:
            type_tag: A base tag ("int", "float", "number", "string",
                "array"), a class, or a class name such as "Exception" or
                "collections.OrderedDict".

        Returns:
            True if all elements match. Always True when empty.

        Raises:
            InvalidArgumentError: If type_tag names a class that cannot be
                resolved.
        """
        resolved = resolve_type(type_tag)
        return all(satisfies(v, resolved) for v in self._items.values())

    def sum(self) -> Any:
        """Add up the elements.

        Raises:
            EmptyCollectionError: If the collection is empty.
            TypeViolationError: If any element is not a number.
        """
        if not self._items:
            msg = "collection is empty"
            raise EmptyCollectionError(msg, EMPTY_COLLECTION)
        if not self.contains_only(TYPE_NUMBER):
            msg = "collection contains non-numeric values"
            raise TypeViolationError(msg, expected=TYPE_NUMBER)
        return sum(_summable(self._items.values()))  # type: ignore[arg-type]

    def avg(self) -> Any:
        """Return the arithmetic mean; same errors as sum()."""
        return self.sum() / self.count()

    def join(self, separator: str) -> str:
        """Join the string form of every value with separator."""
        return separator.join(str(v) for v in self._items.values())

    def contains(self, value: object, *, eq: "Equality" = strict_equals) -> bool:
        """Check whether some element equals value.

        Unlike ``in``, which tests keys, this searches values. The default
        strict_equals does no type coercion and compares arbitrary objects
        by identity.
        """
        return any(eq(element, value) for element in self._items.values())


AnyCollection: TypeAlias = "Collection[Any]"
"""A collection whose elements are not statically typed."""

_ = cast("ABCMeta", cast("object", MutableMapping)).register(Collection)
