"""The TypedCollection class."""

from typing import TYPE_CHECKING, ClassVar, TypeVar

from ._collection import Collection
from ._exceptions import TypeViolationError
from ._logging import get_logger
from ._predicates import describe_type, resolve_type, satisfies

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ._types import Key, TypeTag

__all__ = ["TypedCollection"]

logger = get_logger()

V = TypeVar("V")


class TypedCollection(Collection[V]):
    """A Collection whose elements must all satisfy one type tag.

    The tag is a base tag ("int", "float", "number", "string", "array"), a
    class, or a class name. It is resolved when the collection is created
    and cannot change afterwards.

    Every insertion path checks the tag: the constructor seed, push(),
    add() and item assignment. A failing value raises TypeViolationError
    and leaves the collection unchanged. The check is ordinary control flow,
    not an ``assert``, so it also runs under ``python -O``.

    Combinators such as filter() or sort() return plain Collections.

    Example:
        errors = TypedCollection(Exception)
        errors.push(ValueError("bad"))   # ok
        errors.push("bad")               # raises TypeViolationError
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_resolved", "_type_tag")

    _type_tag: "TypeTag"
    _resolved: "str | type"

    def __init__(
        self,
        type_tag: "TypeTag",
        seed: "Collection[V] | Mapping[Key, V] | Iterable[V] | V | None" = None,
    ) -> None:
        """Create a typed collection.

        Args:
            type_tag: The element type every value must satisfy.
            seed: Initial contents, as for Collection. Every seed value is
                checked against type_tag.

        Raises:
            InvalidArgumentError: If type_tag cannot be resolved.
            TypeViolationError: If a seed value does not satisfy type_tag.
        """
        self._type_tag = type_tag
        self._resolved = resolve_type(type_tag)
        super().__init__(seed)
        self._check_collection(self)

    @staticmethod
    def from_collection(
        type_tag: "TypeTag", collection: "Collection[V]"
    ) -> "TypedCollection[V]":
        """Build a typed collection from an existing collection.

        Membership is validated in one step: either every element satisfies
        type_tag and the pairs are copied, or TypeViolationError is raised.
        """
        return TypedCollection(type_tag, collection)

    @property
    def type_tag(self) -> "TypeTag":
        """The tag this collection was created with."""
        return self._type_tag

    def __repr__(self) -> str:
        tag = describe_type(self._resolved)
        return f"TypedCollection({tag!r}, {self._items!r})"

    def _check_value(self, value: object) -> None:
        if satisfies(value, self._resolved):
            return
        expected = describe_type(self._resolved)
        logger.warning(
            "type_violation",
            expected=expected,
            actual=type(value).__name__,
        )
        msg = f"expected {expected}, got {type(value).__name__}"
        raise TypeViolationError(msg, expected=self._type_tag, actual=type(value))

    def _check_collection(self, collection: "Collection[object]") -> None:
        if collection.contains_only(self._resolved):
            return
        expected = describe_type(self._resolved)
        logger.warning("type_violation", expected=expected, count=collection.count())
        msg = f"collection contains values that are not {expected}"
        raise TypeViolationError(msg, expected=self._type_tag)

    def push(self, value: V) -> V:
        """Append value after checking it against the type tag.

        Raises:
            TypeViolationError: If value does not satisfy the type tag.
        """
        self._check_value(value)
        return super().push(value)

    def add(
        self, other: "Collection[V] | Mapping[Key, V] | Iterable[V]"
    ) -> "TypedCollection[V]":
        """Append every value of other after checking all of them.

        Raises:
            TypeViolationError: If any value of other does not satisfy the
                type tag. Nothing is added in that case.
        """
        if isinstance(other, Collection):
            incoming = other
        else:
            incoming = Collection.from_array(other)
        self._check_collection(incoming)
        _ = super().add(incoming)
        return self

    def __setitem__(self, key: "Key", value: V) -> None:
        """Insert or overwrite after checking value against the type tag.

        Raises:
            TypeViolationError: If value does not satisfy the type tag.
        """
        self._check_value(value)
        super().__setitem__(key, value)

    def copy(self) -> "TypedCollection[V]":
        """Return an independent shallow copy with the same type tag."""
        return TypedCollection(self._type_tag, self)
