"""Equality strategies for value searches.

Collection operations that look for values take an ``eq`` argument so the
comparison is explicit. Two strategies ship with the library:

- strict_equals, the default for contains() and remove(): no coercion
  between types, and identity for arbitrary objects.
- loose_equals, the default for unique(): Python's ``==``, so 1, 1.0 and
  True are the same value.
"""

from collections.abc import Mapping

__all__ = ["loose_equals", "strict_equals"]

# Types compared by value under strict equality. Everything else is compared
# by identity.
_VALUE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    list,
    tuple,
    dict,
    set,
    frozenset,
)


def strict_equals(a: object, b: object) -> bool:
    """Compare without coercion.

    Two values are strictly equal when they are the same object, or when
    they have the same concrete type, that type is a scalar or builtin
    container, and they compare equal. Containers are compared element by
    element with the same rule, mapping keys and set members included.

    Example:
        strict_equals(1, 1) -> True
        strict_equals(1, 1.0) -> False
        strict_equals(1, True) -> False
        strict_equals(object(), object()) -> False
    """
    if a is b:
        return True
    if type(a) is not type(b) or not isinstance(a, _VALUE_TYPES):
        return False
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(  # type: ignore[arg-type]
            strict_equals(x, y)
            for x, y in zip(a, b)  # type: ignore[call-overload]
        )
    if isinstance(a, Mapping):
        # b's own key objects, so 1 and True do not match
        b_keys = {k: k for k in b}  # type: ignore[attr-defined]
        return a.keys() == b_keys.keys() and all(
            strict_equals(k, b_keys[k])
            and strict_equals(a[k], b[k])  # type: ignore[index]
            for k in a
        )
    if isinstance(a, (set, frozenset)):
        b_members = {x: x for x in b}  # type: ignore[attr-defined]
        return a == b and all(strict_equals(x, b_members[x]) for x in a)
    return a == b


def loose_equals(a: object, b: object) -> bool:
    """Compare with Python's ``==`` operator."""
    return a == b
