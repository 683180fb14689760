"""Default ordering used by Collection.sort().

Values are ordered first by group, then naturally within the group:

1. None
2. Numbers (bool, int, float, Decimal, and other numbers.Real)
3. Strings
4. Bytes
5. Everything else, compared with the values' own ``<``

Numbers compare by exact value, so Decimal("1.5") sorts between 1 and 2.0.
Mixing groups never raises. Two values in group 5 that do not support
ordering raise InvalidArgumentError, and so does a signaling comparison such
as one against Decimal("NaN").
"""

from decimal import Decimal
from numbers import Real

from ._exceptions import InvalidArgumentError

__all__ = ["compare_values"]

_RANK_NONE = 0
_RANK_NUMBER = 1
_RANK_STRING = 2
_RANK_BYTES = 3
_RANK_OTHER = 4


def _rank(value: object) -> int:
    if value is None:
        return _RANK_NONE
    if isinstance(value, (Real, Decimal)):
        return _RANK_NUMBER
    if isinstance(value, str):
        return _RANK_STRING
    if isinstance(value, bytes):
        return _RANK_BYTES
    return _RANK_OTHER


def compare_values(a: object, b: object) -> int:
    """Compare two values for sorting.

    Args:
        a: First value.
        b: Second value.

    Returns:
        -1 if a sorts before b, 0 if they are equivalent, 1 otherwise.

    Raises:
        InvalidArgumentError: If both values are in the "other" group and
            cannot be compared with each other.
    """
    rank_a = _rank(a)
    rank_b = _rank(b)
    if rank_a != rank_b:
        return -1 if rank_a < rank_b else 1
    if rank_a == _RANK_NONE:
        return 0
    try:
        if a < b:  # type: ignore[operator]
            return -1
        if b < a:  # type: ignore[operator]
            return 1
    except (TypeError, ArithmeticError) as e:
        msg = (
            f"cannot order {type(a).__name__} and {type(b).__name__}; "
            "pass a comparator to sort()"
        )
        raise InvalidArgumentError(msg) from e
    return 0
