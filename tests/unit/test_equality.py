import pytest

from seqcollection import loose_equals, strict_equals


class Token:
    def __init__(self, value: str) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Token) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)


class TestStrictEquals:
    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (1, 1),
            (10**20, 10**20),
            ("abc", "abc"),
            (None, None),
            (1.5, 1.5),
            ([1, "a"], [1, "a"]),
            ((1, 2), (1, 2)),
            ({"a": [1]}, {"a": [1]}),
            ({1: "x", "b": 2}, {"b": 2, 1: "x"}),
            ({1, "a"}, {"a", 1}),
        ],
        ids=[
            "int",
            "big_int",
            "str",
            "none",
            "float",
            "list",
            "tuple",
            "dict",
            "dict_key_order",
            "set",
        ],
    )
    def test_equal(self, a: object, b: object) -> None:
        assert strict_equals(a, b)

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (1, 1.0),
            (1, True),
            (0, False),
            (1, "1"),
            ([1], [1.0]),
            ({"a": 1}, {"a": True}),
            ([1], (1,)),
            ([1, 2], [1]),
            ({1: "x"}, {True: "x"}),
            ({"a": {1: "x"}}, {"a": {1.0: "x"}}),
            ({1, 2}, {True, 2}),
            (frozenset({0}), frozenset({False})),
        ],
        ids=[
            "int_float",
            "int_bool",
            "zero_false",
            "int_str",
            "list_coercion",
            "dict_coercion",
            "list_tuple",
            "length",
            "dict_key_bool",
            "nested_dict_key_float",
            "set_member_bool",
            "frozenset_member_bool",
        ],
    )
    def test_not_equal(self, a: object, b: object) -> None:
        assert not strict_equals(a, b)

    def test_objects_by_identity(self) -> None:
        token = Token("a")

        assert strict_equals(token, token)
        assert not strict_equals(token, Token("a"))


class TestLooseEquals:
    @pytest.mark.parametrize(
        ("a", "b"),
        [(1, 1.0), (1, True), (0, False), ([1], [1.0])],
        ids=["int_float", "int_bool", "zero_false", "list_coercion"],
    )
    def test_coerces_numbers(self, a: object, b: object) -> None:
        assert loose_equals(a, b)

    def test_uses_eq(self) -> None:
        assert loose_equals(Token("a"), Token("a"))

    def test_no_string_coercion(self) -> None:
        assert not loose_equals(1, "1")
