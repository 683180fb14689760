import pytest

from seqcollection import Collection, Cursor


class TestBuiltInCursor:
    def test_walks_values_and_keys(self, mixed_keys: Collection[object]) -> None:
        seen: list[tuple[object, object]] = []
        _ = mixed_keys.rewind()
        while mixed_keys.valid():
            seen.append((mixed_keys.key(), mixed_keys.current()))
            _ = mixed_keys.next()

        assert seen == [("name", "alice"), (0, 10), ("role", "admin"), (1, 20)]

    def test_starts_at_first_key(self, letters: Collection[str]) -> None:
        assert letters.valid() is True
        assert letters.key() == 0
        assert letters.current() == "a"

    def test_next_returns_new_current(self, letters: Collection[str]) -> None:
        assert letters.next() == "b"
        assert letters.next() == "c"
        assert letters.next() is None

    def test_exhausted_reports_no_value(self, letters: Collection[str]) -> None:
        for _ in range(5):
            _ = letters.next()

        assert letters.valid() is False
        assert letters.current() is None
        assert letters.key() is None

    def test_rewind_returns_first(self, letters: Collection[str]) -> None:
        _ = letters.next()

        assert letters.rewind() == "a"
        assert letters.key() == 0

    def test_empty(self) -> None:
        collection: Collection[object] = Collection()

        assert collection.valid() is False
        assert collection.current() is None
        assert collection.rewind() is None

    def test_falsy_first_value_is_valid(self) -> None:
        collection = Collection([0])

        assert collection.valid() is True
        assert collection.current() == 0


class TestCursorInvalidation:
    def test_shift_invalidates(self, letters: Collection[str]) -> None:
        assert letters.current() == "a"

        _ = letters.shift()

        assert letters.valid() is False
        assert letters.current() is None
        assert letters.rewind() == "b"

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda c: c.remove("b"),
            lambda c: c.reset(),
            lambda c: c.push("d"),
            lambda c: c.unset(0),
            lambda c: c.add(["x"]),
            lambda c: c.__setitem__("new", "v"),
        ],
        ids=["remove", "reset", "push", "unset", "add", "new_key"],
    )
    def test_structural_mutation_invalidates(
        self, letters: Collection[str], mutate: object
    ) -> None:
        assert letters.valid() is True

        _ = mutate(letters)  # type: ignore[operator]

        assert letters.valid() is False

    def test_overwrite_keeps_position(self, letters: Collection[str]) -> None:
        _ = letters.next()
        letters[1] = "B"

        assert letters.valid() is True
        assert letters.current() == "B"

    def test_combinators_do_not_move_cursor(self, letters: Collection[str]) -> None:
        _ = letters.next()
        _ = letters.sort()
        _ = letters.filter()
        _ = letters.reverse()

        assert letters.current() == "b"


class TestIndependentCursors:
    def test_cursor_type(self, letters: Collection[str]) -> None:
        assert isinstance(letters.cursor(), Cursor)

    def test_cursors_do_not_share_position(self, letters: Collection[str]) -> None:
        first = letters.cursor()
        second = letters.cursor()

        _ = first.next()
        _ = first.next()

        assert first.current() == "c"
        assert second.current() == "a"
        assert letters.current() == "a"

    def test_python_iteration(self, letters: Collection[str]) -> None:
        assert list(letters.cursor()) == ["a", "b", "c"]

    def test_nested_iteration(self) -> None:
        collection = Collection([1, 2])

        pairs = [(a, b) for a in collection.cursor() for b in collection.cursor()]

        assert pairs == [(1, 1), (1, 2), (2, 1), (2, 2)]

    def test_mutation_during_iteration_raises(self, letters: Collection[str]) -> None:
        with pytest.raises(RuntimeError, match="changed during iteration"):
            for value in letters.cursor():
                if value == "a":
                    _ = letters.push("d")

    def test_rewind_after_mutation(self, letters: Collection[str]) -> None:
        cursor = letters.cursor()
        _ = letters.push("d")

        assert cursor.valid() is False
        _ = cursor.rewind()

        assert list(cursor) == ["a", "b", "c", "d"]

    def test_exhausted_iterator_stops(self, letters: Collection[str]) -> None:
        cursor = letters.cursor()
        _ = list(cursor)

        assert list(cursor) == []
        assert cursor.valid() is False

    def test_repr(self, letters: Collection[str]) -> None:
        assert repr(letters.cursor()) == "Cursor(position=0, size=3, valid=True)"
