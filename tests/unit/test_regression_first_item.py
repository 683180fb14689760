"""first() must return the value at the first key, whatever that key is."""

from seqcollection import Collection


def test_first_after_from_array() -> None:
    collection = Collection.from_array(["hello world"])

    assert collection.first() == "hello world"


def test_first_after_push() -> None:
    collection: Collection[str] = Collection()
    _ = collection.push("hello world")

    assert collection.first() == "hello world"


def test_first_after_shift() -> None:
    collection: Collection[str] = Collection()
    _ = collection.push("garbage")
    _ = collection.push("hello world")
    _ = collection.shift()

    assert collection.first() == "hello world"


def test_first_with_string_key_first() -> None:
    collection: Collection[object] = Collection()
    collection["name"] = "alice"
    _ = collection.push(1)

    assert collection.first() == "alice"
