"""Shared fixtures for unit tests."""

from typing import TYPE_CHECKING

import pytest
import structlog

from seqcollection import AnyCollection, Collection

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def reset_structlog() -> "Iterator[None]":
    """Restore structlog's default configuration after every test.

    Tests that call configure_logging() would otherwise leak their level
    filter into later tests that capture debug events.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def letters() -> Collection[str]:
    """Provide a fresh ["a", "b", "c"] collection with keys 0..2."""
    return Collection(["a", "b", "c"])


@pytest.fixture
def mixed_keys() -> Collection[object]:
    """Provide a collection mixing string and sequential keys.

    Insertion order is "name", 0, "role", 1.
    """
    collection: Collection[object] = Collection()
    collection["name"] = "alice"
    _ = collection.push(10)
    collection["role"] = "admin"
    _ = collection.push(20)
    return collection


@pytest.fixture
def make_collection() -> "Callable[..., AnyCollection]":
    """Factory fixture for building collections from positional values.

    Example:
        def test_sum(make_collection) -> None:
            assert make_collection(1, 2, 3).sum() == 6
    """

    def create_collection(*values: object) -> AnyCollection:
        return Collection(list(values))

    return create_collection
