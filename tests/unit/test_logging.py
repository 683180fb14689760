import logging

import pytest
from structlog.testing import capture_logs

from seqcollection import (
    Collection,
    InvalidArgumentError,
    TypedCollection,
    TypeViolationError,
    configure_logging,
)


class TestLoggedEvents:
    def test_reset_logs_dropped_count(self, letters: Collection[str]) -> None:
        with capture_logs() as logs:
            _ = letters.reset()

        assert logs == [
            {"event": "collection_reset", "dropped": 3, "log_level": "debug"},
        ]

    def test_type_violation_on_push(self) -> None:
        collection: TypedCollection[int] = TypedCollection("int")

        with capture_logs() as logs, pytest.raises(TypeViolationError):
            _ = collection.push("x")  # type: ignore[arg-type]

        assert logs == [
            {
                "event": "type_violation",
                "expected": "int",
                "actual": "str",
                "log_level": "warning",
            },
        ]

    def test_type_violation_on_add(self) -> None:
        collection: TypedCollection[int] = TypedCollection("int")

        with capture_logs() as logs, pytest.raises(TypeViolationError):
            _ = collection.add(["x", "y"])  # type: ignore[list-item]

        assert len(logs) == 1
        assert logs[0]["event"] == "type_violation"
        assert logs[0]["count"] == 2

    def test_unresolvable_type(self) -> None:
        with capture_logs() as logs, pytest.raises(InvalidArgumentError):
            _ = TypedCollection("NoSuchClass")

        assert len(logs) == 1
        assert logs[0]["event"] == "type_resolution_failed"
        assert logs[0]["tag"] == "NoSuchClass"
        assert logs[0]["log_level"] == "warning"

    def test_successful_operations_are_quiet(self) -> None:
        with capture_logs() as logs:
            collection: TypedCollection[int] = TypedCollection("int", [1])
            _ = collection.push(2)
            _ = collection.sort().reverse()

        assert logs == []


class TestConfigureLogging:
    def test_default_level_filters_debug(self, letters: Collection[str]) -> None:
        configure_logging()

        with capture_logs() as logs:
            _ = letters.reset()

        assert logs == []

    def test_debug_level(self, letters: Collection[str]) -> None:
        configure_logging(logging.DEBUG)

        with capture_logs() as logs:
            _ = letters.reset()

        assert [entry["event"] for entry in logs] == ["collection_reset"]

    def test_warnings_pass_default_level(self) -> None:
        configure_logging()
        collection: TypedCollection[str] = TypedCollection("string")

        with capture_logs() as logs, pytest.raises(TypeViolationError):
            collection["a"] = 1  # type: ignore[assignment]

        assert [entry["event"] for entry in logs] == ["type_violation"]
